"""Prepare 8-bit images for the filter service and restore its results.

Prepare: 8-bit PNG -> 12-bit data in a 16-bit PNG -> gray range -> LUT
descriptor -> image-info record. Restore: 16-bit PNG (file or response
bytes) -> 8-bit PNG.

Outputs are named after the input stem (``scan.png`` -> ``scan.scaled12.png``,
``scan.filtered.png``), not after the full file name as in the original
sample workflow (``scan.png.scaled12.png``).
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from tqdm import tqdm

from grayprep.core.errors import GrayPrepError, ImageReadError
from grayprep.core.gray_range import GrayRange, scan_gray_range
from grayprep.core.logging_utils import get_logger
from grayprep.core.lut import LutDescriptor, build_lut_descriptor, validate_bit_depth
from grayprep.core.rescaler import upscale_8_to_12, downscale_16_to_8
from grayprep.io.images import (
    load_gray8,
    load_gray16,
    decode_gray16,
    save_gray8,
    save_gray16,
    get_image_files,
)
from grayprep.io.metadata import build_image_info, save_image_info, validate_binning

SCALED_SUFFIX = ".scaled12"
RESTORED_SUFFIX = ".filtered"
# Upscaled images always carry 12 significant bits
SCALED_BIT_DEPTH = 12


@dataclass
class PreparedImage:
    """Result of preparing one image for upload."""

    source_path: Path
    scaled_path: Path
    gray_range: GrayRange
    lut: LutDescriptor
    image_info: Dict[str, Any]
    info_path: Optional[Path] = None


def scaled_path_for(input_path: Path, output_folder: Optional[Path] = None) -> Path:
    """Return ``<stem>.scaled12.png`` next to the input or in output_folder."""
    input_path = Path(input_path)
    folder = Path(output_folder) if output_folder else input_path.parent
    return folder / f"{input_path.stem}{SCALED_SUFFIX}.png"


def restored_path_for(input_path: Path, output_folder: Optional[Path] = None) -> Path:
    """Return ``<stem>.filtered.png`` next to the input or in output_folder."""
    input_path = Path(input_path)
    folder = Path(output_folder) if output_folder else input_path.parent
    stem = input_path.stem
    if stem.endswith(SCALED_SUFFIX):
        stem = stem[:-len(SCALED_SUFFIX)]
    return folder / f"{stem}{RESTORED_SUFFIX}.png"


def prepare_image(
    input_path: Path,
    output_folder: Optional[Path] = None,
    bit_depth: int = SCALED_BIT_DEPTH,
    gamma: float = 1.0,
    binning: str = "Unbinned",
    workers: int = 1,
    save_info: bool = True,
) -> PreparedImage:
    """
    Upscale an 8-bit image and build its upload record.

    The gray range is scanned from the re-read 16-bit file so the LUT
    describes exactly what gets uploaded. Settings are checked before
    anything is written, and a scaled image whose record could not be built
    is removed again.

    Args:
        input_path: 8-bit grayscale image
        output_folder: Where to write outputs (default: next to the input)
        bit_depth: LUT bit depth (default: 12)
        gamma: LUT gamma, passed through unchanged
        binning: Acquisition binning mode for the image-info record
        workers: Threads used by the gray-range scan
        save_info: Also write the image-info record as ``<stem>.scaled12.json``

    Returns:
        PreparedImage with output paths, gray range, LUT and image-info record

    Raises:
        ImageReadError: If the input or the written 16-bit file cannot be read
        InvalidBitDepth, InvalidBinning: On bad settings, before any write
    """
    input_path = Path(input_path)
    validate_bit_depth(bit_depth)
    validate_binning(binning)

    pixels8 = load_gray8(input_path)
    if pixels8 is None:
        raise ImageReadError(f"Could not read 8-bit grayscale image: {input_path}")

    scaled_path = scaled_path_for(input_path, output_folder)
    save_gray16(upscale_8_to_12(pixels8), scaled_path)

    try:
        pixels16 = load_gray16(scaled_path)
        if pixels16 is None:
            raise ImageReadError(f"Could not re-read 16-bit image: {scaled_path}")

        gray_range = scan_gray_range(pixels16, workers=workers)
        lut = build_lut_descriptor(gray_range, bit_depth, gamma)
        image_info = build_image_info(lut, binning)
    except GrayPrepError:
        scaled_path.unlink(missing_ok=True)
        raise

    info_path = None
    if save_info:
        info_path = scaled_path.with_suffix(".json")
        save_image_info(image_info, info_path)

    return PreparedImage(
        source_path=input_path,
        scaled_path=scaled_path,
        gray_range=gray_range,
        lut=lut,
        image_info=image_info,
        info_path=info_path,
    )


def _is_generated(path: Path) -> bool:
    return path.stem.endswith((SCALED_SUFFIX, RESTORED_SUFFIX))


def prepare_folder(
    folder: Path,
    output_folder: Optional[Path] = None,
    extensions: Optional[set] = None,
    **kwargs: Any,
) -> List[PreparedImage]:
    """
    Prepare every 8-bit image in a folder.

    Files produced by this workflow (``*.scaled12.*``, ``*.filtered.*``) are
    skipped. Failures are logged per file and do not stop the batch.

    Args:
        folder: Folder containing 8-bit images
        output_folder: Where to write outputs (default: the input folder)
        extensions: Extensions to pick up (default: IMAGE_EXTENSIONS)
        **kwargs: Passed on to prepare_image

    Returns:
        PreparedImage for each file that succeeded
    """
    logger = get_logger()
    files = [f for f in get_image_files(folder, extensions) if not _is_generated(f)]

    if not files:
        logger.warning(f"No image files found in {folder}")
        return []

    logger.info(f"Found {len(files)} image(s) in {folder}")

    prepared = []
    for file_path in tqdm(files, desc="Preparing", unit="image"):
        try:
            result = prepare_image(file_path, output_folder=output_folder, **kwargs)
        except GrayPrepError as e:
            logger.error(f"{file_path.name}: {e}", indent=2)
            continue
        logger.success(f"{file_path.name} -> {result.scaled_path.name} "
                       f"(gray range {result.gray_range.minimum}-{result.gray_range.maximum})",
                       indent=2)
        prepared.append(result)

    logger.info(f"Prepared {len(prepared)}/{len(files)} image(s)")
    return prepared


def restore_image(source: Union[Path, bytes], output_path: Path) -> Path:
    """
    Downscale a filtered 16-bit image to 8 bits and save it as PNG.

    Args:
        source: Path to a 16-bit image, or its encoded bytes
        output_path: Destination of the 8-bit PNG

    Returns:
        output_path

    Raises:
        ImageReadError: If the source cannot be decoded as a 16-bit image
    """
    if isinstance(source, (bytes, bytearray)):
        pixels16 = decode_gray16(bytes(source))
        label = "<stream>"
    else:
        pixels16 = load_gray16(Path(source))
        label = str(source)

    if pixels16 is None:
        raise ImageReadError(f"Could not read 16-bit grayscale image: {label}")

    output_path = Path(output_path)
    save_gray8(downscale_16_to_8(pixels16), output_path)
    return output_path
