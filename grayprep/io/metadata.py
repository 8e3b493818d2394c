"""Image-info records sent alongside uploaded images."""

from pathlib import Path
from typing import Any, Dict, Optional
import json

from grayprep.core.errors import InvalidBinning
from grayprep.core.lut import LutDescriptor
from grayprep.core.logging_utils import get_logger

BINNING_MODES = ('Unbinned', 'Binned2x2')


def validate_binning(binning: str) -> str:
    """Return binning unchanged, or raise InvalidBinning for an unknown mode."""
    if binning not in BINNING_MODES:
        raise InvalidBinning(f"Unknown binning mode {binning!r}, expected one of {BINNING_MODES}")
    return binning


def build_image_info(lut: LutDescriptor, binning: str = 'Unbinned') -> Dict[str, Any]:
    """
    Build the image-info record for an upload.

    Args:
        lut: LUT descriptor of the uploaded image
        binning: Acquisition binning mode, one of BINNING_MODES

    Returns:
        Dictionary with ``acquisitionInfo`` and ``lutInfo`` entries

    Raises:
        InvalidBinning: If binning is not a known mode
    """
    return {
        'acquisitionInfo': {'binning': validate_binning(binning)},
        'lutInfo': lut.to_dict(),
    }


def lut_from_dict(data: Dict[str, Any]) -> LutDescriptor:
    """Rebuild a LutDescriptor from its ``to_dict`` form.

    Values are taken as stored; the min/max fields are not swapped again.
    """
    return LutDescriptor(
        gamma=float(data['gamma']),
        slope=int(data['slope']),
        offset=int(data['offset']),
        total_grays=int(data['totalGrays']),
        minimum_gray=int(data['minimumGray']),
        maximum_gray=int(data['maximumGray']),
    )


def save_image_info(info: Dict[str, Any], output_path: Path) -> None:
    """Save an image-info record as JSON."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(info, f, indent=2, ensure_ascii=False)
        f.write('\n')


def load_image_info(info_path: Path) -> Optional[Dict[str, Any]]:
    """
    Load an image-info record.

    Returns:
        The record, or None if the file is missing or not valid JSON
    """
    info_path = Path(info_path)
    if not info_path.exists():
        return None

    try:
        with open(info_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        get_logger().error(f"Error loading image info from {info_path}: {e}")
        return None
