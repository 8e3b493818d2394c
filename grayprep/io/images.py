"""Grayscale PNG decode/encode at 8 and 16 bits per sample."""

from pathlib import Path
from typing import List, Optional
import numpy as np
import cv2

from grayprep.core.errors import InvalidInput, ImageWriteError
from grayprep.core.logging_utils import get_logger

# Extensions picked up when preparing a whole folder
IMAGE_EXTENSIONS = {'.png', '.tif', '.tiff', '.bmp'}


def _to_gray(img: np.ndarray) -> np.ndarray:
    """Collapse BGR/BGRA data to a single channel, keeping the dtype."""
    if img.ndim == 3:
        if img.shape[2] == 4:
            return cv2.cvtColor(img, cv2.COLOR_BGRA2GRAY)
        if img.shape[2] == 3:
            return cv2.cvtColor(img, cv2.COLOR_BGR2GRAY)
        return img[..., 0]
    return img


def _check_dtype(img: Optional[np.ndarray], dtype, source: str) -> Optional[np.ndarray]:
    if img is None:
        get_logger().error(f"Could not decode image: {source}")
        return None
    img = _to_gray(img)
    if img.dtype != dtype:
        get_logger().warning(
            f"Expected {np.dtype(dtype).itemsize * 8}-bit samples in {source}, got {img.dtype}"
        )
        return None
    return img


def _read(file_path: Path) -> Optional[np.ndarray]:
    if not file_path.exists():
        get_logger().error(f"File not found: {file_path}")
        return None
    return cv2.imread(str(file_path), cv2.IMREAD_UNCHANGED)


def load_gray8(file_path: Path) -> Optional[np.ndarray]:
    """
    Load an 8-bit grayscale image. Color images are converted to gray.

    Args:
        file_path: Path to the image file

    Returns:
        2-D uint8 array, or None if the file is missing, unreadable or not
        8 bits per sample
    """
    file_path = Path(file_path)
    return _check_dtype(_read(file_path), np.uint8, str(file_path))


def load_gray16(file_path: Path) -> Optional[np.ndarray]:
    """
    Load a 16-bit grayscale image without any value scaling.

    Args:
        file_path: Path to the image file

    Returns:
        2-D uint16 array, or None if the file is missing, unreadable or not
        16 bits per sample
    """
    file_path = Path(file_path)
    return _check_dtype(_read(file_path), np.uint16, str(file_path))


def decode_gray16(data: bytes) -> Optional[np.ndarray]:
    """
    Decode a 16-bit grayscale image from an in-memory encoded stream.

    Args:
        data: Encoded image bytes (e.g. a PNG response body)

    Returns:
        2-D uint16 array, or None if the bytes cannot be decoded as a
        16-bit image
    """
    if not data:
        get_logger().error("Cannot decode an empty image stream")
        return None
    buf = np.frombuffer(data, dtype=np.uint8)
    try:
        img = cv2.imdecode(buf, cv2.IMREAD_UNCHANGED)
    except cv2.error as e:
        get_logger().error(f"Error decoding image stream: {e}")
        return None
    return _check_dtype(img, np.uint16, "<stream>")


def _write(pixels: np.ndarray, output_path: Path, dtype) -> None:
    arr = np.asarray(pixels)
    if arr.dtype != dtype:
        raise InvalidInput(f"Expected {np.dtype(dtype).name} pixels, got {arr.dtype}")
    if arr.ndim != 2:
        raise InvalidInput(f"Expected a 2-D (height, width) image, got ndim={arr.ndim}")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if not cv2.imwrite(str(output_path), arr):
        raise ImageWriteError(f"Could not write image: {output_path}")


def save_gray16(pixels: np.ndarray, output_path: Path) -> None:
    """
    Save a uint16 image as a 16-bit grayscale PNG.

    Raises:
        InvalidInput: If the array is not 2-D uint16
        ImageWriteError: If OpenCV fails to write the file
    """
    _write(pixels, output_path, np.uint16)


def save_gray8(pixels: np.ndarray, output_path: Path) -> None:
    """
    Save a uint8 image as an 8-bit grayscale PNG.

    Raises:
        InvalidInput: If the array is not 2-D uint8
        ImageWriteError: If OpenCV fails to write the file
    """
    _write(pixels, output_path, np.uint8)


def get_image_files(folder: Path, extensions: Optional[set] = None) -> List[Path]:
    """
    Get all image files from folder, excluding hidden files.

    Args:
        folder: Directory to search
        extensions: Lower-case extensions to accept (default: IMAGE_EXTENSIONS)

    Returns:
        Sorted list of image file paths
    """
    if extensions is None:
        extensions = IMAGE_EXTENSIONS
    extensions = {ext.lower() for ext in extensions}

    files = []
    for item in Path(folder).iterdir():
        if item.name.startswith('.'):
            continue
        if item.is_file() and item.suffix.lower() in extensions:
            files.append(item)

    return sorted(files)
