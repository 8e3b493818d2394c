"""Bit-depth rescaling between 8-bit and 16-bit grayscale buffers.

The two directions are deliberately NOT inverses of each other:

* ``upscale_8_to_12`` places 8-bit data into the low 12 bits of a 16-bit
  container (``value << 4``), giving the range [0, 4080]. It is not a
  full-range ``x257`` rescale.
* ``downscale_16_to_8`` treats its input as full-range 16-bit data and keeps
  the high byte (``value // 256``).

So ``downscale_16_to_8(upscale_8_to_12(b))`` is ``b // 16``, not ``b``. The
rest of the workflow relies on both conventions as they are.
"""

from typing import Optional
import numpy as np

from grayprep.core.errors import InvalidInput

UINT8_MAX = 255
UINT16_MAX = 65535

# 8-bit -> 12-bit shift
UPSCALE_SHIFT = 4
# 16-bit -> 8-bit divisor
DOWNSCALE_DIVISOR = 256


def _validate_pixels(pixels, max_value: int, width: Optional[int],
                     height: Optional[int]) -> np.ndarray:
    """Check a pixel buffer and return it as an ndarray (no copy if possible).

    Args:
        pixels: 1-D flat or 2-D (height, width) integer buffer
        max_value: Largest sample value allowed in the input
        width: Expected image width (optional, requires height)
        height: Expected image height (optional, requires width)

    Returns:
        The buffer as a numpy array

    Raises:
        InvalidInput: On rank, dtype, length or value-range problems
    """
    arr = np.asarray(pixels)

    if arr.ndim not in (1, 2):
        raise InvalidInput(f"Expected a 1-D or 2-D pixel buffer, got ndim={arr.ndim}")

    if (width is None) != (height is None):
        raise InvalidInput("width and height must be given together")

    if width is not None and arr.size != width * height:
        raise InvalidInput(
            f"Buffer length {arr.size} does not match {width}x{height} = {width * height}"
        )

    if arr.size == 0:
        return arr

    if not np.issubdtype(arr.dtype, np.integer):
        raise InvalidInput(f"Expected an integer pixel buffer, got dtype={arr.dtype}")

    if arr.min() < 0 or arr.max() > max_value:
        raise InvalidInput(f"Pixel values must lie in [0, {max_value}]")

    return arr


def upscale_8_to_12(pixels, width: Optional[int] = None,
                    height: Optional[int] = None) -> np.ndarray:
    """
    Upscale 8-bit gray samples to 12-bit data stored in a uint16 buffer.

    Each output sample is the input sample shifted left by 4 bits
    (multiplied by 16). The shift cannot overflow, so there is no clamping.

    Args:
        pixels: 8-bit samples, 1-D or 2-D
        width: Image width, checked against the buffer length if given
        height: Image height, checked against the buffer length if given

    Returns:
        New uint16 array with the same shape as the input

    Raises:
        InvalidInput: If the buffer does not hold valid 8-bit samples or its
            length differs from width * height
    """
    arr = _validate_pixels(pixels, UINT8_MAX, width, height)
    return np.left_shift(arr.astype(np.uint16), UPSCALE_SHIFT)


def downscale_16_to_8(pixels, width: Optional[int] = None,
                      height: Optional[int] = None) -> np.ndarray:
    """
    Downscale 16-bit gray samples to 8-bit by truncating division by 256.

    The input is treated as full-range 16-bit data, so the low 8 bits are
    discarded. Results always fall in [0, 255].

    Args:
        pixels: 16-bit samples, 1-D or 2-D
        width: Image width, checked against the buffer length if given
        height: Image height, checked against the buffer length if given

    Returns:
        New uint8 array with the same shape as the input

    Raises:
        InvalidInput: If the buffer does not hold valid 16-bit samples or its
            length differs from width * height
    """
    arr = _validate_pixels(pixels, UINT16_MAX, width, height)
    return (arr.astype(np.uint16) // DOWNSCALE_DIVISOR).astype(np.uint8)
