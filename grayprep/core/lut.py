"""Lookup-table descriptor attached to uploaded images."""

from dataclasses import dataclass
from numbers import Integral
from typing import Any, Dict, Tuple

from grayprep.core.errors import InvalidBitDepth
from grayprep.core.gray_range import GrayRange

MAX_BIT_DEPTH = 16


@dataclass(frozen=True)
class LutDescriptor:
    """Linear LUT metadata for an image.

    ``minimum_gray`` and ``maximum_gray`` are stored swapped relative to the
    scanned range; see ``invert_range``.
    """

    gamma: float
    slope: int
    offset: int
    total_grays: int
    minimum_gray: int
    maximum_gray: int

    def to_dict(self) -> Dict[str, Any]:
        """Render with the field names the filter service expects."""
        return {
            'gamma': self.gamma,
            'slope': self.slope,
            'offset': self.offset,
            'totalGrays': self.total_grays,
            'minimumGray': self.minimum_gray,
            'maximumGray': self.maximum_gray,
        }


def invert_range(gray_range: GrayRange) -> Tuple[int, int]:
    """
    Swap scanned extrema for the LUT min/max fields.

    The filter service works on photometrically inverted data. Handing it the
    scanned maximum as its minimum gray (and vice versa) makes its linear map
    come out non-inverted, without touching the pixel values.

    Returns:
        (value for minimum_gray, value for maximum_gray)
    """
    return gray_range.maximum, gray_range.minimum


def validate_bit_depth(bit_depth) -> int:
    """Return bit_depth as an int, or raise InvalidBitDepth if it is not in [1, 16]."""
    if isinstance(bit_depth, bool) or not isinstance(bit_depth, Integral):
        raise InvalidBitDepth(f"Bit depth must be an integer, got {bit_depth!r}")
    if not 1 <= bit_depth <= MAX_BIT_DEPTH:
        raise InvalidBitDepth(f"Bit depth must be in [1, {MAX_BIT_DEPTH}], got {bit_depth}")
    return int(bit_depth)


def build_lut_descriptor(gray_range: GrayRange, bit_depth: int,
                         gamma: float) -> LutDescriptor:
    """
    Build a linear LUT descriptor for an image of the given bit depth.

    Args:
        gray_range: Scanned (minimum, maximum) of the image
        bit_depth: Effective bits per sample, 1..16 (12 for upscaled images)
        gamma: Stored as-is, not validated

    Returns:
        LutDescriptor with total_grays = 2**bit_depth, slope = 2**bit_depth - 1,
        offset = 0 and the extrema inverted

    Raises:
        InvalidBitDepth: If bit_depth is not an integer in [1, 16]
    """
    total_grays = 1 << validate_bit_depth(bit_depth)
    minimum_gray, maximum_gray = invert_range(gray_range)

    return LutDescriptor(
        gamma=gamma,
        slope=total_grays - 1,
        offset=0,
        total_grays=total_grays,
        minimum_gray=minimum_gray,
        maximum_gray=maximum_gray,
    )
