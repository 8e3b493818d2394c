"""Bit-depth rescaling, gray-range scanning and LUT descriptors."""

from grayprep.core.errors import (
    GrayPrepError,
    InvalidInput,
    EmptyBuffer,
    InvalidBitDepth,
    InvalidBinning,
    ImageReadError,
    ImageWriteError,
)
from grayprep.core.rescaler import upscale_8_to_12, downscale_16_to_8
from grayprep.core.gray_range import GrayRange, scan_gray_range
from grayprep.core.lut import (
    LutDescriptor,
    invert_range,
    validate_bit_depth,
    build_lut_descriptor,
)

__all__ = [
    "GrayPrepError",
    "InvalidInput",
    "EmptyBuffer",
    "InvalidBitDepth",
    "InvalidBinning",
    "ImageReadError",
    "ImageWriteError",
    "upscale_8_to_12",
    "downscale_16_to_8",
    "GrayRange",
    "scan_gray_range",
    "LutDescriptor",
    "invert_range",
    "validate_bit_depth",
    "build_lut_descriptor",
]
