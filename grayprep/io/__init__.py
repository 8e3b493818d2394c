"""Image and record I/O."""

from grayprep.io.images import (
    load_gray8,
    load_gray16,
    decode_gray16,
    save_gray8,
    save_gray16,
    get_image_files,
    IMAGE_EXTENSIONS,
)
from grayprep.io.metadata import (
    build_image_info,
    validate_binning,
    lut_from_dict,
    save_image_info,
    load_image_info,
    BINNING_MODES,
)

__all__ = [
    "load_gray8",
    "load_gray16",
    "decode_gray16",
    "save_gray8",
    "save_gray16",
    "get_image_files",
    "IMAGE_EXTENSIONS",
    "build_image_info",
    "validate_binning",
    "lut_from_dict",
    "save_image_info",
    "load_image_info",
    "BINNING_MODES",
]
