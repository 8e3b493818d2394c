"""
grayprep

Prepare 8-bit grayscale images for a remote image-filter service (12-bit
upscaling, gray-range scan, LUT descriptor) and restore filtered 16-bit
results to 8 bits.
"""

__version__ = "0.1.0"

__all__ = [
    "upscale_8_to_12",
    "downscale_16_to_8",
    "scan_gray_range",
    "build_lut_descriptor",
    "prepare_image",
    "restore_image",
]


def __getattr__(name):
    """Lazy imports so the CLIs start without loading OpenCV up front."""
    if name in ("upscale_8_to_12", "downscale_16_to_8"):
        from grayprep.core import rescaler
        return getattr(rescaler, name)
    elif name == "scan_gray_range":
        from grayprep.core.gray_range import scan_gray_range
        return scan_gray_range
    elif name == "build_lut_descriptor":
        from grayprep.core.lut import build_lut_descriptor
        return build_lut_descriptor
    elif name in ("prepare_image", "restore_image"):
        from grayprep.pipeline import workflow
        return getattr(workflow, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
