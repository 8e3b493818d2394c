"""Exception types raised by grayprep."""


class GrayPrepError(Exception):
    """Base class for all grayprep errors."""


class InvalidInput(GrayPrepError, ValueError):
    """Pixel buffer has the wrong length, dtype, rank or value range."""


class EmptyBuffer(GrayPrepError, ValueError):
    """A gray range was requested for a buffer with no samples."""


class InvalidBitDepth(GrayPrepError, ValueError):
    """Bit depth is not an integer in [1, 16]."""


class ImageReadError(GrayPrepError, IOError):
    """An image file or stream could not be decoded."""


class ImageWriteError(GrayPrepError, IOError):
    """An image could not be encoded to disk."""


class InvalidBinning(GrayPrepError, ValueError):
    """Acquisition binning mode is not one the filter service knows."""
