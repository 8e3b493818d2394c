"""Minimum/maximum gray level scan of 16-bit buffers."""

from concurrent.futures import ThreadPoolExecutor
from numbers import Integral
from typing import List, NamedTuple, Tuple
import numpy as np

from grayprep.core.errors import EmptyBuffer, InvalidInput
from grayprep.core.rescaler import UINT16_MAX


class GrayRange(NamedTuple):
    """Smallest and largest sample value of a non-empty buffer."""

    minimum: int
    maximum: int


def _shard_extrema(shard: np.ndarray) -> Tuple[int, int]:
    return int(shard.min()), int(shard.max())


def _split_shards(arr: np.ndarray, workers: int) -> List[np.ndarray]:
    """Split along the first axis (rows for 2-D input) into non-empty views."""
    return [s for s in np.array_split(arr, workers, axis=0) if s.size]


def scan_gray_range(pixels, workers: int = 1) -> GrayRange:
    """
    Find the minimum and maximum sample of a 16-bit gray buffer.

    With ``workers > 1`` the buffer is split into disjoint row shards that
    are reduced on a thread pool; the partial pairs are then combined with
    plain min/max, so the result is identical to a serial scan.

    Args:
        pixels: 1-D or 2-D buffer of 16-bit samples
        workers: Number of shards/threads to use (default: 1)

    Returns:
        GrayRange with minimum <= maximum

    Raises:
        EmptyBuffer: If the buffer has no samples
        InvalidInput: If the buffer is not integer 1-D/2-D data within the
            16-bit range, or workers is not an integer >= 1
    """
    if isinstance(workers, bool) or not isinstance(workers, Integral) or workers < 1:
        raise InvalidInput(f"workers must be an integer >= 1, got {workers!r}")

    arr = np.asarray(pixels)
    if arr.ndim not in (1, 2):
        raise InvalidInput(f"Expected a 1-D or 2-D pixel buffer, got ndim={arr.ndim}")
    if arr.size == 0:
        raise EmptyBuffer("Cannot scan the gray range of an empty buffer")
    if not np.issubdtype(arr.dtype, np.integer):
        raise InvalidInput(f"Expected an integer pixel buffer, got dtype={arr.dtype}")

    shards = _split_shards(arr, workers) if workers > 1 else [arr]
    if len(shards) == 1:
        partials = [_shard_extrema(shards[0])]
    else:
        with ThreadPoolExecutor(max_workers=len(shards)) as pool:
            partials = list(pool.map(_shard_extrema, shards))

    minimum = min(p[0] for p in partials)
    maximum = max(p[1] for p in partials)

    if minimum < 0 or maximum > UINT16_MAX:
        raise InvalidInput(f"Pixel values must lie in [0, {UINT16_MAX}]")

    return GrayRange(minimum, maximum)
