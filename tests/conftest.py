"""Shared pytest fixtures for grayprep tests."""

import pytest
import numpy as np
from pathlib import Path
import tempfile
import cv2


# =============================================================================
# Pixel Buffer Fixtures
# =============================================================================

@pytest.fixture
def sample_gray8_image():
    """Generate a 480x640 8-bit gray image covering the full 0-255 range."""
    np.random.seed(42)
    img = np.random.randint(0, 256, (480, 640), dtype=np.uint8)
    img[0, 0] = 0
    img[-1, -1] = 255
    return img


@pytest.fixture
def sample_gray16_image():
    """Generate a 512x512 full-range 16-bit gray image."""
    np.random.seed(42)
    return np.random.randint(0, 65536, (512, 512), dtype=np.uint16)


@pytest.fixture
def narrow_gray8_image():
    """8-bit image whose values only span 40-200 (typical sensor export)."""
    np.random.seed(7)
    img = np.random.randint(40, 201, (64, 96), dtype=np.uint8)
    img[0, 0] = 40
    img[-1, -1] = 200
    return img


# =============================================================================
# File System Fixtures
# =============================================================================

@pytest.fixture
def temp_output_dir():
    """Create temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def gray8_png(temp_output_dir, narrow_gray8_image):
    """Write narrow_gray8_image as an 8-bit PNG."""
    path = temp_output_dir / "sample.png"
    cv2.imwrite(str(path), narrow_gray8_image)
    return path


@pytest.fixture
def gray16_png(temp_output_dir, sample_gray16_image):
    """Write sample_gray16_image as a 16-bit PNG."""
    path = temp_output_dir / "filtered16.png"
    cv2.imwrite(str(path), sample_gray16_image)
    return path


@pytest.fixture
def clean_env(monkeypatch):
    """Remove GRAYPREP_* variables so config tests see only defaults."""
    for var in ('GRAYPREP_BIT_DEPTH', 'GRAYPREP_GAMMA', 'GRAYPREP_SCAN_WORKERS',
                'GRAYPREP_BINNING', 'GRAYPREP_OUTPUT_FOLDER'):
        monkeypatch.delenv(var, raising=False)


# =============================================================================
# Skip Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "benchmark: mark test as a performance benchmark"
    )
