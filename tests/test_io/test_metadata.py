"""Tests for image-info records."""

import json

import pytest

from grayprep.core.gray_range import GrayRange
from grayprep.core.errors import GrayPrepError, InvalidBinning
from grayprep.core.lut import build_lut_descriptor
from grayprep.io.metadata import (
    build_image_info,
    validate_binning,
    lut_from_dict,
    save_image_info,
    load_image_info,
)


@pytest.fixture
def sample_lut():
    return build_lut_descriptor(GrayRange(640, 3200), 12, 1.0)


class TestBuildImageInfo:
    """Tests for build_image_info."""

    def test_structure(self, sample_lut):
        info = build_image_info(sample_lut)
        assert info['acquisitionInfo'] == {'binning': 'Unbinned'}
        assert info['lutInfo']['minimumGray'] == 3200
        assert info['lutInfo']['maximumGray'] == 640
        assert info['lutInfo']['totalGrays'] == 4096

    def test_binned(self, sample_lut):
        info = build_image_info(sample_lut, binning='Binned2x2')
        assert info['acquisitionInfo']['binning'] == 'Binned2x2'

    def test_unknown_binning(self, sample_lut):
        with pytest.raises(InvalidBinning):
            build_image_info(sample_lut, binning='Binned3x3')

    def test_unknown_binning_is_grayprep_error(self):
        """Test batch and CLI error handling can catch bad binning modes."""
        with pytest.raises(GrayPrepError):
            validate_binning('Binned3x3')

    def test_validate_known_binning(self):
        assert validate_binning('Binned2x2') == 'Binned2x2'


class TestLutFromDict:
    """Tests for lut_from_dict."""

    def test_restores_descriptor(self, sample_lut):
        assert lut_from_dict(sample_lut.to_dict()) == sample_lut

    def test_does_not_swap_again(self, sample_lut):
        restored = lut_from_dict(sample_lut.to_dict())
        assert restored.minimum_gray == 3200
        assert restored.maximum_gray == 640


class TestSaveLoadImageInfo:
    """Tests for JSON persistence."""

    def test_save_and_load(self, temp_output_dir, sample_lut):
        info = build_image_info(sample_lut)
        path = temp_output_dir / "nested" / "info.json"
        save_image_info(info, path)

        assert path.exists()
        assert load_image_info(path) == info

    def test_file_is_plain_json(self, temp_output_dir, sample_lut):
        path = temp_output_dir / "info.json"
        save_image_info(build_image_info(sample_lut), path)
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        assert data['lutInfo']['slope'] == 4095

    def test_load_missing_file(self, temp_output_dir):
        assert load_image_info(temp_output_dir / "missing.json") is None

    def test_load_invalid_json(self, temp_output_dir):
        path = temp_output_dir / "bad.json"
        path.write_text("{not json")
        assert load_image_info(path) is None
