"""Cross-check normalized output against svgpathtools' independent parser."""

import numpy as np
import pytest

from pathnorm.svg.normalizer import normalize
from pathnorm.svg.tokenizer import tokenize
from pathnorm.utils.geometry import bbox, sample_commands
from tests.conftest import HOME_PATH, ROTATED_ARC_PATH, SMILE_PATH, WAVE_PATH

svgpathtools = pytest.importorskip("svgpathtools")

PATHS = [HOME_PATH, SMILE_PATH, WAVE_PATH, ROTATED_ARC_PATH]


def _samples(path_data: str) -> np.ndarray:
    return sample_commands(normalize(tokenize(path_data)), samples_per_segment=400)


@pytest.mark.parametrize("path_data", PATHS)
def test_bbox_matches(path_data):
    xmin, xmax, ymin, ymax = svgpathtools.parse_path(path_data).bbox()
    assert bbox(_samples(path_data)) == pytest.approx((xmin, ymin, xmax, ymax), abs=0.01)


@pytest.mark.parametrize("path_data", PATHS)
def test_length_matches(path_data):
    expected = svgpathtools.parse_path(path_data).length()
    pts = _samples(path_data)
    length = float(np.sum(np.hypot(*np.diff(pts, axis=0).T)))
    assert length == pytest.approx(expected, rel=1e-3)


@pytest.mark.parametrize("path_data", PATHS)
def test_end_point_matches(path_data):
    end = svgpathtools.parse_path(path_data).end
    assert tuple(_samples(path_data)[-1]) == pytest.approx((end.real, end.imag), abs=1e-6)
