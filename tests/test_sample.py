import numpy as np
import pytest

from colorguide.sample import InvalidSample, PlanarSample, Plane


def _plane(size=4):
    return Plane(np.zeros(size, dtype=np.uint8), 1, 2)


def test_rejects_missing_planes():
    with pytest.raises(InvalidSample):
        PlanarSample(planes=(_plane(), _plane()), width=2, height=2)


def test_rejects_bad_strides():
    bad = Plane(np.zeros(4, dtype=np.uint8), 0, 2)
    with pytest.raises(InvalidSample):
        PlanarSample(planes=(_plane(), bad, _plane()), width=2, height=2)


def test_rejects_empty_size():
    with pytest.raises(InvalidSample):
        PlanarSample(planes=(_plane(), _plane(), _plane()), width=0, height=2)


def test_invalid_sample_is_value_error():
    assert issubclass(InvalidSample, ValueError)


def test_from_bgr_frame_layout():
    frame = np.zeros((5, 7, 3), dtype=np.uint8)
    sample = PlanarSample.from_bgr_frame(frame)

    assert (sample.width, sample.height) == (6, 4)
    assert sample.y.buffer.size == 24
    assert sample.u.buffer.size == 6
    assert sample.v.buffer.size == 6
    assert sample.y.row_stride == 6
    assert sample.u.row_stride == 3
    assert sample.u.pixel_stride == 1


def test_from_bgr_frame_neutral_chroma():
    frame = np.full((4, 4, 3), 128, dtype=np.uint8)
    sample = PlanarSample.from_bgr_frame(frame)
    assert np.all(sample.u.buffer == 128)
    assert np.all(sample.v.buffer == 128)


@pytest.mark.parametrize("frame", [
    np.zeros((4, 4), dtype=np.uint8),
    np.zeros((4, 4, 3), dtype=np.float32),
    np.zeros((1, 1, 3), dtype=np.uint8),
])
def test_from_bgr_frame_rejects(frame):
    with pytest.raises(InvalidSample):
        PlanarSample.from_bgr_frame(frame)
