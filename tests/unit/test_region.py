from __future__ import annotations

import numpy as np
import pytest

from skintrack.calib.overlay import outside_mask, overlay_frame
from skintrack.calib.region import Region, sample
from skintrack.errors import UsageError


def _gradient(h=6, w=8):
    frame = np.zeros((h, w, 3), dtype=np.uint8)
    for y in range(h):
        for x in range(w):
            frame[y, x] = (10 * y + x, 100 + x, 200 + y)
    return frame


def test_centered_region_uses_box_semantics():
    r = Region.centered_in(640, 480)
    assert (r.x, r.y, r.width, r.height) == (320, 240, 32, 24)


def test_negative_half_extent_rejected():
    with pytest.raises(UsageError):
        Region(5, 5, -1, 2)


def test_contains_is_strict():
    r = Region(4, 3, 2, 1)
    assert r.contains(4, 3)
    assert r.contains(3, 3) and r.contains(5, 3)
    assert not r.contains(2, 3)
    assert not r.contains(6, 3)
    assert not r.contains(4, 2)
    assert not Region(4, 3, 0, 0).contains(4, 3)


def test_sample_row_major():
    frame = _gradient()
    c0, c1, c2 = sample(frame, Region(4, 3, 2, 1))
    # rows 2..3, cols 2..5
    assert list(c0) == [22, 23, 24, 25, 32, 33, 34, 35]
    assert list(c1) == [102, 103, 104, 105] * 2
    assert list(c2) == [202] * 4 + [203] * 4
    assert isinstance(c0, bytearray)


def test_sample_honours_row_stride():
    # a column slice has a row stride larger than width * channels
    wide = _gradient(6, 16)
    frame = wide[:, 4:12]
    assert frame.strides[0] > frame.shape[1] * 3
    c0, _, _ = sample(frame, Region(2, 2, 1, 1))
    assert list(c0) == [15, 16, 25, 26]


def test_sample_requires_three_channels():
    with pytest.raises(UsageError, match="1 channels"):
        sample(np.zeros((8, 8), dtype=np.uint8), Region(4, 4, 1, 1))


def test_sample_rejects_region_outside_frame():
    with pytest.raises(UsageError):
        sample(_gradient(), Region(1, 3, 2, 1))


def test_empty_region_samples_nothing():
    assert sample(_gradient(), Region(4, 3, 0, 0)) == (bytearray(), bytearray(), bytearray())


def test_overlay_covering_region_leaves_frame_alone():
    frame = _gradient()
    before = frame.copy()
    overlay_frame(frame, Region(4, 3, 8, 6))
    assert np.array_equal(frame, before)


def test_overlay_zero_region_darkens_everything():
    frame = _gradient()
    before = frame.copy()
    overlay_frame(frame, Region(4, 3, 0, 0))
    assert np.array_equal(frame, before // 4)


def test_overlay_only_touches_outside():
    frame = np.full((5, 7, 3), 200, dtype=np.uint8)
    region = Region(3, 2, 2, 2)
    overlay_frame(frame, region)
    for y in range(5):
        for x in range(7):
            expected = 200 if region.contains(x, y) else 50
            assert (frame[y, x] == expected).all()


def test_overlay_repeats_divide_again():
    frame = np.full((4, 4), 255, dtype=np.uint8)
    overlay_frame(frame, Region(0, 0, 0, 0))
    overlay_frame(frame, Region(0, 0, 0, 0))
    assert (frame == 15).all()


def test_contains_on_grid_matches_scalar_checks():
    region = Region(3, 2, 2, 1)
    ys, xs = np.ogrid[:5, :7]
    grid = region.contains(xs, ys)
    assert grid.shape == (5, 7)
    for y in range(5):
        for x in range(7):
            assert bool(grid[y, x]) == region.contains(x, y)
    assert np.array_equal(outside_mask((5, 7, 3), region), ~grid)
