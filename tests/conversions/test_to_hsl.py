import numpy as np
import pytest

from chromaconv.conversions import hsl_to_rgb, np_hsl_to_rgb, rgb_to_hsl, np_rgb_to_hsl
from ..samples import samples_rgb_hsl


def test_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h_out, s_out, l_out = rgb_to_hsl(r, g, b)

        assert abs(h_out - h_exp) < 1e-4
        assert abs(float(s_out) - s_exp) < 1e-6
        assert abs(float(l_out) - l_exp) < 1e-6

def test_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()), dtype=float)
    expected = np.array(list(samples_rgb_hsl.values()))
    result = np_rgb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(result, expected, atol=1e-4)

def test_hsl_to_rgb():
    for (r, g, b), (h, s, l) in samples_rgb_hsl.items():
        r_out, g_out, b_out = hsl_to_rgb(h, s, l)

        assert abs(r_out - r) < 1e-3
        assert abs(g_out - g) < 1e-3
        assert abs(b_out - b) < 1e-3

def test_hsl_to_rgb_numpy():
    hsl = np.array(list(samples_rgb_hsl.values()))
    expected = np.array(list(samples_rgb_hsl.keys()), dtype=float)
    result = np_hsl_to_rgb(hsl[..., 0], hsl[..., 1], hsl[..., 2])
    assert np.allclose(result, expected, atol=1e-3)

def test_hue_sectors():
    # One sample inside each 60° sector
    expected = {
        30: (255, 127.5, 0),
        90: (127.5, 255, 0),
        150: (0, 255, 127.5),
        210: (0, 127.5, 255),
        270: (127.5, 0, 255),
        330: (255, 0, 127.5),
    }
    for hue, rgb_exp in expected.items():
        assert np.allclose(hsl_to_rgb(hue, 1.0, 0.5), rgb_exp)

def test_achromatic_has_zero_hue_and_saturation():
    h, s, l = rgb_to_hsl(42, 42, 42)
    assert h == 0
    assert s == 0
    assert abs(l - 42 / 255) < 1e-12

def test_hue_out_of_range_raises():
    with pytest.raises(ValueError):
        hsl_to_rgb(360, 1.0, 0.5)
    with pytest.raises(ValueError):
        hsl_to_rgb(-1, 1.0, 0.5)
    with pytest.raises(ValueError):
        hsl_to_rgb(float("nan"), 1.0, 0.5)
    with pytest.raises(ValueError):
        np_hsl_to_rgb(np.array([0.0, 360.0]), 1.0, 0.5)

def test_hue_stays_below_360():
    # Red with a hint of blue sits just under 360
    h, _, _ = rgb_to_hsl(255, 0, 1)
    assert 0 <= h < 360
