import numpy as np
import pytest

from chromaconv.conversions import (
    rgb_to_hsi, hsi_to_rgb, np_rgb_to_hsi, np_hsi_to_rgb,
    rgb_to_hwb, hwb_to_rgb, np_rgb_to_hwb, np_hwb_to_rgb,
)
from ..samples import samples_rgb_hsi, samples_rgb_hwb, round_trip_rgb


def test_rgb_to_hsi():
    for (r, g, b), (h_exp, s_exp, i_exp) in samples_rgb_hsi.items():
        h, s, i = rgb_to_hsi(r, g, b)

        assert abs(h - h_exp) < 1e-6
        assert abs(float(s) - s_exp) < 1e-9
        assert abs(float(i) - i_exp) < 1e-9

def test_rgb_to_hsi_numpy():
    rgb = np.array(list(samples_rgb_hsi.keys()), dtype=float)
    expected = np.array(list(samples_rgb_hsi.values()))
    result = np_rgb_to_hsi(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    assert np.allclose(result, expected, atol=1e-6)

def test_hsi_round_trip():
    for r, g, b in round_trip_rgb:
        r_out, g_out, b_out = hsi_to_rgb(*rgb_to_hsi(r, g, b))

        assert abs(r_out - r) < 1e-4
        assert abs(g_out - g) < 1e-4
        assert abs(b_out - b) < 1e-4

def test_hsi_round_trip_numpy():
    rgb = np.array(round_trip_rgb, dtype=float)
    hsi = np_rgb_to_hsi(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    result = np_hsi_to_rgb(hsi[..., 0], hsi[..., 1], hsi[..., 2])
    assert np.allclose(result, rgb, atol=1e-4)

def test_hsi_gray_stays_gray():
    for k in range(0, 10001, 7):
        r, g, b = hsi_to_rgb(0, 0, k / 10000)
        assert r == g == b

        h, s, _ = rgb_to_hsi(r, g, b)
        assert h == 0.0
        assert abs(float(s)) < 1e-12

def test_rgb_to_hsi_treats_float_noise_as_gray():
    h, s, i = rgb_to_hsi(178.5, 178.49999999999994, 178.5)
    assert h == 0.0
    assert abs(float(s)) < 1e-12
    assert abs(float(i) - 0.7) < 1e-12

    hsi = np_rgb_to_hsi(np.array([178.5]), np.array([178.49999999999994]), np.array([178.5]))
    assert hsi[0, 0] == 0.0

def test_hsi_gray_numpy():
    i = np.linspace(0, 1, 101)
    rgb = np_hsi_to_rgb(np.zeros_like(i), np.zeros_like(i), i)
    assert np.array_equal(rgb[..., 0], rgb[..., 1])
    assert np.array_equal(rgb[..., 1], rgb[..., 2])
    assert np.allclose(rgb[..., 0], i * 255)

    hsi = np_rgb_to_hsi(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    assert np.all(hsi[..., 0] == 0)

def test_hsi_hue_out_of_range_raises():
    with pytest.raises(ValueError):
        hsi_to_rgb(360, 0.5, 0.5)

def test_rgb_to_hwb():
    for (r, g, b), (h_exp, w_exp, b_exp) in samples_rgb_hwb.items():
        h, w, bk = rgb_to_hwb(r, g, b)

        assert abs(h - h_exp) < 1e-4
        assert abs(float(w) - w_exp) < 1e-9
        assert abs(float(bk) - b_exp) < 1e-9

def test_rgb_to_hwb_numpy():
    rgb = np.array(list(samples_rgb_hwb.keys()), dtype=float)
    expected = np.array(list(samples_rgb_hwb.values()))
    result = np_rgb_to_hwb(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    assert np.allclose(result, expected, atol=1e-4)

def test_hwb_round_trip():
    for r, g, b in round_trip_rgb:
        r_out, g_out, b_out = hwb_to_rgb(*rgb_to_hwb(r, g, b))

        assert abs(r_out - r) < 1e-6
        assert abs(g_out - g) < 1e-6
        assert abs(b_out - b) < 1e-6

def test_hwb_gray_when_whiteness_and_blackness_saturate():
    assert hwb_to_rgb(0, 0.5, 0.5) == (127.5, 127.5, 127.5)
    # w + b > 1 normalizes to w / (w + b)
    r, g, b = hwb_to_rgb(200, 0.6, 0.6)
    assert r == g == b
    assert abs(r - 127.5) < 1e-9

def test_hwb_gray_numpy_matches_scalar():
    h = np.array([0.0, 200.0, 30.0])
    w = np.array([0.5, 0.6, 0.2])
    bk = np.array([0.5, 0.6, 0.1])
    result = np_hwb_to_rgb(h, w, bk)
    expected = [hwb_to_rgb(*args) for args in zip(h, w, bk)]
    assert np.allclose(result, expected)
