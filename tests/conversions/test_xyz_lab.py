import numpy as np

from chromaconv.conversions import (
    rgb_to_xyz, xyz_to_rgb, np_rgb_to_xyz, np_xyz_to_rgb,
    rgb_to_lab, lab_to_rgb, np_rgb_to_lab, np_lab_to_rgb,
)
from ..samples import samples_rgb_xyz, samples_rgb_lab, round_trip_rgb


def test_rgb_to_xyz():
    for (r, g, b), expected in samples_rgb_xyz.items():
        assert np.allclose(rgb_to_xyz(r, g, b), expected, atol=1e-6)

def test_red_xyz_fixed_point():
    x, y, z = rgb_to_xyz(255, 0, 0)
    assert (round(x, 6), round(y, 6), round(z, 6)) == (0.757088, 0.596903, 0.260887)

def test_rgb_to_xyz_numpy():
    rgb = np.array(list(samples_rgb_xyz.keys()), dtype=float)
    expected = np.array(list(samples_rgb_xyz.values()))
    result = np_rgb_to_xyz(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    assert np.allclose(result, expected, atol=1e-6)

def test_xyz_round_trip():
    for r, g, b in round_trip_rgb:
        assert np.allclose(xyz_to_rgb(*rgb_to_xyz(r, g, b)), (r, g, b), atol=1e-3)

def test_rgb_to_lab():
    for (r, g, b), expected in samples_rgb_lab.items():
        assert np.allclose(rgb_to_lab(r, g, b), expected, atol=1e-2)

def test_lab_lightness_is_never_negative():
    l, _, _ = rgb_to_lab(0, 0, 0)
    assert l == 0.0

def test_lab_round_trip():
    for r, g, b in round_trip_rgb:
        assert np.allclose(lab_to_rgb(*rgb_to_lab(r, g, b)), (r, g, b), atol=1e-3)

def test_lab_numpy_matches_scalar():
    rgb = np.array(round_trip_rgb, dtype=float)
    lab = np_rgb_to_lab(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    assert np.allclose(lab, [rgb_to_lab(*c) for c in round_trip_rgb])

    result = np_lab_to_rgb(lab[..., 0], lab[..., 1], lab[..., 2])
    assert np.allclose(result, rgb, atol=1e-3)

def test_out_of_gamut_lab_saturates():
    r, g, b = lab_to_rgb(100, 127, -127)
    for c in (r, g, b):
        assert 0 <= c <= 255
    assert np.all((np_xyz_to_rgb(1.0, 0.0, 1.0) >= 0) & (np_xyz_to_rgb(1.0, 0.0, 1.0) <= 255))
