import numpy as np

from chromaconv.conversions import rgb_to_cmyk, cmyk_to_rgb, np_rgb_to_cmyk, np_cmyk_to_rgb
from ..samples import samples_rgb_cmyk, round_trip_rgb


def test_rgb_to_cmyk():
    for (r, g, b), expected in samples_rgb_cmyk.items():
        result = rgb_to_cmyk(r, g, b)
        assert np.allclose([float(v) for v in result], expected, atol=1e-9)

def test_black_has_no_chromatic_ink():
    assert rgb_to_cmyk(0, 0, 0) == (0.0, 0.0, 0.0, 1.0)

def test_rgb_to_cmyk_numpy():
    rgb = np.array(list(samples_rgb_cmyk.keys()), dtype=float)
    expected = np.array(list(samples_rgb_cmyk.values()))
    result = np_rgb_to_cmyk(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    assert result.shape == (len(samples_rgb_cmyk), 4)
    assert np.allclose(result, expected, atol=1e-9)

def test_cmyk_round_trip():
    for r, g, b in round_trip_rgb:
        assert np.allclose(cmyk_to_rgb(*rgb_to_cmyk(r, g, b)), (r, g, b), atol=1e-9)

def test_cmyk_round_trip_numpy():
    rgb = np.array(round_trip_rgb, dtype=float)
    cmyk = np_rgb_to_cmyk(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    result = np_cmyk_to_rgb(cmyk[..., 0], cmyk[..., 1], cmyk[..., 2], cmyk[..., 3])
    assert np.allclose(result, rgb, atol=1e-9)
