import numpy as np
import pytest

from chromaconv.conversions import convert, to_canonical, np_convert, np_convert_to_rgb, ColorSpace
from chromaconv.types.color_types import is_hue_space, to_color_space
from ..samples import samples_rgb_hsv, round_trip_rgb

ARRAY_SPACES = ["hsl", "hsv", "hsi", "hwb", "cmyk", "xyz", "lab", "ycbcr", "yuv"]


def test_convert_returns_tuple():
    result = convert((255, 128, 64), "hsv")
    assert isinstance(result, tuple)
    assert len(result) == 3
    h, s, v = result
    h_exp, s_exp, v_exp = samples_rgb_hsv[(255, 128, 64)]
    assert abs(h - h_exp) < 1e-4
    assert abs(s - s_exp) < 1e-6
    assert abs(v - v_exp) < 1e-6

def test_adds_alpha():
    assert convert((255, 128, 64), "rgba") == (255, 128, 64, 1.0)
    assert convert((255, 128, 64, 0.5), ColorSpace.RGBA) == (255, 128, 64, 0.5)

    h, s, l, a = convert((0, 128, 128, 0.25), "hsla")
    assert (h, a) == (180, 0.25)

def test_convert_to_hex():
    assert convert((0, 128, 128), "hex") == "#008080"
    assert convert((0, 0, 0, 0.2), "hex") == "#00000033"

def test_space_names_are_case_insensitive():
    assert convert((255, 0, 0), "HSL") == convert((255, 0, 0), ColorSpace.HSL)

def test_unknown_space_raises():
    with pytest.raises(ValueError):
        convert((0, 0, 0), "lch")
    with pytest.raises(ValueError):
        to_canonical((0, 0, 0), "lch")

def test_to_canonical():
    assert to_canonical((255, 0, 0), "rgb") == (255, 0, 0, 1.0)
    assert to_canonical("#0003", "hex")[3] == pytest.approx(0.2)
    r, g, b, a = to_canonical((180, 1.0, 0.25, 0.5), "hsla")
    assert np.allclose((r, g, b), (0, 127.5, 127.5))
    assert a == 0.5

def test_to_canonical_rejects_hue_360():
    with pytest.raises(ValueError):
        to_canonical((360, 1.0, 0.5), "hsl")

@pytest.mark.parametrize("space", ARRAY_SPACES)
def test_numpy_matches_scalar(space):
    rgb = np.array(round_trip_rgb, dtype=float)
    result = np_convert(rgb, space)
    expected = np.array([convert(c, space) for c in round_trip_rgb], dtype=float)
    assert np.allclose(result, expected, atol=1e-9)

@pytest.mark.parametrize("space", ARRAY_SPACES)
def test_numpy_to_rgb_matches_scalar(space):
    values = np.array([convert(c, space) for c in round_trip_rgb], dtype=float)
    result = np_convert_to_rgb(values, space)
    expected = np.array([to_canonical(tuple(v), space)[:3] for v in values])
    assert np.allclose(result, expected, atol=1e-9)

def test_numpy_rgb_is_identity():
    rgb = np.array(round_trip_rgb, dtype=float)
    assert np.array_equal(np_convert(rgb, "rgb"), rgb)
    assert np.array_equal(np_convert_to_rgb(rgb, "rgb"), rgb)

def test_numpy_rejects_hex_and_alpha_spaces():
    rgb = np.zeros((2, 3))
    with pytest.raises(ValueError):
        np_convert(rgb, "hex")
    with pytest.raises(ValueError):
        np_convert_to_rgb(rgb, "rgba")

def test_space_helpers():
    assert is_hue_space("HSLA")
    assert is_hue_space(ColorSpace.HWB)
    assert not is_hue_space("cmyk")
    assert to_color_space("YCbCr") is ColorSpace.YCBCR
    with pytest.raises(ValueError):
        to_color_space("lch")
