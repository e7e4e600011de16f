import numpy as np
import pytest

from chromavalue.conversions.hsl import rgb_to_hsl, np_rgb_to_hsl
from chromavalue.exceptions import InvalidComponent
from samples import samples_rgb_hsl


def test_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h_out, s_out, l_out = rgb_to_hsl(r, g, b)

        assert abs(h_out - h_exp) < 1e-9
        assert abs(s_out - s_exp) < 1e-9
        assert abs(l_out - l_exp) < 1e-9


def test_rgb_to_hsl_ranges():
    for r in range(0, 256, 15):
        for g in range(0, 256, 15):
            for b in range(0, 256, 15):
                h, s, l = rgb_to_hsl(r, g, b)
                assert 0.0 <= h < 360.0
                assert 0.0 <= s <= 1.0
                assert 0.0 <= l <= 1.0


def test_achromatic_has_zero_hue_and_saturation():
    for v in (0, 1, 77, 128, 254, 255):
        h, s, _ = rgb_to_hsl(v, v, v)
        assert h == 0.0
        assert s == 0.0


def test_rgb_to_hsl_rejects_non_bytes():
    with pytest.raises(InvalidComponent):
        rgb_to_hsl(256, 0, 0)
    with pytest.raises(InvalidComponent):
        rgb_to_hsl(0, -1, 0)
    with pytest.raises(InvalidComponent):
        rgb_to_hsl(0, 0, 0.5)


def test_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    r, g, b = the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2]
    hsl = np_rgb_to_hsl(r, g, b)

    assert hsl.shape == (len(samples_rgb_hsl), 3)
    assert np.allclose(hsl, expected, atol=1e-9)


def test_rgb_to_hsl_numpy_matches_scalar():
    rng = np.random.default_rng(7)
    rgb = rng.integers(0, 256, size=(500, 3))
    hsl = np_rgb_to_hsl(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    for (r, g, b), row in zip(rgb.tolist(), hsl):
        assert np.allclose(row, rgb_to_hsl(r, g, b), atol=1e-9)


def test_rgb_to_hsl_numpy_rejects_non_bytes():
    with pytest.raises(InvalidComponent):
        np_rgb_to_hsl(np.array([0, 300]), 0, 0)
