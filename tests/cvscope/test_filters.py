import numpy as np
import pytest

from cvscope.core.codegen import Language
from cvscope.filters import FILTERS, BlurFilter, ErodeFilter, GaussianBlurFilter, ScharrFilter, get_filter
from cvscope.models import BlurConfig, ErodeConfig, FilterKind, GaussianBlurConfig, ScharrConfig


@pytest.fixture
def frame():
    rng = np.random.default_rng(0)
    return rng.integers(0, 256, size=(32, 48, 3), dtype=np.uint8)


def _initial_positions(spec):
    return {parameter.name: parameter.initial for parameter in spec.parameters}


def test_registry_covers_every_kind():
    assert set(FILTERS) == set(FilterKind)
    assert isinstance(get_filter("gaussian"), GaussianBlurFilter)
    assert isinstance(get_filter(FilterKind.SCHARR), ScharrFilter)


def test_unknown_kind_is_rejected():
    with pytest.raises(ValueError):
        get_filter("sobel")


@pytest.mark.parametrize(
    "spec, expected",
    [
        (BlurFilter(), [("ksize X", 25, 12), ("ksize Y", 25, 12)]),
        (ErodeFilter(), [("ksize X", 25, 12), ("ksize Y", 25, 12)]),
        (GaussianBlurFilter(), [("ksize X", 25, 0), ("ksize Y", 25, 0), ("sigma X", 60, 30), ("sigma Y", 60, 0)]),
        (ScharrFilter(), [("dx", 1, 1), ("dy", 1, 0), ("scale", 60, 0), ("delta", 60, 0)]),
    ],
)
def test_default_trackbars(spec, expected):
    assert [(p.name, p.maximum, p.initial) for p in spec.parameters] == expected


def test_blur_config_keeps_even_extent():
    spec = BlurFilter()
    config = spec.build_config(spec.correct(_initial_positions(spec)))
    assert config == BlurConfig(12, 12)


def test_blur_apply_preserves_shape(frame):
    result = BlurFilter().apply(frame, BlurConfig(5, 5))
    assert result.shape == frame.shape


def test_erode_config_tracks_shape_index():
    spec = ErodeFilter()
    config = spec.build_config({"ksize X": 3, "ksize Y": 0}, option_index=4)
    assert config == ErodeConfig(shape_index=1, kx=3, ky=1)


def test_erode_apply_never_brightens(frame):
    result = ErodeFilter().apply(frame, ErodeConfig(0, 3, 3))
    assert result.shape == frame.shape
    assert np.all(result <= frame)


def test_gaussian_correction_forces_zero_axes_when_sigma_is_zero():
    spec = GaussianBlurFilter()
    raw = {"ksize X": 0, "ksize Y": 0, "sigma X": 0, "sigma Y": 0}
    corrected = spec.correct(raw)
    assert corrected == {"ksize X": 1, "ksize Y": 1, "sigma X": 0, "sigma Y": 0}
    config = spec.build_config(corrected)
    assert (config.kx, config.ky, config.sigma_x) == (1, 1, 0.0)


def test_gaussian_config_rounds_even_kernels_up():
    spec = GaussianBlurFilter()
    raw = {"ksize X": 4, "ksize Y": 0, "sigma X": 30, "sigma Y": 2}
    assert spec.correct(raw) == raw
    assert spec.build_config(raw, 2) == GaussianBlurConfig(5, 1, 30.0, 2.0, 2)


def test_gaussian_apply_with_every_border(frame):
    spec = GaussianBlurFilter()
    for index in range(len(spec.options)):
        result = spec.apply(frame, GaussianBlurConfig(3, 5, 1.0, 0.0, index))
        assert result.shape == frame.shape


def test_scharr_correction_uses_previous_positions():
    spec = ScharrFilter()
    previous = {"dx": 0, "dy": 1, "scale": 1, "delta": 0}
    raw = {"dx": 1, "dy": 1, "scale": 1, "delta": 0}
    assert spec.correct(raw, previous) == {"dx": 1, "dy": 0, "scale": 1, "delta": 0}


def test_scharr_apply_returns_displayable_frame(frame):
    spec = ScharrFilter()
    result = spec.apply(frame, ScharrConfig(1, 0, 1.0, 0.0, 0))
    assert result.dtype == np.uint8
    assert result.shape == frame.shape


def test_window_title_includes_option_description():
    spec = ErodeFilter()
    assert spec.window_title(spec.option(0)) == "Erode - Rectangle - CVscope"
    assert BlurFilter().window_title() == "Blur - CVscope"


def test_option_is_none_without_table():
    assert BlurFilter().option(3) is None


def test_code_fragment_delegates_to_render():
    spec = ErodeFilter()
    text = spec.code_fragment(Language.PYTHON, ErodeConfig(1, 3, 3), spec.option(1))
    assert "cv2.MORPH_CROSS" in text
