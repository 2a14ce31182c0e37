from mock import MagicMock

from cvscope.core import ParameterStore
from cvscope.filters import BlurFilter, GaussianBlurFilter, ScharrFilter
from cvscope.models import BlurConfig


def _window(positions):
    window = MagicMock()
    window.get_pos.side_effect = lambda name: positions[name]
    window.set_pos.side_effect = positions.__setitem__
    return window


def test_trackbars_are_created_from_parameters():
    window = _window({})
    ParameterStore(GaussianBlurFilter(), window)
    window.create_trackbar.assert_any_call("ksize X", 25, 0, 0)
    window.create_trackbar.assert_any_call("sigma X", 60, 30, 0)
    assert window.create_trackbar.call_count == 4


def test_blur_minimum_is_passed_to_trackbar():
    window = _window({})
    ParameterStore(BlurFilter(), window)
    window.create_trackbar.assert_any_call("ksize X", 25, 12, 1)


def test_resolve_blur_without_corrections():
    window = _window({"ksize X": 12, "ksize Y": 12})
    store = ParameterStore(BlurFilter(), window)
    assert store.resolve() == BlurConfig(12, 12)
    window.set_pos.assert_not_called()


def test_gaussian_fallback_is_written_back_to_trackbars():
    positions = {"ksize X": 0, "ksize Y": 0, "sigma X": 0, "sigma Y": 0}
    window = _window(positions)
    store = ParameterStore(GaussianBlurFilter(), window)

    config = store.resolve(option_index=1)

    assert (config.kx, config.ky, config.sigma_x, config.border_index) == (1, 1, 0.0, 1)
    window.set_pos.assert_any_call("ksize X", 1)
    window.set_pos.assert_any_call("ksize Y", 1)
    assert positions["ksize X"] == 1
    assert positions["sigma X"] == 0


def test_odd_rounding_is_not_written_back():
    positions = {"ksize X": 4, "ksize Y": 6, "sigma X": 10, "sigma Y": 0}
    window = _window(positions)
    config = ParameterStore(GaussianBlurFilter(), window).resolve()
    assert (config.kx, config.ky) == (5, 7)
    window.set_pos.assert_not_called()


def test_scharr_dx_set_while_dy_set_clears_dy():
    positions = {"dx": 0, "dy": 1, "scale": 1, "delta": 0}
    window = _window(positions)
    store = ParameterStore(ScharrFilter(), window)
    store.resolve()

    positions["dx"] = 1
    config = store.resolve()

    assert (config.dx, config.dy) == (1, 0)
    window.set_pos.assert_called_once_with("dy", 0)


def test_scharr_dy_set_while_dx_set_clears_dx():
    positions = {"dx": 1, "dy": 0, "scale": 1, "delta": 0}
    window = _window(positions)
    store = ParameterStore(ScharrFilter(), window)
    store.resolve()

    positions["dy"] = 1
    config = store.resolve()

    assert (config.dx, config.dy) == (0, 1)
    assert positions == {"dx": 0, "dy": 1, "scale": 1, "delta": 0}


def test_positions_reads_every_trackbar():
    window = _window({"ksize X": 3, "ksize Y": 9})
    assert ParameterStore(BlurFilter(), window).positions() == {"ksize X": 3, "ksize Y": 9}
