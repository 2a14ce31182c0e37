import pytest

from cvscope.core.codegen import NOT_IMPLEMENTED_NOTICE, Language, render
from cvscope.models import (
    BORDER_TYPES,
    MORPH_SHAPES,
    BlurConfig,
    ErodeConfig,
    FilterKind,
    GaussianBlurConfig,
    ScharrConfig,
)


def test_blur_python_fragment():
    text = render(Language.PYTHON, FilterKind.BLUR, BlurConfig(12, 12))
    assert text == "Python code:\n\ndest = cv2.blur(src, (12, 12))\n\n"


def test_erode_python_fragment_uses_symbolic_shape():
    text = render(Language.PYTHON, FilterKind.ERODE, ErodeConfig(2, 5, 7), MORPH_SHAPES[2])
    lines = text.splitlines()
    assert lines[0] == "Python code:"
    assert lines[1] == ""
    assert lines[2] == "kernel = cv2.getStructuringElement(cv2.MORPH_ELLIPSE, (5, 7))"
    assert lines[3] == "dest = cv2.erode(src, kernel)"


def test_gaussian_python_fragment_renders_floats_and_border():
    config = GaussianBlurConfig(kx=1, ky=3, sigma_x=30.0, sigma_y=0.0, border_index=1)
    text = render(Language.PYTHON, FilterKind.GAUSSIAN_BLUR, config, BORDER_TYPES[1])
    assert (
        "dest = cv2.GaussianBlur(src, (1, 3), sigmaX=30.0, sigmaY=0.0, borderType=cv2.BORDER_REPLICATE)" in text
    )


def test_scharr_python_fragment():
    config = ScharrConfig(dx=0, dy=1, scale=2.0, delta=5.0, border_index=0)
    text = render(Language.PYTHON, FilterKind.SCHARR, config, BORDER_TYPES[0])
    assert "dest = cv2.Scharr(src, cv2.CV_16S, 0, 1, scale=2.0, delta=5.0, borderType=cv2.BORDER_CONSTANT)" in text


def test_missing_option_falls_back_to_default_constant():
    config = ScharrConfig(dx=1, dy=0, scale=1.0, delta=0.0, border_index=0)
    assert "borderType=cv2.BORDER_DEFAULT" in render(Language.PYTHON, FilterKind.SCHARR, config)


def test_fragment_is_valid_python():
    config = GaussianBlurConfig(kx=5, ky=5, sigma_x=1.0, sigma_y=2.0, border_index=3)
    text = render(Language.PYTHON, FilterKind.GAUSSIAN_BLUR, config, BORDER_TYPES[3])
    body = "\n".join(text.splitlines()[1:])
    compile(body, "<fragment>", "exec")


@pytest.mark.parametrize(
    "kind, config",
    [
        (FilterKind.BLUR, BlurConfig(3, 4)),
        (FilterKind.ERODE, ErodeConfig(0, 3, 3)),
        (FilterKind.GAUSSIAN_BLUR, GaussianBlurConfig(1, 1, 0.0, 0.0, 0)),
        (FilterKind.SCHARR, ScharrConfig(1, 0, 0.0, 0.0, 0)),
    ],
)
def test_go_fragment_is_not_implemented(kind, config):
    text = render(Language.GO, kind, config)
    assert text == f"Go code:\n\n{NOT_IMPLEMENTED_NOTICE}\n\n"


@pytest.mark.parametrize("language", list(Language))
def test_render_is_deterministic(language):
    config = ErodeConfig(1, 9, 3)
    first = render(language, FilterKind.ERODE, config, MORPH_SHAPES[1])
    second = render(language, FilterKind.ERODE, ErodeConfig(1, 9, 3), MORPH_SHAPES[1])
    assert first == second
