"""Code fragment generation for the current filter call.

:func:`render` turns a resolved configuration into text the operator can paste
into their own program. Python is fully supported; Go is reserved and only
emits a "not implemented" notice.
"""

from __future__ import annotations

__all__ = (
    "Language",
    "NOT_IMPLEMENTED_NOTICE",
    "render",
)

import enum
from typing import TYPE_CHECKING, Final, cast

from cvscope.models import FilterKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from cvscope.models import BlurConfig, ErodeConfig, FilterConfig, GaussianBlurConfig, OptionEntry, ScharrConfig

NOT_IMPLEMENTED_NOTICE: Final[str] = "Not implemented."
_MODULE: Final[str] = "cv2"
_DEFAULT_SHAPE: Final[str] = "MORPH_RECT"
_DEFAULT_BORDER: Final[str] = "BORDER_DEFAULT"


class Language(enum.Enum):
    """Target languages for code fragments."""

    PYTHON = "Python"
    GO = "Go"


def _header(language: Language) -> str:
    return f"{language.value} code:"


def _float(value: float) -> str:
    return f"{value:.1f}"


def _option(option: OptionEntry | None, default: str) -> str:
    name = option.symbolic_name if option is not None else default
    return f"{_MODULE}.{name}"


def _python_blur(config: FilterConfig, _: OptionEntry | None) -> list[str]:
    blur = cast("BlurConfig", config)
    return [f"dest = {_MODULE}.blur(src, ({blur.kx}, {blur.ky}))"]


def _python_erode(config: FilterConfig, option: OptionEntry | None) -> list[str]:
    erode = cast("ErodeConfig", config)
    return [
        f"kernel = {_MODULE}.getStructuringElement({_option(option, _DEFAULT_SHAPE)}, ({erode.kx}, {erode.ky}))",
        f"dest = {_MODULE}.erode(src, kernel)",
    ]


def _python_gaussian_blur(config: FilterConfig, option: OptionEntry | None) -> list[str]:
    gaussian = cast("GaussianBlurConfig", config)
    return [
        f"dest = {_MODULE}.GaussianBlur(src, ({gaussian.kx}, {gaussian.ky}), "
        f"sigmaX={_float(gaussian.sigma_x)}, sigmaY={_float(gaussian.sigma_y)}, borderType={_option(option, _DEFAULT_BORDER)})"
    ]


def _python_scharr(config: FilterConfig, option: OptionEntry | None) -> list[str]:
    scharr = cast("ScharrConfig", config)
    return [
        f"dest = {_MODULE}.Scharr(src, {_MODULE}.CV_16S, {scharr.dx}, {scharr.dy}, "
        f"scale={_float(scharr.scale)}, delta={_float(scharr.delta)}, borderType={_option(option, _DEFAULT_BORDER)})"
    ]


_PYTHON_RENDERERS: Final[dict[FilterKind, Callable[[FilterConfig, OptionEntry | None], list[str]]]] = {
    FilterKind.BLUR: _python_blur,
    FilterKind.ERODE: _python_erode,
    FilterKind.GAUSSIAN_BLUR: _python_gaussian_blur,
    FilterKind.SCHARR: _python_scharr,
}


def render(language: Language, kind: FilterKind, config: FilterConfig, option: OptionEntry | None = None) -> str:
    """Render a copy-pasteable call expression for the given filter state.

    The output is a header line naming the language, a blank line, the call
    expression (or a not-implemented notice), and a trailing blank line. The
    function is pure: identical arguments always produce identical text.

    Args:
        language: Target language.
        kind: Filter the configuration belongs to.
        config: Resolved configuration; assumed valid.
        option: Current discrete option, for filters that have one.

    Returns:
        str: Newline-terminated code fragment.
    """
    if language is Language.PYTHON:
        body = _PYTHON_RENDERERS[kind](config, option)
    else:
        body = [NOT_IMPLEMENTED_NOTICE]
    return "\n".join([_header(language), "", *body, "", ""])
