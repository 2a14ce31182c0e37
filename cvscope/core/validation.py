"""Pure parameter validation rules.

Every function here maps raw trackbar positions to corrected positions without
touching any window state. Callers decide which corrections are written back to
the trackbars.
"""

from __future__ import annotations

__all__ = (
    "GradientOrders",
    "ensure_odd",
    "ensure_positive",
    "validate_gaussian_kernel",
    "validate_gradient_orders",
)

from typing import TypeAlias

GradientOrders: TypeAlias = tuple[int, int]  # dx, dy


def ensure_positive(value: int) -> int:
    """Floor a kernel extent at 1."""
    return max(value, 1)


def ensure_odd(value: int) -> int:
    """Return the smallest odd integer that is at least ``max(value, 1)``.

    Args:
        value: Raw kernel size read from a trackbar.

    Returns:
        int: Odd kernel size, unchanged when ``value`` is already odd and positive.
    """
    value = ensure_positive(value)
    return value if value % 2 else value + 1


def validate_gaussian_kernel(ksize_x: int, ksize_y: int, sigma_x: int) -> tuple[int, int]:
    """Keep the Gaussian kernel computable.

    OpenCV derives the kernel size from sigma when the size is zero, and sigma
    from the size when sigma is zero. With both zero there is nothing to derive
    from, so each zero-sized axis is forced to 1 while ``sigma_x`` is zero. A
    zero ``sigma_y`` falls back to ``sigma_x`` inside OpenCV, so ``sigma_x``
    governs both axes.

    Args:
        ksize_x: Raw kernel width position.
        ksize_y: Raw kernel height position.
        sigma_x: Raw sigma X position.

    Returns:
        tuple[int, int]: Corrected ``(ksize_x, ksize_y)`` positions.
    """
    if sigma_x == 0:
        if ksize_x == 0:
            ksize_x = 1
        if ksize_y == 0:
            ksize_y = 1
    return ksize_x, ksize_y


def validate_gradient_orders(dx: int, dy: int, previous: GradientOrders | None = None) -> GradientOrders:
    """Make the Scharr derivative orders mutually exclusive.

    When both orders read 1, the one that just changed relative to ``previous``
    keeps its value and the other drops to 0; without a known previous state
    ``dx`` wins. When both read 0, ``dy`` is forced to 1.

    Args:
        dx: Raw X derivative order.
        dy: Raw Y derivative order.
        previous: Corrected orders from the preceding iteration, if any.

    Returns:
        GradientOrders: ``(dx, dy)`` with exactly one order set to 1.
    """
    if dx == 1 and dy == 1:
        dy_just_set = previous is not None and previous[1] == 0 and previous[0] == 1
        if dy_just_set:
            dx = 0
        else:
            dy = 0
    if dx == 0 and dy == 0:
        dy = 1
    return dx, dy
