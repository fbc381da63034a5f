"""Easing curves for slot transitions.

Each curve maps progress ``t`` in ``[0, 1]`` to eased progress, with
``f(0) == 0`` and ``f(1) == 1``.
"""

from typing import Callable, Dict

Curve = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t * t


def ease_out(t: float) -> float:
    inv = 1.0 - t
    return 1.0 - inv * inv * inv


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 4.0 * t * t * t
    inv = -2.0 * t + 2.0
    return 1.0 - inv * inv * inv / 2.0


CURVES: Dict[str, Curve] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
}


def get_curve(name: str) -> Curve:
    """Look up a curve by name.

    Raises:
        KeyError: no curve is registered under *name*.
    """
    return CURVES[name]
