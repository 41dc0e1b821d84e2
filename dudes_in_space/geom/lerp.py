"""Linear interpolation and a smoothing integrator built on it."""

from __future__ import annotations

from typing import Any, Optional


def lerp(a: Any, b: Any, t: float) -> Any:
    """Interpolate linearly from ``a`` (t=0) to ``b`` (t=1)."""
    return a * (1.0 - t) + b * t


class LerpIntegrator:
    """Exponential smoothing: each new value is blended into the previous result."""

    def __init__(self, t: float) -> None:
        self.t = t
        self._prev: Optional[Any] = None

    def proceed(self, value: Any) -> Any:
        """Feed a value and return the smoothed result."""
        prev = value if self._prev is None else self._prev
        self._prev = lerp(prev, value, self.t)
        return self._prev