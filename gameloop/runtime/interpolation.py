"""Render-side state blending between consecutive ticks."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def interpolate_state(
    previous: Sequence[float] | np.ndarray,
    current: Sequence[float] | np.ndarray,
    alpha: float,
) -> np.ndarray:
    """Blend two tick states linearly, `alpha=0` being `previous`.

    Pass `Render.interpolation` as `alpha` to draw between the last two
    simulated states.
    """
    if not 0.0 <= alpha <= 1.0:
        raise ValueError("alpha must be within [0, 1]")
    prev = np.asarray(previous, dtype=np.float64)
    curr = np.asarray(current, dtype=np.float64)
    if prev.shape != curr.shape:
        raise ValueError(f"state shape mismatch: {prev.shape} != {curr.shape}")
    return prev + (curr - prev) * float(alpha)
