from __future__ import annotations

from typing import Sequence, Tuple, Union

import numpy as np

from scadgen.validation import InvalidParameter, require_finite

ColorInput = Union[Sequence[float], str]


def normalize_color(color: ColorInput) -> Tuple[float, float, float, float] | str:
    """Return an RGBA tuple in [0, 1], or the stripped name/hex string OpenSCAD resolves itself."""

    if isinstance(color, str):
        name = color.strip()
        if not name:
            raise InvalidParameter("Color name must not be empty.")
        return name

    try:
        arr = np.asarray(color, dtype=float).flatten()
    except (TypeError, ValueError) as exc:
        raise InvalidParameter("Color must be RGB or RGBA.") from exc
    if arr.size not in (3, 4):
        raise InvalidParameter("Color must be RGB or RGBA.")
    if np.any(~np.isfinite(arr)) or np.any(arr < 0):
        raise InvalidParameter("Color components must be finite and non-negative.")
    if arr.max() > 1.0:
        arr = arr / 255.0
    rgb = tuple(float(c) for c in arr[:3])
    alpha = float(arr[3]) if arr.size == 4 else 1.0
    return rgb[0], rgb[1], rgb[2], alpha


def normalize_alpha(alpha: float | None) -> float | None:
    if alpha is None:
        return None
    value = require_finite(alpha, "alpha")
    if value < 0.0 or value > 1.0:
        raise InvalidParameter("alpha must be within [0, 1].")
    return value
