from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np


class InvalidParameter(ValueError):
    """Raised when a geometric parameter is malformed."""


def require_finite(value: float, label: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidParameter(f"{label} must be a number.") from exc
    if not np.isfinite(number):
        raise InvalidParameter(f"{label} must be finite.")
    return number


def require_non_negative(value: float, label: str) -> float:
    number = require_finite(value, label)
    if number < 0:
        raise InvalidParameter(f"{label} must be >= 0 (got {number:g}).")
    return number


def require_positive(value: float, label: str) -> float:
    number = require_finite(value, label)
    if number <= 0:
        raise InvalidParameter(f"{label} must be positive (got {number:g}).")
    return number


def require_vector(value: Sequence[float] | float, label: str, size: int = 3) -> tuple[float, ...]:
    try:
        arr = np.asarray(value, dtype=float).reshape(size)
    except (TypeError, ValueError) as exc:
        raise InvalidParameter(f"{label} must be a {size}D vector.") from exc
    if not np.all(np.isfinite(arr)):
        raise InvalidParameter(f"{label} must be finite.")
    return tuple(float(c) for c in arr)


def require_nonzero_vector(value: Sequence[float], label: str, size: int = 3) -> tuple[float, ...]:
    vec = require_vector(value, label, size)
    if np.linalg.norm(vec) == 0:
        raise InvalidParameter(f"{label} must be non-zero.")
    return vec


def require_count(value: int, label: str, minimum: int = 0) -> int:
    if isinstance(value, bool):
        raise InvalidParameter(f"{label} must be an integer.")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidParameter(f"{label} must be an integer.") from exc
    if not number.is_integer():
        raise InvalidParameter(f"{label} must be an integer.")
    count = int(number)
    if count < minimum:
        raise InvalidParameter(f"{label} must be >= {minimum} (got {count}).")
    return count


def optional_count(value: int | None, label: str, minimum: int = 0) -> int | None:
    return None if value is None else require_count(value, label, minimum)


def optional_positive(value: float | None, label: str) -> float | None:
    return None if value is None else require_positive(value, label)


def require_points(points: Iterable[Sequence[float]], label: str, dims: int, minimum: int) -> tuple[tuple[float, ...], ...]:
    try:
        arr = np.asarray(list(points), dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidParameter(f"{label} must be a list of {dims}D points.") from exc
    if arr.ndim != 2 or arr.shape[1] != dims:
        raise InvalidParameter(f"{label} must be Nx{dims} points.")
    if np.any(~np.isfinite(arr)):
        raise InvalidParameter(f"{label} contain invalid values.")
    if arr.shape[0] < minimum:
        raise InvalidParameter(f"{label} require at least {minimum} points.")
    return tuple(tuple(float(c) for c in row) for row in arr)


def require_indices(
    loops: Iterable[Sequence[int]],
    label: str,
    n_points: int,
    minimum: int,
) -> tuple[tuple[int, ...], ...]:
    result = []
    for loop in loops:
        indices = tuple(require_count(idx, label) for idx in loop)
        if len(indices) < minimum:
            raise InvalidParameter(f"each of {label} needs at least {minimum} indices.")
        if any(idx >= n_points for idx in indices):
            raise InvalidParameter(f"{label} reference a point index out of range (n={n_points}).")
        result.append(indices)
    if not result:
        raise InvalidParameter(f"{label} must not be empty.")
    return tuple(result)
