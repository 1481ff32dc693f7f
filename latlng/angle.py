"""Angle conversion and normalization shared by the geometry formulas.

All functions are pure and keep the precision of their argument: a NumPy
floating scalar comes back as the same NumPy type, Python ``int`` and
``float`` come back as ``float``. NaN and infinities propagate through the
conversions under ordinary floating-point rules.

Normalization maps an angle in degrees onto a 360° wide canonical interval
while preserving its equivalence class modulo 360:

    - normalize_relative: ``[-180, 180)``, for signed differences and headings
    - normalize_absolute: ``[0, 360)``, for compass bearings

Two inputs are special-cased by both normalizers. NaN is returned unchanged,
and any magnitude above ``NORMALIZE_LIMIT`` (infinities included) returns
zero, since 360 is below the float spacing at such magnitudes and the
representative is meaningless.

Example:
    >>> to_radian(180.0)
    3.141592653589793
    >>> normalize_relative(190.0)
    -170.0
    >>> normalize_absolute(-90.0)
    270.0
"""

from __future__ import annotations

import logging

import numpy as np

from .config import NORMALIZE_LIMIT, FloatT, float_type, pi_for

logger = logging.getLogger(__name__)


def to_radian(deg: FloatT) -> FloatT:
    """Convert degrees to radians."""
    kind = float_type(deg)
    return kind(deg) * pi_for(kind) / kind(180.0)


def from_radian(rad: FloatT) -> FloatT:
    """Convert radians to degrees."""
    kind = float_type(rad)
    return kind(rad) * kind(180.0) / pi_for(kind)


def _escape(deg, kind):
    """Return the special-cased result for ``deg``, or None to normalize it."""
    if np.isnan(deg):
        return kind(deg)
    if deg > NORMALIZE_LIMIT or deg < -NORMALIZE_LIMIT:
        logger.debug("Angle %r beyond normalization limit, using 0", deg)
        return kind(0.0)
    return None


def normalize_relative(deg: FloatT) -> FloatT:
    """Wrap an angle in degrees into ``[-180, 180)``.

    Args:
        deg: Angle in degrees.

    Returns:
        The congruent angle in ``[-180, 180)``, NaN for NaN, and 0 when
        ``|deg|`` exceeds ``NORMALIZE_LIMIT``.
    """
    kind = float_type(deg)
    special = _escape(deg, kind)
    if special is not None:
        return special

    full_turn = kind(360.0)
    wrapped = kind(np.fmod(kind(deg), full_turn))
    if wrapped >= 180.0:
        wrapped = wrapped - full_turn
    elif wrapped < -180.0:
        wrapped = wrapped + full_turn
    return wrapped


def normalize_absolute(deg: FloatT) -> FloatT:
    """Wrap an angle in degrees into ``[0, 360)``.

    Args:
        deg: Angle in degrees.

    Returns:
        The congruent angle in ``[0, 360)``, NaN for NaN, and 0 when
        ``|deg|`` exceeds ``NORMALIZE_LIMIT``.
    """
    kind = float_type(deg)
    special = _escape(deg, kind)
    if special is not None:
        return special

    full_turn = kind(360.0)
    wrapped = kind(np.fmod(kind(deg), full_turn))
    if wrapped < 0.0:
        wrapped = wrapped + full_turn
    # a tiny negative remainder can round up to a full turn
    if wrapped >= full_turn:
        wrapped = wrapped - full_turn
    return wrapped
