from __future__ import annotations

from typing import TypeAlias


Length: TypeAlias = float

POINTS_PER_INCH = 72.0
MILLIMETERS_PER_INCH = 25.4


def points(value: float) -> Length:
    return float(value)


def inches(value: float) -> Length:
    return float(value) * POINTS_PER_INCH


def millimeters(value: float) -> Length:
    return float(value) / MILLIMETERS_PER_INCH * POINTS_PER_INCH


def centimeters(value: float) -> Length:
    return millimeters(float(value) * 10.0)
