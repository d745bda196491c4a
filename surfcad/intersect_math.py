"""Geometry helpers for surface intersection and unit conversions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

Vec = Sequence[float]


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box with lower and upper corners."""

    lo: tuple[float, ...]
    hi: tuple[float, ...]


def uv_dist(uvuv: Vec, du: Vec, dv: Vec) -> float:
    """Approximate 3D distance between two parameter pairs (u1, v1, u2, v2)."""
    d_u = uvuv[0] - uvuv[2]
    d_v = uvuv[1] - uvuv[3]
    vec = [d_u * du[i] + d_v * dv[i] for i in range(3)]
    return math.sqrt(sum(c * c for c in vec))


def _separated(o1: BoundingBox, o2: BoundingBox, dims: int) -> bool:
    return any(o1.hi[i] <= o2.lo[i] or o2.hi[i] <= o1.lo[i] for i in range(dims))


def aabb(o1: BoundingBox, o2: BoundingBox) -> bool:
    """Whether two boxes overlap in 3D."""
    return not _separated(o1, o2, 3)


def aabb2(o1: BoundingBox, o2: BoundingBox) -> bool:
    """Whether two boxes overlap in the XY plane."""
    return not _separated(o1, o2, 2)


def bezier_basis(t: float) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """Cubic Bernstein basis values and their derivatives at ``t``."""
    mt = 1 - t
    b1 = (mt, t)
    b2 = (b1[0] * mt, b1[0] * t + b1[1] * mt, b1[1] * t)
    b3 = (
        b2[0] * mt,
        b2[0] * t + b2[1] * mt,
        b2[1] * t + b2[2] * mt,
        b2[2] * t,
    )
    db3 = (
        -b2[0] * 3,
        (b2[0] - b2[1]) * 3,
        (b2[1] - b2[2]) * 3,
        b2[2] * 3,
    )
    return b3, db3


def u_to_w(x: float) -> float:
    return x * 54


def w_to_u(x: float) -> float:
    return x / 54


def u_to_mm(x: float) -> float:
    return x * 150


def mm_to_u(x: float) -> float:
    return x / 150


def uw_to_uh(x: float) -> float:
    return x * 150.0 / (50.0 - 16.0)