"""Conversion between E6 latitude/longitude pairs and 64-bit S2 leaf cell ids.

This is a compact S2 implementation using the quadratic UV/ST transform.
It is accurate enough to drive placewords encoding, but it is not
guaranteed to agree bit for bit with the reference S2 library.
"""

from __future__ import annotations

import math
from enum import IntEnum

_LEVELS = 30
_MASK64 = (1 << 64) - 1
_E6 = 1_000_000


class Face(IntEnum):
    """The six faces of the S2 cube."""

    XPOS = 0  # africa
    YPOS = 1  # asia
    ZPOS = 2  # north
    XNEG = 3  # pacific
    YNEG = 4  # americas
    ZNEG = 5  # south


def _uv_to_st(u: float) -> float:
    if u >= 0.0:
        return 0.5 * math.sqrt(1.0 + 3.0 * u)
    return 1.0 - 0.5 * math.sqrt(1.0 - 3.0 * u)


def _st_to_uv(s: float) -> float:
    if s >= 0.5:
        return (4.0 * s * s - 1.0) / 3.0
    return (1.0 - 4.0 * (1.0 - s) * (1.0 - s)) / 3.0


def _xyz_to_face_uv(x: float, y: float, z: float) -> tuple[Face, float, float]:
    ax, ay, az = abs(x), abs(y), abs(z)
    if ax >= ay and ax >= az:
        if x >= 0.0:
            return Face.XPOS, y / ax, z / ax
        return Face.XNEG, -y / ax, -z / ax
    if ay >= az and ay >= ax:
        if y >= 0.0:
            return Face.YPOS, z / ay, -x / ay
        return Face.YNEG, -z / ay, x / ay
    if az >= ax and az >= ay:
        if z >= 0.0:
            return Face.ZPOS, -x / az, -y / az
        return Face.ZNEG, x / az, y / az
    raise ValueError(f"cannot place point ({x}, {y}, {z}) on a cube face")


def _face_uv_to_xyz(face: Face, u: float, v: float) -> tuple[float, float, float]:
    if face is Face.XPOS:
        return 1.0, u, v
    if face is Face.XNEG:
        return -1.0, -u, -v
    if face is Face.YPOS:
        return -v, 1.0, u
    if face is Face.YNEG:
        return v, -1.0, -u
    if face is Face.ZPOS:
        return -u, -v, 1.0
    return u, v, -1.0


def ll_to_s2(lat_e6: int, lon_e6: int) -> int:
    """Return the S2 leaf cell id containing the point given in millionths of a degree."""
    lat = math.radians(lat_e6 / _E6)
    lon = math.radians(lon_e6 / _E6)

    x = math.cos(lat) * math.cos(lon)
    y = math.cos(lat) * math.sin(lon)
    z = math.sin(lat)

    face, u, v = _xyz_to_face_uv(x, y, z)
    s = _uv_to_st(u)
    t = _uv_to_st(v)

    cell = int(face)
    for _ in range(_LEVELS):
        s *= 2.0
        t *= 2.0
        quadrant = (3 if s >= 1.0 else 0) ^ (1 if t >= 1.0 else 0)
        cell = (cell << 2) | quadrant
        if quadrant == 0:
            s, t = t, s
        elif quadrant == 1:
            t -= 1.0
        elif quadrant == 2:
            s -= 1.0
            t -= 1.0
        else:
            s -= 1.0
            s, t = 1.0 - t, 1.0 - s

    return ((cell << 1) | 1) & _MASK64


def double_to_e6(value: float) -> int:
    """Convert degrees to millionths of a degree, picking the nearest of three candidates."""
    mid = int(value * _E6)
    up = mid + 1
    down = mid - 1

    delta_mid = abs(value - mid / _E6)
    delta_up = abs(value - up / _E6)
    delta_down = abs(value - down / _E6)

    result = mid
    if delta_up < delta_mid:
        result = up
    if delta_down < delta_mid:
        result = down
    return result


def s2_to_ll(s2: int) -> tuple[int, int]:
    """Return (lat_e6, lon_e6) of the corner of the given S2 leaf cell.

    Negative ids are read as their unsigned 64-bit equivalent.
    Raises ValueError if the id names no valid cube face.
    """
    cell = (s2 & _MASK64) >> 1
    s = 0.0
    t = 0.0
    for _ in range(_LEVELS):
        quadrant = cell & 3
        if quadrant == 0:
            s, t = t, s
        elif quadrant == 1:
            t += 1.0
        elif quadrant == 2:
            s += 1.0
            t += 1.0
        else:
            s, t = (1.0 - t) + 1.0, 1.0 - s
        s /= 2.0
        t /= 2.0
        cell >>= 2

    try:
        face = Face(cell)
    except ValueError:
        raise ValueError(f"invalid S2 face {cell}") from None

    x, y, z = _face_uv_to_xyz(face, _st_to_uv(s), _st_to_uv(t))
    r = math.sqrt(x * x + y * y + z * z)
    x /= r
    y /= r
    z /= r

    lat = math.degrees(math.asin(z))
    lon = math.degrees(math.atan2(y, x))
    return double_to_e6(lat), double_to_e6(lon)