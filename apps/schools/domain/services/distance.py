"""Great-circle distance (spherical law of cosines)."""

from __future__ import annotations

import math

from schools.domain.value_objects import Coordinates

EARTH_RADIUS_KM = 6371.0


def clamp_cosine(value: float) -> float:
    """acos 정의역 [-1, 1]로 잘라냅니다."""
    return min(1.0, max(-1.0, value))


def great_circle_km(origin: Coordinates, target: Coordinates) -> float:
    """두 좌표 사이의 구면 거리(km)를 계산합니다.

    같은 좌표에서는 부동소수점 오차로 cosine 값이 1을 넘을 수 있어
    acos 이전에 clamp 합니다.
    """
    lat_q = math.radians(origin.latitude)
    lat_r = math.radians(target.latitude)
    delta_lon = math.radians(target.longitude) - math.radians(origin.longitude)

    cosine = math.cos(lat_q) * math.cos(lat_r) * math.cos(delta_lon) + math.sin(
        lat_q
    ) * math.sin(lat_r)
    return EARTH_RADIUS_KM * math.acos(clamp_cosine(cosine))
