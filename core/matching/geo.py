#!/usr/bin/env python3
"""
Geo Distance Scoring - great-circle distance and proximity score.

Distances use the haversine formula on a spherical Earth. Missing or
out-of-range coordinates produce an infinite distance, which falls
outside every finite service radius and therefore scores 0.
"""

import math
from typing import Optional, Any

EARTH_RADIUS_KM = 6371.0

# Anything at or under this distance gets full marks
FULL_SCORE_DISTANCE_KM = 10.0

UNKNOWN_DISTANCE = math.inf


def _coerce(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def is_valid_latitude(latitude: Any) -> bool:
    lat = _coerce(latitude)
    return lat is not None and -90.0 <= lat <= 90.0


def is_valid_longitude(longitude: Any) -> bool:
    lon = _coerce(longitude)
    return lon is not None and -180.0 <= lon <= 180.0


def is_valid_location(latitude: Any, longitude: Any) -> bool:
    return is_valid_latitude(latitude) and is_valid_longitude(longitude)


def haversine_km(lat1: Any, lon1: Any, lat2: Any, lon2: Any) -> float:
    """
    Distance in kilometers between two points.

    Returns UNKNOWN_DISTANCE (infinity) if either point is missing or invalid.
    """
    if not (is_valid_location(lat1, lon1) and is_valid_location(lat2, lon2)):
        return UNKNOWN_DISTANCE

    lat1_rad = math.radians(float(lat1))
    lon1_rad = math.radians(float(lon1))
    lat2_rad = math.radians(float(lat2))
    lon2_rad = math.radians(float(lon2))

    d_lat = lat2_rad - lat1_rad
    d_lon = lon2_rad - lon1_rad

    a = (math.sin(d_lat / 2) ** 2
         + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(d_lon / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def calculate_distance_score(distance_km: float, service_radius_km: float) -> float:
    """
    Score proximity on 0-100.

    100 within 10km, 0 beyond the service radius, linear in between.
    A radius of 10km or less leaves no interpolation band.
    """
    if distance_km <= FULL_SCORE_DISTANCE_KM:
        return 100.0

    if distance_km > service_radius_km:
        return 0.0

    band = service_radius_km - FULL_SCORE_DISTANCE_KM
    if band <= 0:
        return 0.0

    score = 100.0 - ((distance_km - FULL_SCORE_DISTANCE_KM) / band * 100.0)
    return max(0.0, min(100.0, score))


def generate_distance_reason(distance_km: float, service_radius_km: float) -> str:
    if math.isinf(distance_km):
        return "Outside service area - location unknown"
    if distance_km <= FULL_SCORE_DISTANCE_KM:
        return f"Very close - {distance_km:.1f}km away"
    if distance_km <= service_radius_km * 0.5:
        return f"Close - {distance_km:.1f}km away"
    if distance_km <= service_radius_km:
        return f"Within service area - {distance_km:.1f}km away"
    return f"Outside service area - {distance_km:.1f}km away"
