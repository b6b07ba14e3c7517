# busroute/core/geo.py

import math

EARTH_RADIUS_KM = 6371.0


def haversine_km(
    a_lat: float,
    a_lng: float,
    b_lat: float,
    b_lng: float,
    radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Great-circle distance between two points given in decimal degrees."""
    phi1 = math.radians(a_lat)
    phi2 = math.radians(b_lat)
    dphi = math.radians(b_lat - a_lat)
    dlmb = math.radians(b_lng - a_lng)

    s = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    return 2 * radius_km * math.atan2(math.sqrt(s), math.sqrt(1 - s))


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going toward positive infinity, not to even."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    return int(round_half_up(value))


def format_number(value: float) -> str:
    """Plain decimal text: 45.0 as "45", 4.5 as "4.5", 1234567 as "1234567"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
