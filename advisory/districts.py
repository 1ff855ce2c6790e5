"""Karnataka district lookup used to turn a district name into coordinates."""
from __future__ import annotations

import re
from typing import Dict, Optional, Tuple

from .errors import InvalidInput

_WHITESPACE = re.compile(r"\s+")

# (latitude, longitude) of each district headquarters
DISTRICT_COORDINATES: Dict[str, Tuple[float, float]] = {
    "bagalkot": (16.1850, 75.6961),
    "ballari": (15.1394, 76.9214),
    "belagavi": (15.8497, 74.4977),
    "bengaluru rural": (12.9716, 77.5946),
    "bengaluru urban": (12.9716, 77.5946),
    "bidar": (17.9133, 77.5300),
    "chamarajanagar": (11.9261, 76.9437),
    "chikkaballapur": (13.4355, 77.7314),
    "chikkamagaluru": (13.3153, 75.7754),
    "chitradurga": (14.2265, 76.3980),
    "dakshina kannada": (12.9141, 74.8560),
    "davanagere": (14.4644, 75.9218),
    "dharwad": (15.4589, 75.0078),
    "gadag": (15.4325, 75.6381),
    "hassan": (13.0068, 76.0996),
    "haveri": (14.7950, 75.4003),
    "kalaburagi": (17.3297, 76.8343),
    "kodagu": (12.3375, 75.8069),
    "kolar": (13.1367, 78.1292),
    "koppal": (15.3500, 76.1500),
    "mandya": (12.5223, 76.8951),
    "mysuru": (12.2958, 76.6394),
    "raichur": (16.2076, 77.3463),
    "ramanagara": (12.7203, 77.2800),
    "shivamogga": (13.9299, 75.5681),
    "tumakuru": (13.3409, 77.1011),
    "udupi": (13.3409, 74.7421),
    "uttara kannada": (14.6667, 74.5000),
    "vijayanagara": (15.3196, 76.4600),
    "vijayapura": (16.8302, 75.7100),
    "yadgir": (16.7667, 77.1333),
}


def normalize_district(district: object) -> str:
    """Return the lookup key for ``district``.

    Surrounding whitespace is stripped, inner runs collapse to one space and
    the result is case-folded. Blank or non-string input raises
    :class:`InvalidInput`.
    """
    if not isinstance(district, str):
        raise InvalidInput("district must be a string")
    normalized = _WHITESPACE.sub(" ", district).strip().casefold()
    if not normalized:
        raise InvalidInput("district must be a non-empty string")
    return normalized


def coordinates_for(normalized_district: str) -> Optional[Tuple[float, float]]:
    return DISTRICT_COORDINATES.get(normalized_district)


def display_name(normalized_district: str) -> str:
    return " ".join(part.capitalize() for part in normalized_district.split(" "))


__all__ = ["DISTRICT_COORDINATES", "coordinates_for", "display_name", "normalize_district"]
