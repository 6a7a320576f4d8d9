from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_SITE_RADIUS_M


@dataclass(frozen=True)
class Site:
    """The reference work site entries are classified against."""

    name: str
    latitude: float
    longitude: float
    radius_m: float = DEFAULT_SITE_RADIUS_M

    @classmethod
    def from_dict(cls, data: dict) -> "Site":
        return cls(
            name=str(data["name"]),
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            radius_m=float(data.get("radius_m", DEFAULT_SITE_RADIUS_M)),
        )
