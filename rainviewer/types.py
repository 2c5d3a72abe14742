from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any, Dict, Tuple

from rainviewer.utils import iso_z


class ColorKind(IntEnum):
    """
    Color schemes supported by the tile server.
    Values are the integer codes used in tile URLs, see
    https://www.rainviewer.com/api/color-schemes.html
    """
    BLACK_AND_WHITE = 0
    ORIGINAL = 1
    UNIVERSAL_BLUE = 2
    TITAN = 3
    THE_WEATHER_CHANNEL = 4
    METEORED = 5
    NEXRAD_LEVEL_III = 6
    RAINBOW_SELEX_IS = 7
    DARK_SKY = 8

    @property
    def code(self) -> int:
        return int(self.value)


@dataclass(frozen=True, slots=True)
class Frame:
    """
    One snapshot of radar or satellite imagery.

    Attributes:
        time: UTC datetime the data was generated.
        path: relative path segment used to build tile URLs.
    """
    time: datetime
    path: str

    def to_dict(self) -> Dict[str, Any]:
        return {"time": iso_z(self.time), "path": self.path}


@dataclass(frozen=True, slots=True)
class AvailableManifest:
    """
    Imagery currently offered by the service, as returned by fetch_available().

    Attributes:
        host: tile host; every tile URL starts with it.
        past_radar: historical radar frames, oldest first.
        nowcast_radar: forecast radar frames.
        infrared_satellite: infrared satellite frames.
    """
    host: str
    past_radar: Tuple[Frame, ...] = field(default_factory=tuple)
    nowcast_radar: Tuple[Frame, ...] = field(default_factory=tuple)
    infrared_satellite: Tuple[Frame, ...] = field(default_factory=tuple)

    def summary(self) -> Dict[str, Any]:
        """Frame counts (safe to log)."""
        return {
            "host": self.host,
            "past_radar": len(self.past_radar),
            "nowcast_radar": len(self.nowcast_radar),
            "infrared_satellite": len(self.infrared_satellite),
        }
