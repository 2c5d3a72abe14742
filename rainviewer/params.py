"""
Request arguments for the tile endpoint.

Usage:
    params = new_tile_parameters(x=4, y=7, zoom=6)
    params.set_color(ColorKind.TITAN).set_snow(True).set_smooth(False)
    params.set_size(512)
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

from rainviewer.errors import InvalidSize, InvalidZoom, XOutOfRange, YOutOfRange
from rainviewer.types import ColorKind
from rainviewer.utils import bool_flag


VALID_SIZES: Tuple[int, ...] = (256, 512)


class RequestArguments(ABC):
    """Base for anything that can be turned into an imagery request path."""

    __slots__ = ()

    @abstractmethod
    def path_segments(self) -> Tuple[str, ...]:
        """URL segments appended after `{host}/{frame.path}`; the last one carries the extension."""
        raise NotImplementedError


class TileRequestParameters(RequestArguments):
    """
    Arguments for a single map tile.

    x, y and zoom are fixed at construction (0 <= x, y < 2**zoom);
    size, color, smooth and snow can be changed through the setters.
    """

    __slots__ = ("_x", "_y", "_zoom", "_size", "_color", "_smooth", "_snow")

    def __init__(self, x: int, y: int, zoom: int):
        _check_coords(x, y, zoom)
        self._x = x
        self._y = y
        self._zoom = zoom
        self._size = 256
        self._color = ColorKind.UNIVERSAL_BLUE
        self._smooth = True
        self._snow = True

    # ----------------------------
    # Read-only coordinates
    # ----------------------------
    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def zoom(self) -> int:
        return self._zoom

    @property
    def size(self) -> int:
        return self._size

    @property
    def color(self) -> ColorKind:
        return self._color

    @property
    def smooth(self) -> bool:
        return self._smooth

    @property
    def snow(self) -> bool:
        return self._snow

    # ----------------------------
    # Setters (chainable)
    # ----------------------------
    def set_size(self, size: int) -> "TileRequestParameters":
        """`size` must be 256 or 512, else InvalidSize is raised and nothing changes."""
        if size not in VALID_SIZES or isinstance(size, bool):
            raise InvalidSize(size, "Image size must be either 256 or 512")
        self._size = int(size)
        return self

    def set_smooth(self, smooth: bool) -> "TileRequestParameters":
        self._smooth = bool(smooth)
        return self

    def set_snow(self, snow: bool) -> "TileRequestParameters":
        self._snow = bool(snow)
        return self

    def set_color(self, color: ColorKind) -> "TileRequestParameters":
        self._color = ColorKind(color)
        return self

    # ----------------------------
    # Serialization
    # ----------------------------
    @property
    def options_token(self) -> str:
        # "{smooth}_{snow}", each as 0/1
        return f"{bool_flag(self._smooth)}_{bool_flag(self._snow)}"

    def path_segments(self) -> Tuple[str, ...]:
        # x before y, matching the slippy-map {z}/{x}/{y} convention
        return (
            str(self._size),
            str(self._zoom),
            str(self._x),
            str(self._y),
            str(self._color.code),
            f"{self.options_token}.png",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size": self._size,
            "x": self._x,
            "y": self._y,
            "zoom": self._zoom,
            "color": self._color.name,
            "smooth": self._smooth,
            "snow": self._snow,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileRequestParameters):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"TileRequestParameters({fields})"


def _is_uint(v) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and v >= 0


def _check_coords(x: int, y: int, zoom: int) -> None:
    if not _is_uint(zoom):
        raise InvalidZoom(zoom, f"Zoom must be an integer >= 0, got {zoom!r}")
    max_coord = 2 ** zoom
    if not _is_uint(x) or x >= max_coord:
        raise XOutOfRange(x, f"With a zoom of {zoom}, the max value for x is {max_coord - 1}")
    if not _is_uint(y) or y >= max_coord:
        raise YOutOfRange(y, f"With a zoom of {zoom}, the max value for y is {max_coord - 1}")


def new_tile_parameters(x: int, y: int, zoom: int) -> TileRequestParameters:
    """
    Create tile arguments with defaults size=256, color=UNIVERSAL_BLUE, smooth=True, snow=True.
    Raises XOutOfRange / YOutOfRange (x is checked first) when a coordinate is not below 2**zoom.
    """
    return TileRequestParameters(x, y, zoom)
