"""
rainviewer — client for the free RainViewer weather-maps API

- fetch_available(): which past/nowcast radar and infrared satellite frames exist
- new_tile_parameters(x, y, zoom) + setters: validated tile arguments
- fetch_tile(manifest, frame, params): PNG bytes for one tile
"""
from rainviewer.config import ClientConfig, load_config
from rainviewer.errors import (
    DeserializationError,
    HttpStatusError,
    InvalidSize,
    InvalidZoom,
    ParameterError,
    RainViewerError,
    TransportError,
    XOutOfRange,
    YOutOfRange,
)
from rainviewer.params import RequestArguments, TileRequestParameters, new_tile_parameters
from rainviewer.service import RainViewerService, build_tile_url, fetch_available, fetch_tile
from rainviewer.types import AvailableManifest, ColorKind, Frame

__all__ = [
    "AvailableManifest",
    "ClientConfig",
    "ColorKind",
    "DeserializationError",
    "Frame",
    "HttpStatusError",
    "InvalidSize",
    "InvalidZoom",
    "ParameterError",
    "RainViewerError",
    "RainViewerService",
    "RequestArguments",
    "TileRequestParameters",
    "TransportError",
    "XOutOfRange",
    "YOutOfRange",
    "build_tile_url",
    "fetch_available",
    "fetch_tile",
    "load_config",
    "new_tile_parameters",
]
