from __future__ import annotations

"""
RainViewer weather-maps client.

Usage:
    svc = RainViewerService()                 # or RainViewerService(session=my_session)
    maps = svc.fetch_available()
    params = new_tile_parameters(4, 7, 6).set_color(ColorKind.TITAN)
    png = svc.fetch_tile(maps, maps.past_radar[0], params)
    # png -> raw PNG bytes as served (no signature check is done here)

See https://www.rainviewer.com/api/weather-maps-api.html for the upstream API.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from rainviewer.config import ClientConfig
from rainviewer.errors import DeserializationError, HttpStatusError, TransportError
from rainviewer.params import RequestArguments
from rainviewer.types import AvailableManifest, Frame
from rainviewer.utils import unix_to_datetime


log = logging.getLogger(__name__)


class RainViewerService:
    def __init__(self, session: Optional[requests.Session] = None, config: Optional[ClientConfig] = None):
        """
        Initialize the client.

        Params:
            session: optional requests.Session for connection reuse (never mutated here)
            config: optional ClientConfig; defaults to the public endpoint and transport timeout
        """
        self.config = config or ClientConfig()
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def close(self) -> None:
        """Close the session if this service created it; injected sessions are left alone."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "RainViewerService":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ----------------------------
    # Public API
    # ----------------------------
    def fetch_available(self) -> AvailableManifest:
        """
        Query which radar and satellite frames currently exist.
        Every call hits the network; nothing is cached.

        Raises:
            TransportError, HttpStatusError, DeserializationError
        """
        url = self.config.manifest_url
        r = self._get(url)
        if r.status_code != 200:
            log.warning("Manifest request failed: %s %s", r.status_code, url)
            raise HttpStatusError(r.status_code, url)
        try:
            raw = r.json()
        except ValueError as e:
            log.warning("Manifest body is not valid JSON: %s", e)
            raise DeserializationError(f"Manifest body is not valid JSON: {e}") from e

        manifest = parse_manifest(raw)
        log.info("Fetched manifest", extra={"extra": manifest.summary()})
        return manifest

    def build_tile_url(self, manifest: AvailableManifest, frame: Frame, params: RequestArguments) -> str:
        """Construct the tile URL (no request performed)."""
        return build_tile_url(manifest, frame, params)

    def fetch_tile(self, manifest: AvailableManifest, frame: Frame, params: RequestArguments) -> bytes:
        """
        Download one tile for `frame` and return the body bytes verbatim.

        Raises:
            TransportError, HttpStatusError
        """
        url = build_tile_url(manifest, frame, params)
        log.debug("Requesting: %s", url, extra={"extra": {"frame": frame.to_dict()}})
        r = self._get(url)
        if r.status_code != 200:
            log.warning("Tile request failed: %s %s", r.status_code, url)
            raise HttpStatusError(r.status_code, url)
        return r.content

    # ----------------------------
    # Transport
    # ----------------------------
    def _get(self, url: str) -> requests.Response:
        kwargs: Dict[str, Any] = {}
        if self.config.timeout is not None:
            kwargs["timeout"] = self.config.timeout
        if self.config.user_agent:
            kwargs["headers"] = {"User-Agent": self.config.user_agent}
        try:
            return self.session.get(url, **kwargs)
        except requests.RequestException as e:
            log.warning("Transport error for %s: %s", url, e)
            raise TransportError(str(e)) from e


# ----------------------------
# Wire format helpers
# ----------------------------
def _require_str(v: Any, field: str) -> str:
    if not isinstance(v, str):
        raise TypeError(f"{field} must be a string, got {type(v).__name__}")
    return v


def parse_frame(raw: Dict[str, Any]) -> Frame:
    return Frame(time=unix_to_datetime(raw["time"]), path=_require_str(raw["path"], "path"))


def _parse_frames(raw: List[Dict[str, Any]]) -> tuple:
    if not isinstance(raw, list):
        raise TypeError(f"expected a list of frames, got {type(raw).__name__}")
    return tuple(parse_frame(f) for f in raw)


def parse_manifest(raw: Dict[str, Any]) -> AvailableManifest:
    """
    Project the wire document
        {version, generated, host, radar: {past, nowcast}, satellite: {infrared}}
    into AvailableManifest. `version` and `generated` are required but discarded.
    """
    try:
        _ = raw["version"]; _ = raw["generated"]
        return AvailableManifest(
            host=_require_str(raw["host"], "host"),
            past_radar=_parse_frames(raw["radar"]["past"]),
            nowcast_radar=_parse_frames(raw["radar"]["nowcast"]),
            infrared_satellite=_parse_frames(raw["satellite"]["infrared"]),
        )
    except (KeyError, TypeError, ValueError, OverflowError, OSError) as e:
        log.warning("Unexpected manifest shape: %r", e)
        raise DeserializationError(f"Unexpected manifest shape: {e!r}") from e


def build_tile_url(manifest: AvailableManifest, frame: Frame, params: RequestArguments) -> str:
    """
    `{host}/{path}/{size}/{zoom}/{x}/{y}/{color}/{smooth}_{snow}.png` for tile arguments.
    The live service sends paths with a leading slash ("/v2/radar/..."); exactly one
    slash is kept between host and path.
    """
    host = manifest.host.rstrip("/")
    path = frame.path.strip("/")
    return "/".join((host, path) + tuple(params.path_segments()))


# ----------------------------
# Free-function convenience API
# ----------------------------
def fetch_available(session: Optional[requests.Session] = None) -> AvailableManifest:
    with RainViewerService(session=session) as svc:
        return svc.fetch_available()


def fetch_tile(
    manifest: AvailableManifest,
    frame: Frame,
    params: RequestArguments,
    session: Optional[requests.Session] = None,
) -> bytes:
    with RainViewerService(session=session) as svc:
        return svc.fetch_tile(manifest, frame, params)
