from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


MANIFEST_URL = "https://api.rainviewer.com/public/weather-maps.json"


@dataclass
class ClientConfig:
    """
    Settings for RainViewerService.

    Attributes:
        manifest_url: discovery document URL.
        timeout: per-request timeout in seconds; None keeps the transport default.
        user_agent: optional User-Agent header sent with every request.
    """
    manifest_url: str = MANIFEST_URL
    timeout: Optional[float] = None
    user_agent: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Optional[Dict[str, Any]]) -> "ClientConfig":
        d = d or {}
        known = {f.name for f in fields(cls)}
        unknown = set(d) - known
        if unknown:
            raise ValueError(f"Unknown rainviewer config keys: {sorted(unknown)}")
        cfg = cls(**d)
        if cfg.timeout is not None:
            cfg.timeout = float(cfg.timeout)
        return cfg


def load_config(path: str = "config/rainviewer.yaml") -> ClientConfig:
    """
    Read the `rainviewer:` section of a YAML file.
    A missing file yields the defaults.
    """
    p = Path(path)
    if not p.exists():
        return ClientConfig()
    with p.open("r") as f:
        raw = yaml.safe_load(f) or {}
    return ClientConfig.from_dict(raw.get("rainviewer"))
