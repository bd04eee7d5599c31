"""Items API service.

:class:`ItemsService` builds the payload served by the items endpoint: the
three fixed todo items followed by an entry echoing the request URL.  Runtime
settings (mount path, response content type, log level) come from
``config/items_api.yaml`` so they can be adjusted without code changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import json
import os
from pathlib import Path
from typing import Any, Dict, List

from lib.config.items_api_loader import ItemsApiConfig, load_items_api_config
from lib.contracts.items import DEFAULT_ITEMS, EchoEntry
from lib.telemetry.logger import get_logger


CONFIG_ENV_VAR = "ITEMS_API_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "items_api.yaml"

logger = get_logger("items_api.service")


@dataclass
class ItemsService:
    """Render the items payload for a request URL."""

    config: ItemsApiConfig | Dict[str, Any] | None = field(default=None)
    config_path: str | Path | None = None

    def __post_init__(self) -> None:
        if self.config_path is None:
            self.config_path = os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
        if self.config is None:
            if Path(self.config_path).exists():
                self.config = load_items_api_config(self.config_path)
                logger.info("loaded config from %s", self.config_path)
            else:
                self.config = ItemsApiConfig()
                logger.info("no config at %s, using defaults", self.config_path)
        elif isinstance(self.config, dict):
            self.config = ItemsApiConfig.from_mapping(self.config)

    @property
    def route_path(self) -> str:
        return self.config.route_path

    @property
    def content_type(self) -> str:
        return self.config.content_type

    @property
    def log_level(self) -> str:
        return self.config.log_level

    def build_payload(self, url: str) -> List[Dict[str, Any]]:
        """Return the fixed items followed by ``{"url": url}``.

        ``url`` is embedded verbatim.
        """

        payload: List[Dict[str, Any]] = [item.model_dump() for item in DEFAULT_ITEMS]
        payload.append(EchoEntry(url=url).model_dump())
        return payload

    def render(self, url: str) -> bytes:
        """Serialise :meth:`build_payload` as compact UTF-8 JSON."""

        return json.dumps(
            self.build_payload(url), separators=(",", ":"), ensure_ascii=False
        ).encode("utf-8")


__all__ = ["ItemsService", "CONFIG_ENV_VAR", "DEFAULT_CONFIG_PATH"]
