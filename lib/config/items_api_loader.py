from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from lib.utils.validation import ensure, ensure_log_level, ensure_str

from .yaml_loader import load_yaml


DEFAULT_ROUTE_PATH = "/api/v1/items"
DEFAULT_CONTENT_TYPE = "application/json"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class ItemsApiConfig:
    """Typed view over ``items_api.yaml``.

    Only the ``items_api`` section is interpreted.  The raw mapping is kept so
    that callers can look up keys this view does not expose.
    """

    raw: Dict[str, Any] = field(default_factory=dict)
    route_path: str = DEFAULT_ROUTE_PATH
    content_type: str = DEFAULT_CONTENT_TYPE
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        ensure_str(self.route_path, "route.path")
        ensure(self.route_path.startswith("/"), "route.path must start with '/'")
        ensure_str(self.content_type, "response.content_type")
        ensure(
            "application/json" in self.content_type,
            "response.content_type must be a JSON media type",
        )
        # HTTP servers refuse header values with surrounding whitespace.
        ensure(
            self.content_type == self.content_type.strip(),
            "response.content_type must not start or end with whitespace",
        )
        ensure_log_level(self.log_level)
        self.log_level = self.log_level.upper()

    @classmethod
    def from_mapping(cls, raw: Dict[str, Any]) -> "ItemsApiConfig":
        section = raw.get("items_api") or {}
        return cls(
            raw=raw,
            route_path=(section.get("route") or {}).get("path", DEFAULT_ROUTE_PATH),
            content_type=(section.get("response") or {}).get(
                "content_type", DEFAULT_CONTENT_TYPE
            ),
            log_level=(section.get("logging") or {}).get("level", DEFAULT_LOG_LEVEL),
        )


def load_items_api_config(path: str | Path) -> ItemsApiConfig:
    """Load ``items_api.yaml`` and return an :class:`ItemsApiConfig`.

    Parameters
    ----------
    path:
        File system path to the YAML configuration file.
    """

    return ItemsApiConfig.from_mapping(load_yaml(path))
