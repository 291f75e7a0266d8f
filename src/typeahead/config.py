"""Per-instance autocomplete settings.

Settings may come from keyword arguments, from a mapping of string values
(camelCase or snake_case keys, e.g. ``requireMatch: "false"``), or from a
YAML file. Once built, a config is never mutated.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

from typeahead.errors import ConfigError

logger = logging.getLogger(__name__)

_TRUE = {"true", "1", "yes", "on", ""}
_FALSE = {"false", "0", "no", "off"}


@dataclass(frozen=True)
class AutocompleteConfig:
    """Immutable settings for one autocomplete instance.

    ``delay`` is in milliseconds. A missing ``url`` disables fetching.
    """

    require_match: bool = True
    reveal_on_click: bool = False
    reveal_on_focus: bool = False
    reveal_on_keydown: bool = True
    submit_on_enter: bool = False
    url: str | None = None
    min_length: int = 1
    delay: int = 300
    query_param: str = "q"
    results_id: str | None = None

    @property
    def can_fetch(self) -> bool:
        return bool(self.url)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> AutocompleteConfig:
        """Build a config from loosely-typed values.

        Unknown keys are ignored. Values that cannot be coerced keep the
        default and log a warning.
        """
        defaults = cls()
        types = {f.name: f.type for f in fields(cls)}
        values: dict[str, Any] = {}
        for raw_key, raw in data.items():
            key = snake_case(str(raw_key))
            if key not in types:
                logger.debug("ignoring unknown setting %s", raw_key)
                continue
            try:
                values[key] = _coerce(types[key], raw)
            except ValueError:
                logger.warning("invalid value %r for %s, using %r", raw, raw_key, getattr(defaults, key))
        return replace(defaults, **values)

    def merged(self, **overrides: Any) -> AutocompleteConfig:
        """Return a copy with non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def snake_case(name: str) -> str:
    """``revealOnKeyDown`` -> ``reveal_on_key_down`` -> ``reveal_on_keydown``."""
    name = re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower().replace("-", "_")
    return name.replace("key_down", "keydown")


def _coerce(type_name: str, raw: Any) -> Any:
    if raw is None:
        if "None" in type_name:
            return None
        raise ValueError(raw)
    if type_name == "bool":
        if isinstance(raw, bool):
            return raw
        text = str(raw).strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
        raise ValueError(raw)
    if type_name == "int":
        if isinstance(raw, bool):
            raise ValueError(raw)
        return int(str(raw).strip())
    text = str(raw)
    if "None" in type_name and not text:
        return None
    return text


def load_config(path: str | Path) -> AutocompleteConfig:
    """Load settings from a YAML file.

    The document may hold the settings at top level or under an
    ``autocomplete`` key.
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc

    if data is None:
        return AutocompleteConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping")
    section = data.get("autocomplete", data)
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: 'autocomplete' must be a mapping")
    return AutocompleteConfig.from_mapping(section)
