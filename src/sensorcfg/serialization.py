"""
Serialization helpers for sensor parser configurations.

Provides JSON (and YAML) round-trip via an intermediate dict representation.
Only the field transformation list is interpreted; every other key goes
through unchanged and in its original position.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional

import yaml

from sensorcfg.model import FieldTransformer, SensorParserConfig
from sensorcfg.settings import load_settings


FIELD_TRANSFORMATIONS_KEY = "fieldTransformations"

_ENTRY_KEYS = ("transformation", "config", "output")


class ConfigParseError(Exception):
    """Raised when text is not a well-formed sensor parser configuration."""
    pass


class ConfigSerializationError(Exception):
    """Raised when a configuration cannot be written back out."""
    pass


def _new_transformer_to_dict(t: FieldTransformer) -> Dict[str, Any]:
    d: Dict[str, Any] = {}
    if t.transformation is not None:
        d["transformation"] = t.transformation
    d["config"] = dict(t.config)
    if t.output is not None:
        d["output"] = list(t.output)
    d.update(t.extras)
    return d


def transformer_to_dict(t: FieldTransformer) -> Dict[str, Any]:
    """
    Write an entry back as a dict.

    A parsed entry keeps its own key order and keys; unchanged values are
    written exactly as read (an explicit null stays null). Keys the entry
    gained through an edit go after the original ones. Entries created by
    the editor use the layout transformation, config, output.
    """
    if t.source is None:
        return _new_transformer_to_dict(t)

    d: Dict[str, Any] = {}
    for key, value in t.source.items():
        if key == "transformation":
            d[key] = t.transformation
        elif key == "config":
            d[key] = value if value is None and not t.config else dict(t.config)
        elif key == "output":
            d[key] = list(t.output) if t.output is not None else value
        else:
            d[key] = t.extras.get(key, value)

    if "transformation" not in d and t.transformation is not None:
        d["transformation"] = t.transformation
    if "config" not in d and t.config:
        d["config"] = dict(t.config)
    if "output" not in d and t.output is not None:
        d["output"] = list(t.output)
    return d


def transformer_from_dict(d: Any, index: int = 0) -> FieldTransformer:
    if not isinstance(d, dict):
        raise ConfigParseError(f"Field transformation {index} must be an object, got {type(d).__name__}")

    transformation = d.get("transformation")
    if transformation is not None and not isinstance(transformation, str):
        raise ConfigParseError(f"Field transformation {index}: 'transformation' must be a string")

    config = d.get("config")
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigParseError(f"Field transformation {index}: 'config' must be an object")

    output = d.get("output")
    if output is not None and not isinstance(output, list):
        raise ConfigParseError(f"Field transformation {index}: 'output' must be a list")

    extras = {k: v for k, v in d.items() if k not in _ENTRY_KEYS}
    return FieldTransformer(
        transformation=transformation,
        config=dict(config),
        output=list(output) if output is not None else None,
        extras=extras,
        source=dict(d),
    )


def config_to_dict(c: SensorParserConfig) -> Dict[str, Any]:
    items = list(c.fields.items())
    entries = [transformer_to_dict(t) for t in c.field_transformations]
    position = c.transformations_position
    if position is None or position > len(items):
        position = len(items)
    items.insert(position, (FIELD_TRANSFORMATIONS_KEY, entries))
    return dict(items)


def config_from_dict(d: Any) -> SensorParserConfig:
    if not isinstance(d, dict):
        raise ConfigParseError(f"Sensor parser config must be an object, got {type(d).__name__}")

    c = SensorParserConfig()
    for position, (key, value) in enumerate(d.items()):
        if key != FIELD_TRANSFORMATIONS_KEY:
            c.fields[key] = value
            continue
        if value is None:
            value = []
        if not isinstance(value, list):
            raise ConfigParseError(f"'{FIELD_TRANSFORMATIONS_KEY}' must be a list")
        c.field_transformations = [transformer_from_dict(t, i) for i, t in enumerate(value)]
        c.transformations_position = position
    return c


def config_from_json(s: str) -> SensorParserConfig:
    try:
        d = json.loads(s)
    except (TypeError, ValueError) as e:
        raise ConfigParseError(f"Unable to parse sensor parser config: {e}") from e
    return config_from_dict(d)


def config_to_json(c: SensorParserConfig, pretty: bool = True, indent: Optional[int] = None) -> str:
    """
    Write a configuration as JSON.

    Args:
        c: Configuration to write
        pretty: Indent the output (the form handed back to callers)
        indent: Override the configured indentation width

    Raises:
        ConfigSerializationError: If any value cannot be represented in JSON
    """
    if pretty and indent is None:
        indent = load_settings().json_indent
    try:
        return json.dumps(config_to_dict(c), indent=indent if pretty else None, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise ConfigSerializationError(f"Unable to convert config to JSON: {e}") from e


def config_to_yaml(c: SensorParserConfig) -> str:
    try:
        return yaml.safe_dump(config_to_dict(c), sort_keys=False)
    except yaml.YAMLError as e:
        raise ConfigSerializationError(f"Unable to convert config to YAML: {e}") from e


def config_from_yaml(s: str) -> SensorParserConfig:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Unable to parse sensor parser config: {e}") from e
    return config_from_dict(d)
