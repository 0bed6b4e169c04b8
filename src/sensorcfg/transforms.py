"""
Stellar field transformation editing.

Operates on the single canonical STELLAR entry of a sensor parser config:
    - print_stellar_transformations: show the field -> expression table
    - add_stellar_transformations: merge new fields into the entry
    - remove_stellar_transformations: drop fields, pruning the entry once empty

Each operation parses its own copy of the document, edits it and writes it
back out. Entries are replaced by index; nothing is mutated through a shared
reference.

CANONICAL ENTRY POLICY:
    A document is expected to hold at most one STELLAR entry. When it holds
    several, the LAST one in list order is the one read and edited. The
    others are left as they are.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional

from sensorcfg.backends import render_table
from sensorcfg.model import FieldTransformationKind, FieldTransformer, SensorParserConfig
from sensorcfg.serialization import ConfigSerializationError, config_from_json, config_to_json

logger = logging.getLogger(__name__)

PRINT_HEADERS = ("Field", "Transformation")


def find_stellar_transformer(config: SensorParserConfig) -> Optional[int]:
    """Index of the canonical STELLAR entry, or None. Never mutates."""
    found = None
    for i, transformer in enumerate(config.field_transformations):
        if transformer.is_stellar:
            found = i
    return found


def get_stellar_transformer(config: SensorParserConfig) -> int:
    """
    Index of the canonical STELLAR entry, creating it if missing.

    A new entry has an empty config and is appended at the end of the list.
    """
    index = find_stellar_transformer(config)
    if index is not None:
        return index
    logger.debug("No %s transformation found, appending one", FieldTransformationKind.STELLAR.value)
    config.field_transformations = config.field_transformations + [
        FieldTransformer(transformation=FieldTransformationKind.STELLAR.value, config={})
    ]
    return len(config.field_transformations) - 1


def prune_empty_stellar_transformers(config: SensorParserConfig) -> None:
    """Drop every STELLAR entry whose config is empty."""
    kept = [t for t in config.field_transformations if not (t.is_stellar and not t.config)]
    pruned = len(config.field_transformations) - len(kept)
    if pruned:
        logger.debug("Pruned %d empty %s transformation(s)", pruned, FieldTransformationKind.STELLAR.value)
    config.field_transformations = kept


def _replace_mapping(config: SensorParserConfig, index: int, mapping: dict) -> None:
    # output always mirrors the mapping's key order
    entries = list(config.field_transformations)
    entries[index] = FieldTransformer(
        transformation=entries[index].transformation,
        config=mapping,
        output=list(mapping.keys()),
        extras=entries[index].extras,
        source=entries[index].source,
    )
    config.field_transformations = entries


def _serialize_or_fallback(config: SensorParserConfig, original: str) -> str:
    try:
        return config_to_json(config, pretty=True)
    except ConfigSerializationError:
        logger.error("Unable to convert object to JSON: %r", config, exc_info=True)
        return original


def print_stellar_transformations(config_text: Optional[str]) -> Optional[str]:
    """
    Render the STELLAR field transformations as a table.

    Args:
        config_text: Serialized sensor parser config, or None

    Returns:
        Table with "Field" and "Transformation" columns, one row per field
        in mapping order; None if config_text is None

    Raises:
        ConfigParseError: If config_text is not a valid config
    """
    if config_text is None:
        return None
    config = config_from_json(config_text)
    index = find_stellar_transformer(config)
    rows: List[tuple] = []
    if index is not None:
        mapping = config.field_transformations[index].config
        rows = [(key, str(value)) for key, value in mapping.items()]
    return render_table(PRINT_HEADERS, rows)


def add_stellar_transformations(
    config_text: Optional[str], additions: Optional[Mapping[str, Any]]
) -> Optional[str]:
    """
    Merge field -> expression pairs into the STELLAR transformation.

    Existing fields are overwritten in place, new fields are appended.
    The entry is created if the config has none.

    Args:
        config_text: Serialized sensor parser config, or None
        additions: Field name -> expression text. None or empty is a no-op.

    Returns:
        The updated config as pretty-printed JSON. config_text itself when
        there is nothing to add or the result cannot be serialized.
        None if config_text is None.

    Raises:
        ConfigParseError: If config_text is not a valid config
    """
    if config_text is None:
        return None
    config = config_from_json(config_text)
    if not additions:
        return config_text

    index = get_stellar_transformer(config)
    mapping = dict(config.field_transformations[index].config)
    for key, value in additions.items():
        mapping[key] = value
    _replace_mapping(config, index, mapping)
    logger.debug("Added %d stellar transformation(s): %s", len(additions), list(additions))
    return _serialize_or_fallback(config, config_text)


def remove_stellar_transformations(
    config_text: Optional[str], removals: Optional[Iterable[str]]
) -> Optional[str]:
    """
    Remove fields from the STELLAR transformation.

    Fields that are not present are ignored. If the entry ends up empty it
    is dropped from the config.

    Args:
        config_text: Serialized sensor parser config, or None
        removals: Field names to remove. None or empty is a no-op.
            A single string is taken as one field name.

    Returns:
        The updated config as pretty-printed JSON. config_text itself when
        there is nothing to remove or the result cannot be serialized.
        None if config_text is None.

    Raises:
        ConfigParseError: If config_text is not a valid config
    """
    if config_text is None:
        return None
    config = config_from_json(config_text)
    if isinstance(removals, str):
        removals = [removals]
    if not removals:
        return config_text

    index = get_stellar_transformer(config)
    mapping = dict(config.field_transformations[index].config)
    for removal in removals:
        mapping.pop(removal, None)
    _replace_mapping(config, index, mapping)
    prune_empty_stellar_transformers(config)
    return _serialize_or_fallback(config, config_text)
