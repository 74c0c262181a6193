"""JSON interchange format for syntax forests.

Every node and type attribution is a JSON object tagged with its class name
under ``"@"``; fields left at their default value are omitted and tuples are
written as lists::

    {"version": 1, "units": [{"@": "SourceUnit", "path": "com/acme/A.java", ...}]}
"""

import json
from dataclasses import MISSING, fields, is_dataclass
from pathlib import Path
from typing import Any

from typeprune.tree.nodes import NODE_CLASSES, Forest, SourceUnit
from typeprune.tree.types import TYPE_CLASSES

FORMAT_VERSION = 1

_CLASSES: dict[str, type] = {cls.__name__: cls for cls in NODE_CLASSES + TYPE_CLASSES}


def encode(value: Any) -> Any:
    """Encode a node, type attribution or plain value as JSON-compatible data."""
    if is_dataclass(value) and type(value).__name__ in _CLASSES:
        data: dict[str, Any] = {"@": type(value).__name__}
        for f in fields(value):
            item = getattr(value, f.name)
            if f.default is not MISSING and item == f.default:
                continue
            data[f.name] = encode(item)
        return data
    if isinstance(value, tuple):
        return [encode(item) for item in value]
    return value


def decode(data: Any) -> Any:
    """Decode data produced by :func:`encode`."""
    if isinstance(data, list):
        return tuple(decode(item) for item in data)
    if not isinstance(data, dict):
        return data

    tag = data.get("@")
    if tag is None:
        raise ValueError(f"Tree object without '@' tag: {sorted(data)}")
    cls = _CLASSES.get(tag)
    if cls is None:
        raise ValueError(f"Unknown tree object '{tag}'")

    kwargs = {key: decode(value) for key, value in data.items() if key != "@"}
    try:
        return cls(**kwargs)
    except TypeError as e:
        raise ValueError(f"Invalid '{tag}' object: {e}") from e


def forest_to_json(forest: Forest) -> dict:
    return {"version": FORMAT_VERSION, "units": [encode(unit) for unit in forest]}


def forest_from_json(data: dict) -> Forest:
    if not isinstance(data, dict):
        raise ValueError("Forest JSON must be an object with a 'units' list")
    version = data.get("version", FORMAT_VERSION)
    if version != FORMAT_VERSION:
        raise ValueError(f"Unsupported forest format version: {version}")

    units = decode(data.get("units", []))
    for unit in units:
        if not isinstance(unit, SourceUnit):
            raise ValueError(f"Expected SourceUnit at top level, got {type(unit).__name__}")
    return units


def load_forest(path: Path) -> Forest:
    """Load a forest from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    return forest_from_json(data)


def dump_forest(forest: Forest, path: Path, indent: int = 2) -> None:
    """Write a forest to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(forest_to_json(forest), f, indent=indent)
