"""Hasukatsu episode provider package."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = ["HasukatsuClient", "EpisodeRecord", "aggregate", "parse_label"]

_EXPORTS = {
    "HasukatsuClient": "hasukatsu.services.hasukatsu",
    "EpisodeRecord": "hasukatsu.services.aggregator",
    "aggregate": "hasukatsu.services.aggregator",
    "parse_label": "hasukatsu.labels",
}


def __getattr__(name: str) -> Any:
    if name in _EXPORTS:
        module = import_module(_EXPORTS[name])
        return getattr(module, name)
    raise AttributeError(f"module 'hasukatsu' has no attribute {name}")
