"""Configuration for the figure exporters.

The exporters take an explicit ``config=`` argument; the module-level config
below only supplies the default when none is passed, so callers that share a
process should pass their own ``ExportConfig`` rather than calling
:func:`set_export_config`.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Optional


@dataclass
class ExportConfig:
    indent_width: int = 4  # spaces per nesting level in the text dump
    json_indent: Optional[int] = 2  # ``None`` gives compact single-line JSON


_EXPORT_CONFIG = ExportConfig()


def get_export_config() -> ExportConfig:
    """Return a copy of the default used when no ``config=`` is passed."""

    return copy.deepcopy(_EXPORT_CONFIG)


def set_export_config(config: ExportConfig) -> None:
    global _EXPORT_CONFIG
    if config.indent_width < 0:
        raise ValueError(f"indent_width must be non-negative, got {config.indent_width}")
    _EXPORT_CONFIG = copy.deepcopy(config)
