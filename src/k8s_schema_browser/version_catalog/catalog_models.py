"""Version catalog entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class SchemaDocument:
    """Loaded swagger document of one Kubernetes API version."""

    version: str
    definitions: Mapping[str, Any]
    source_path: Path
