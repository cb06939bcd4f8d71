"""The keyed element stored by every container in the package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Element:
    """An integer key with an optional payload of any type."""

    key: int
    value: Any = None