"""Serialization helpers for solver configurations."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, IO, Optional, Union

from .linalg import SINGULAR_POLICIES

_DEFAULT_SINGULAR_POLICY = "raise"
_SINGULAR_POLICY_ALIASES = {
    "raise": "raise",
    "error": "raise",
    "strict": "raise",
    "fail": "raise",
    "propagate": "propagate",
    "nan": "propagate",
    "ieee": "propagate",
    "inf": "propagate",
    "legacy": "propagate",
}

_JSONSource = Union[str, Path, IO[str]]


def normalize_singular_policy(value: Any) -> str:
    """Return a canonical singular-pivot policy name.

    Hand-edited configuration files may spell the policy differently from the
    names accepted by :func:`~gaussjordan.linalg.row_reduce`.  Unknown values
    fall back to ``"raise"`` so that a singular system is never silently
    turned into NaNs.
    """

    if not isinstance(value, str):
        return _DEFAULT_SINGULAR_POLICY

    normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
    return _SINGULAR_POLICY_ALIASES.get(normalized, _DEFAULT_SINGULAR_POLICY)


@dataclass
class SolverConfiguration:
    """Options controlling a solve and how its results are displayed."""

    tolerance: float = 0.0
    on_singular: str = _DEFAULT_SINGULAR_POLICY
    precision: int = 6
    require_canonical: bool = False
    label: str = ""

    def __post_init__(self) -> None:
        self.tolerance = float(self.tolerance)
        if self.tolerance < 0.0:
            raise ValueError("Tolerance must be non-negative")
        self.precision = int(self.precision)
        if self.precision < 1:
            raise ValueError("Precision must be at least 1")
        if self.on_singular not in SINGULAR_POLICIES:
            raise ValueError(
                f"on_singular must be one of {', '.join(SINGULAR_POLICIES)}; got {self.on_singular!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representing the configuration."""

        return {
            "label": self.label,
            "tolerance": self.tolerance,
            "on_singular": self.on_singular,
            "precision": self.precision,
            "require_canonical": self.require_canonical,
        }

    def to_json(self, *, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SolverConfiguration":
        """Create a configuration from a dictionary."""

        return cls(
            tolerance=float(data.get("tolerance", 0.0)),
            on_singular=normalize_singular_policy(data.get("on_singular", _DEFAULT_SINGULAR_POLICY)),
            precision=int(data.get("precision", 6)),
            require_canonical=bool(data.get("require_canonical", False)),
            label=str(data.get("label", "")),
        )

    @classmethod
    def from_json(cls, source: _JSONSource) -> "SolverConfiguration":
        """Load a configuration from a JSON file path or file-like object."""

        if hasattr(source, "read"):
            data = json.load(source)  # type: ignore[arg-type]
        else:
            path = Path(source)
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        if not isinstance(data, dict):
            raise ValueError("Solver configuration JSON must contain an object at the top level")
        return cls.from_dict(data)

    def save(self, target: Union[str, Path, IO[str]], *, indent: Optional[int] = 2) -> None:
        """Write the configuration to disk or a file-like object."""

        payload = self.to_json(indent=indent)
        if hasattr(target, "write"):
            target.write(payload)  # type: ignore[arg-type]
        else:
            path = Path(target)
            path.write_text(payload, encoding="utf-8")


__all__ = [
    "SolverConfiguration",
    "normalize_singular_policy",
]
