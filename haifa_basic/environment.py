from __future__ import annotations

import logging
from typing import Dict, Optional

from .value_utils import format_number

logger = logging.getLogger(__name__)


class BasicEnvironment:
    """Variable store for one program run.

    A variable's identity is its upper-cased name, cut down to
    ``significant_length`` characters when that is set. The same key is used
    for reads and writes, and a write always replaces the previous value.
    Unset variables read as ``0.0``.
    """

    def __init__(self, *, significant_length: Optional[int] = None) -> None:
        if significant_length is not None and significant_length < 1:
            raise ValueError("significant_length must be a positive integer")
        self.significant_length = significant_length
        self._values: Dict[str, float] = {}

    def key(self, name: str) -> str:
        key = name.upper()
        if self.significant_length is not None:
            key = key[: self.significant_length]
        return key

    def read(self, name: str) -> float:
        return self._values.get(self.key(name), 0.0)

    def write(self, name: str, value: float) -> None:
        key = self.key(name)
        logger.debug("set %s = %s", key, value)
        self._values[key] = float(value)

    def snapshot(self) -> Dict[str, float]:
        return dict(self._values)

    def format(self) -> str:
        return "\n".join(f"{name}: {format_number(value)}" for name, value in sorted(self._values.items()))

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"BasicEnvironment({self._values!r})"


__all__ = ["BasicEnvironment"]
