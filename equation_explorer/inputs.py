"""Text entry for a single integer coefficient.

While the user types, the field may hold text that is not a number yet
(``""`` or ``"-"``). Such text is kept but never committed. When editing
finishes, unparseable text is silently replaced by the last committed value.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Optional

__all__ = ["CoefficientField", "parse_int"]

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def parse_int(text: str) -> Optional[int]:
    """Parse the leading integer of ``text`` (``"12abc"`` → 12, ``"abc"`` → None)."""
    m = _LEADING_INT_RE.match(text)
    return int(m.group(1)) if m else None


@dataclass
class CoefficientField:
    name: str
    value: int = 0
    on_commit: Optional[Callable[[str, int], None]] = None
    text: str = field(default="", init=False)

    def __post_init__(self) -> None:
        self.text = str(self.value)

    def _commit(self, num: int) -> None:
        # on_commit may reject the value; only adopt it once accepted
        if self.on_commit is not None:
            self.on_commit(self.name, num)
        self.value = num

    def edit(self, text: str) -> bool:
        """Record keystroke-level ``text``; return True when a value was committed."""
        self.text = text
        if text in ("", "-"):
            return False
        num = parse_int(text)
        if num is None:
            return False
        self._commit(num)
        return True

    def blur(self) -> int:
        """Finish editing: commit parseable text or revert to the committed value."""
        num = parse_int(self.text)
        if num is None:
            logger.debug("Reverting %s input %r to %d", self.name, self.text, self.value)
            self.text = str(self.value)
        else:
            self._commit(num)
            self.text = str(num)
        return self.value

    def sync(self, value: int) -> None:
        """Adopt a value set from outside (e.g. a new challenge)."""
        self.value = value
        self.text = str(value)
