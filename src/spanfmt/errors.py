from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .spans import Span


@dataclass(slots=True)
class ContractViolation(Exception):
    """A caller broke an operation's precondition (a bug, not bad input)."""

    message: str
    span: Span | None = None

    def __str__(self) -> str:
        if self.span is not None:
            return f"{self.span.format()}: {self.message}"
        return self.message


@dataclass(slots=True)
class NotImplementedYet(Exception):
    """A construct the formatter deliberately does not support yet."""

    construct: str

    def __str__(self) -> str:
        return f"not implemented yet: {self.construct}"
