from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .errors import ContractViolation


logger = logging.getLogger(__name__)

TAB_STOP = 8


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A concrete source position, 1-based line and column.

    Ordering is document order: by line, then by column.
    """

    line: int
    column: int

    def advance(self, ch: str) -> Position:
        """Step over a single character the way a line-by-line scan does."""
        if ch == "\n":
            return Position(line=self.line + 1, column=1)
        if ch == "\t":
            col = ((self.column - 1) // TAB_STOP + 1) * TAB_STOP + 1
            return Position(line=self.line, column=col)
        return Position(line=self.line, column=self.column + 1)


def inc_column(pos: Position, n: int) -> Position:
    if n < 0:
        raise ContractViolation(f"cannot move a position backwards (n={n})")
    for _ in range(n):
        pos = pos.advance(" ")
    return pos


@dataclass(frozen=True, slots=True)
class RealSpan:
    """Closed span [start, end] backed by a file."""

    file: str
    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ContractViolation(
                f"span ends before it starts: {self.start.line}:{self.start.column}"
                f" > {self.end.line}:{self.end.column}"
            )

    @property
    def start_line(self) -> int:
        return self.start.line

    @property
    def start_column(self) -> int:
        return self.start.column

    @property
    def end_line(self) -> int:
        return self.end.line

    @property
    def end_column(self) -> int:
        return self.end.column

    def format(self) -> str:
        return f"{self.file}:{self.start.line}:{self.start.column}"

    def ppr(self) -> str:
        if self.start.line == self.end.line:
            return f"{self.format()}-{self.end.column}"
        return f"{self.format()}-{self.end.line}:{self.end.column}"


@dataclass(frozen=True, slots=True)
class UnknownSpan:
    """Span of a synthesized node; there are no coordinates to report."""

    reason: str

    def format(self) -> str:
        return self.reason

    def ppr(self) -> str:
        return self.reason


Span = RealSpan | UnknownSpan


def combine_spans(a: Span, b: Span) -> Span:
    """Smallest span enclosing both ``a`` and ``b``.

    Unknown spans carry no extent, so they are absorbed by the other side.
    """
    if isinstance(b, UnknownSpan):
        return a
    if isinstance(a, UnknownSpan):
        return b
    if a.file != b.file:
        logger.debug("not combining spans from different files: %s, %s", a.file, b.file)
        return UnknownSpan("<combine_spans: files differ>")
    return RealSpan(file=a.file, start=min(a.start, b.start), end=max(a.end, b.end))


def combine_src_spans(spans: Iterable[Span]) -> Span:
    """Combine all source spans from the given non-empty collection."""
    it = iter(spans)
    try:
        out = next(it)
    except StopIteration:
        raise ContractViolation("combine_src_spans() requires at least one span") from None
    for sp in it:
        out = combine_spans(out, sp)
    return out


def shift_span(span: Span, n: int) -> RealSpan:
    """Move both ends of ``span`` as if ``n`` characters were inserted before it."""
    if not isinstance(span, RealSpan):
        raise ContractViolation("cannot shift a span without coordinates", span=span)
    return RealSpan(file=span.file, start=inc_column(span.start, n), end=inc_column(span.end, n))
