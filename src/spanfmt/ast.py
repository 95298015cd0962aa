from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from .spans import Span


T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Located(Generic[T]):
    """A payload paired with the span it was parsed from."""

    span: Span
    value: T

    def ppr(self) -> str:
        inner = self.value.ppr() if hasattr(self.value, "ppr") else repr(self.value)
        return f"{inner} @ {self.span.ppr()}"


class NodeKind(str, Enum):
    MODULE = "Module"
    IMPORT = "Import"
    DECL = "Decl"
    SIGNATURE = "Signature"
    TYPE = "Type"
    EXPR = "Expr"
    COMMENT = "Comment"


@dataclass(frozen=True, slots=True)
class Node:
    """Generic syntax tree node; the syntactic category lives in ``kind``.

    ``text`` is the node's own rendering (a declaration head, an import line);
    ``doc`` is the raw text of an attached doc comment, as extracted by the
    lexer (no comment markers).
    """

    kind: NodeKind
    text: str | None = None
    doc: str | None = None
    children: tuple[Located[Node], ...] = ()

    def ppr(self) -> str:
        head = self.kind.value
        if self.text is not None:
            head += f" {self.text!r}"
        if not self.children:
            return head
        return head + " [" + ", ".join(c.value.ppr() for c in self.children) + "]"


# Arguments of a generic type application `f @t x (...)`.


@dataclass(frozen=True, slots=True)
class ValArg:
    term: Located[Node]


@dataclass(frozen=True, slots=True)
class TypeArg:
    """Visible type argument (`@ty`); ``span`` covers the `@`."""

    span: Span
    type: Located[Node]


@dataclass(frozen=True, slots=True)
class ArgPar:
    span: Span


TypeArgument = ValArg | TypeArg | ArgPar
