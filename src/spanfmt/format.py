from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from .ast import Located, Node, NodeKind
from .docstrings import split_doc_string
from .errors import ContractViolation
from .spans import Span
from .utils import get_start_line, is_module, separated_by_blank, with_indent


logger = logging.getLogger(__name__)

T = TypeVar("T")


def _loc(node: Located[object]) -> Span:
    return node.span


def format_module(mod: Located[Node]) -> str:
    node = mod.value
    if not is_module(node):
        got = node.kind.value if isinstance(node, Node) else type(node).__name__
        raise ContractViolation(f"format_module() expects a module, got {got}", span=mod.span)
    logger.debug("formatting module %s (%d items)", node.text, len(node.children))

    out: list[str] = []
    if node.doc is not None:
        out.extend(doc_comment_lines(node.doc))
    if node.text is not None:
        out.append(f"module {node.text} where")
        out.append("")

    imports = [c for c in node.children if c.value.kind is NodeKind.IMPORT]
    others = [c for c in node.children if c.value.kind is not NodeKind.IMPORT]

    for group in _import_groups(imports):
        for imp in group:
            out.append(imp.value.text or "")
        out.append("")

    out.extend(format_groups(group_by_blank_lines(others, _loc), _format_decl, _loc))

    # Trim trailing blank lines
    while out and out[-1] == "":
        out.pop()
    return "\n".join(out) + "\n"


def _import_groups(imports: list[Located[Node]]) -> list[list[Located[Node]]]:
    # Imports without a source line were synthesized; they go last, in one group.
    written = [imp for imp in imports if get_start_line(imp) is not None]
    synthesized = [imp for imp in imports if get_start_line(imp) is None]
    groups = [sorted(g, key=lambda imp: imp.value.text or "") for g in group_by_blank_lines(written, _loc)]
    if synthesized:
        groups.append(synthesized)
    return groups


def _format_decl(item: Located[Node], *, depth: int = 0) -> list[str]:
    node = item.value
    out: list[str] = []
    if node.doc is not None:
        out.extend(doc_comment_lines(node.doc, indent=depth))
    out.append(_indent(node.text or "", depth))
    for child in node.children:
        out.extend(_format_decl(child, depth=depth + 1))
    return out


def doc_comment_lines(raw: str, *, indent: int = 0) -> list[str]:
    """Render a raw doc comment as `-- |` lines at the given indent level."""
    out: list[str] = []
    for i, line in enumerate(split_doc_string(raw)):
        marker = "-- |" if i == 0 else "--"
        out.append(_indent(f"{marker} {line}" if line else marker, indent))
    return out


def group_by_blank_lines(items: Iterable[T], loc: Callable[[T], Span]) -> list[list[T]]:
    """Split siblings into groups wherever the source had a blank line."""
    groups: list[list[T]] = []
    for it in items:
        if groups and not separated_by_blank(loc, groups[-1], [it]):
            groups[-1].append(it)
        else:
            groups.append([it])
    return groups


def format_groups(
    groups: Sequence[Sequence[T]],
    render: Callable[[T], list[str]],
    loc: Callable[[T], Span],
) -> list[str]:
    out: list[str] = []
    prev: Sequence[T] | None = None
    for group in groups:
        if not group:
            continue
        if prev is not None and separated_by_blank(loc, prev, group):
            out.append("")
        for it in group:
            out.extend(render(it))
        prev = group
    return out


def _indent(s: str, n: int) -> str:
    for _ in range(n):
        s = with_indent(s)
    return s
