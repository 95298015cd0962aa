from __future__ import annotations

from .ast import ArgPar, Located, Node, NodeKind, TypeArg, TypeArgument, ValArg
from .docstrings import split_doc_string
from .errors import ContractViolation, NotImplementedYet
from .format import doc_comment_lines, format_groups, format_module, group_by_blank_lines
from .spans import Position, RealSpan, Span, UnknownSpan, combine_spans, combine_src_spans, inc_column, shift_span
from .utils import (
    get_real_end_line,
    get_real_start_line,
    get_start_line,
    is_module,
    not_implemented,
    separated_by_blank,
    shift_to_the_right,
    show_outputable,
    type_arg_to_type,
    un_src_span,
    with_indent,
)

__all__ = [
    "ArgPar",
    "ContractViolation",
    "Located",
    "Node",
    "NodeKind",
    "NotImplementedYet",
    "Position",
    "RealSpan",
    "Span",
    "TypeArg",
    "TypeArgument",
    "UnknownSpan",
    "ValArg",
    "combine_spans",
    "combine_src_spans",
    "doc_comment_lines",
    "format_groups",
    "format_module",
    "get_real_end_line",
    "get_real_start_line",
    "get_start_line",
    "group_by_blank_lines",
    "inc_column",
    "is_module",
    "not_implemented",
    "separated_by_blank",
    "shift_span",
    "shift_to_the_right",
    "show_outputable",
    "split_doc_string",
    "type_arg_to_type",
    "un_src_span",
    "with_indent",
]
