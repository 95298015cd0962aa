from __future__ import annotations

import logging

import pytest

from spanfmt import (
    ArgPar,
    ContractViolation,
    Located,
    Node,
    NodeKind,
    NotImplementedYet,
    Position,
    RealSpan,
    TypeArg,
    UnknownSpan,
    ValArg,
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


def _sp(sl: int, sc: int, el: int, ec: int) -> RealSpan:
    return RealSpan(file="A.hs", start=Position(sl, sc), end=Position(el, ec))


def _decl(text: str, sl: int, el: int | None = None) -> Located[Node]:
    return Located(_sp(sl, 1, sl if el is None else el, 10), Node(NodeKind.DECL, text=text))


def _loc(x: Located[Node]):
    return x.span


UNKNOWN = UnknownSpan("<generated>")


def test_start_line_queries() -> None:
    d = _decl("f = 1", 4, 6)
    assert get_start_line(d) == 4
    assert get_real_start_line(d) == 4
    assert get_real_end_line(d) == 6
    assert un_src_span(d.span) is d.span


def test_start_line_of_unknown_span_is_none() -> None:
    d = Located(UNKNOWN, Node(NodeKind.DECL))
    assert get_start_line(d) is None
    assert un_src_span(UNKNOWN) is None


def test_real_line_accessors_reject_unknown_span() -> None:
    d = Located(UNKNOWN, Node(NodeKind.DECL))
    with pytest.raises(ContractViolation) as e:
        get_real_start_line(d)
    assert "real span" in str(e.value)
    with pytest.raises(ContractViolation):
        get_real_end_line(d)


def test_shift_to_the_right_keeps_payload() -> None:
    d = _decl("f = 1", 2)
    shifted = shift_to_the_right(d)
    assert shifted.value is d.value
    assert shifted.span == _sp(2, 101, 2, 110)
    assert shift_to_the_right(d, 3).span == _sp(2, 4, 2, 13)
    assert d.span == _sp(2, 1, 2, 10)


def test_shift_to_the_right_requires_real_span() -> None:
    with pytest.raises(ContractViolation):
        shift_to_the_right(Located(UNKNOWN, Node(NodeKind.DECL)))


@pytest.mark.parametrize(
    ("start_b", "expected"),
    [(10, False), (11, False), (12, True), (20, True)],
)
def test_separated_by_blank_gap(start_b: int, expected: bool) -> None:
    a = [_decl("f = 1", 8), _decl("g = 2", 9, 10)]
    b = [_decl("h = 3", start_b), _decl("i = 4", start_b + 1)]
    assert separated_by_blank(_loc, a, b) is expected


def test_separated_by_blank_without_positions() -> None:
    known = _decl("f = 1", 1)
    unknown = Located(UNKNOWN, Node(NodeKind.DECL))
    assert separated_by_blank(_loc, [known], [unknown]) is False
    assert separated_by_blank(_loc, [unknown], [_decl("g = 2", 50)]) is False


def test_separated_by_blank_logs_missing_positions(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="spanfmt.utils"):
        separated_by_blank(_loc, [_decl("f = 1", 1)], [_decl("g = 2", 5)])
        assert caplog.messages == []
        separated_by_blank(_loc, [_decl("f = 1", 1)], [Located(UNKNOWN, Node(NodeKind.DECL))])
    assert caplog.messages == ["no real span between groups, assuming no blank line"]


def test_separated_by_blank_only_looks_at_adjacent_ends() -> None:
    a = [_decl("f = 1", 1), Located(UNKNOWN, Node(NodeKind.DECL))]
    assert separated_by_blank(_loc, a, [_decl("g = 2", 5)]) is False
    a = [Located(UNKNOWN, Node(NodeKind.DECL)), _decl("f = 1", 1)]
    assert separated_by_blank(_loc, a, [_decl("g = 2", 5)]) is True


def test_separated_by_blank_requires_groups() -> None:
    with pytest.raises(ContractViolation):
        separated_by_blank(_loc, [], [_decl("g = 2", 5)])
    with pytest.raises(ContractViolation):
        separated_by_blank(_loc, [_decl("g = 2", 5)], [])


def test_with_indent() -> None:
    assert with_indent("foo") == "  foo"
    assert with_indent("") == "  "
    assert with_indent(" x ") == "   x "


def test_is_module() -> None:
    mod = Node(NodeKind.MODULE, text="Main")
    assert is_module(mod)
    assert not is_module(Node(NodeKind.DECL, text="Main"))
    assert not is_module(Located(_sp(1, 1, 1, 1), mod))
    assert not is_module("Module")
    assert not is_module(None)


def test_not_implemented_names_the_construct() -> None:
    with pytest.raises(NotImplementedYet) as e:
        not_implemented("HsArgPar")
    assert e.value.construct == "HsArgPar"
    assert str(e.value) == "not implemented yet: HsArgPar"
    assert not isinstance(e.value, ContractViolation)


def test_type_arg_to_type() -> None:
    term = Located(_sp(1, 5, 1, 6), Node(NodeKind.EXPR, text="x"))
    ty = Located(_sp(1, 9, 1, 11), Node(NodeKind.TYPE, text="Int"))
    assert type_arg_to_type(ValArg(term)) is term
    assert type_arg_to_type(TypeArg(_sp(1, 8, 1, 8), ty)) is ty
    with pytest.raises(NotImplementedYet) as e:
        type_arg_to_type(ArgPar(_sp(1, 12, 1, 12)))
    assert e.value.construct == "ArgPar"


def test_show_outputable() -> None:
    node = Node(NodeKind.DECL, text="f", children=(Located(_sp(2, 3, 2, 4), Node(NodeKind.EXPR, text="1")),))
    assert show_outputable(node) == "Decl 'f' [Expr '1']"
    assert show_outputable(Located(_sp(1, 1, 2, 4), node)) == "Decl 'f' [Expr '1'] @ A.hs:1:1-2:4"
    assert show_outputable(UNKNOWN) == "<generated>"
