import pytest

from sparser import GrammarError, ParseFailure, empty, leaf
from sparser.rules import Splice, Slot, evaluate


def balanced():
    # nest := '(' DIGIT nest ')' | <empty>
    return leaf(r"\(").and_(leaf(r"\d")).mark_ipoint().and_(leaf(r"\)")).or_(empty()).inject()


def test_nested_parens_parse():
    assert balanced().parse("(1(2(3)))") == ["(", "1", "(", "2", "(", "3", ")", ")", ")"]


def test_nested_parens_base_case():
    assert balanced().parse("") == []
    assert balanced().parse("(7)") == ["(", "7", ")"]


@pytest.mark.parametrize("text", ["(1(2", "(1(2(3))", "(1)(2)", "((1))"])
def test_unbalanced_input_fails(text):
    with pytest.raises(ParseFailure):
        balanced().parse(text)


def test_derived_rules_share_the_chain_slot():
    root = leaf("x")
    other = leaf("y")
    assert root.and_(other).slot is root.slot
    assert root.or_(other).rep_star().map_discard().slot is root.slot
    assert root.mark_ipoint().slot is root.slot
    assert other.slot is not root.slot
    assert empty().slot is not empty().slot


def test_inject_fills_slot_for_whole_chain():
    root = leaf("a")
    point = root.mark_ipoint()
    tail = leaf("b")
    whole = point.or_(tail)
    whole.inject()
    assert root.slot.rule is whole.node
    # a(a(a(b)))
    assert whole.parse("aaab") == ["a", "a", "a", "b"]


def test_inject_returns_rule():
    rule = leaf("a").mark_ipoint().or_(leaf("b"))
    assert rule.inject() is rule


def test_double_inject_is_rejected():
    rule = leaf("a").mark_ipoint().or_(leaf("b"))
    rule.inject()
    with pytest.raises(GrammarError):
        rule.inject()


def test_uninjected_point_is_rejected_before_parsing():
    rule = leaf("a").mark_ipoint()
    with pytest.raises(GrammarError):
        rule.parse("aa")
    with pytest.raises(GrammarError):
        rule.run("aa")


def test_uninjected_point_nested_in_another_chain():
    inner = leaf("a").mark_ipoint()
    outer = leaf("b").and_(inner.optional())
    with pytest.raises(GrammarError):
        outer.check()


def test_check_passes_after_inject():
    inner = leaf("a").mark_ipoint().or_(leaf("b"))
    outer = leaf("c").and_(inner)
    with pytest.raises(GrammarError):
        outer.check()
    inner.inject()
    assert outer.check() is outer
    assert outer.parse("cab") == ["c", "a", "b"]


def test_engine_rejects_unresolved_slot_directly():
    node = Splice(leaf("a").node, Slot())
    with pytest.raises(GrammarError):
        evaluate(node, "aa")


def test_empty_anchor_owns_chain():
    # list := '[' (item (',' item)*)? ']' ; item := DIGIT | list
    anchor = empty()
    lst = anchor.and_(leaf(r"\[").map_discard()).mark_ipoint().and_(leaf(r"\]").map_discard())
    item = lst.or_(leaf(r"\d").map(lambda t: [int(t[0])]))
    items = item.and_(leaf(",").map_discard().and_(item).rep_star()).optional()
    anchor.and_(items).map(lambda t: [list(t)]).inject()
    assert lst.parse("[1,[2,3],[]]") == [[1, [2, 3], []]]
