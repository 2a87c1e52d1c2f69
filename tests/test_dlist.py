import pytest

from gmodule.dlist import (
    DegreeListError,
    ElementKind,
    ListElement,
    composite,
    concat,
    consume,
    consume_all,
    filled,
    format_list,
    format_part,
    max_degree,
    min_degree,
    negated,
    parse_element,
    select,
    shifted,
    zeros,
)


def test_filled_and_zeros():
    assert filled(7, 3) == [7, 7, 7]
    assert zeros(0) == []
    assert zeros(4) == [0] * 4


def test_negated_twice_is_identity():
    a = [3, -1, 0, 8]
    assert negated(negated(a)) == a
    assert all(x + y == 0 for x, y in zip(a, negated(a)))


def test_concat_keeps_order():
    a, b = [1, 2], [5, 6, 7]
    result = concat(a, b)
    assert result[: len(a)] == a
    assert result[len(a):] == b


def test_composite_uses_one_based_positions():
    assert composite([2, 1], [10, 20]) == [20, 10]


def test_shifted_invariant():
    a = [4, -2, 9]
    assert [x - 5 for x in shifted(5, a)] == a


def test_max_min():
    assert max_degree([]) == 0
    assert min_degree([]) == 0
    assert max_degree([3, 9, 1]) == 9
    assert min_degree([3, 9, 1]) == 1


def test_parse_repetition():
    assert parse_element("4:3") == ListElement(ElementKind.REPL, 4, 3)


def test_parse_range():
    assert parse_element("2..5") == ListElement(ElementKind.RANGE, 2, 5)


def test_parse_single_dot_is_empty_range():
    elem = parse_element("6.")
    assert elem.kind is ElementKind.RANGE
    assert elem.second == elem.first - 1
    assert list(elem.values()) == []


def test_parse_continuation_and_special():
    assert parse_element("\\").kind is ElementKind.CONT
    assert parse_element("w", {"w": 7}) == ListElement(ElementKind.RANGE, 7, 7)


def test_parse_lookup():
    def lookup(name):
        return [1, 2] if name == "m" else None

    assert parse_element("m", lookup=lookup) == ListElement(ElementKind.LIST, items=(1, 2))
    assert parse_element("q", lookup=lookup).kind is ElementKind.NONE


def test_consume_pads_with_last_value():
    assert consume(["1..3"], 5, 0) == list(range(1, 4)) + [3, 3]


def test_consume_uses_default_when_empty():
    assert consume([], 3, 9) == [9, 9, 9]


def test_consume_truncates():
    assert consume(["1..10"], 2) == list(range(1, 3))


def test_consume_continuation():
    assert consume(["1", "\\"], 2, continuation=lambda: ["5"]) == [1, 5]


def test_consume_all_mixed():
    result = consume_all(["2:3", "x"], lookup=lambda name: [4, 4])
    assert result == [2, 2, 2, 4, 4]


def test_select_defaults_to_full_range():
    assert select([], 1, 4) == list(range(1, 5))


def test_select_out_of_bounds():
    with pytest.raises(DegreeListError):
        select(["0"], 1, 3)


def test_format_part():
    assert format_part(5, 1) == "5"
    assert format_part(5, 2) == "5 5"
    assert format_part(5, 3) == "5:3"
    assert format_part(-2, 1) == "-2"


def test_format_list_runs():
    assert format_list([1, 1, 1, 2], 80) == "1:3 2\n"
    assert format_list([], 80) == ""


def test_format_list_wraps_and_round_trips():
    dl = [i for i in range(40) for _ in range(1 + i % 3)]
    text = format_list(dl, 30)
    assert "\\\n" in text
    tokens = [t for t in text.split() if t != "\\"]
    assert consume_all(tokens) == dl


def test_format_list_comment_narrows_lines():
    dl = list(range(30))
    plain = format_list(dl, 40)
    commented = format_list(dl, 40, comment=True)
    assert commented.count("\\") >= plain.count("\\")
    tokens = [t for t in commented.split() if t != "\\"]
    assert consume_all(tokens) == dl