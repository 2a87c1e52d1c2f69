import pytest

from gmodule.hilbert import (
    DegreeBoundError,
    HilbertFunction,
    describe,
    hilbert_function,
    numerator_series,
    tull_vector,
)
from gmodule.monideal import MonomialIdeal


def test_numerator_of_zero_ideal_is_one():
    assert numerator_series(MonomialIdeal(3), 6) == [1, 0, 0, 0, 0, 0]


def test_numerator_of_principal_ideal():
    series = numerator_series(MonomialIdeal(1, [(2,)]), 5)
    assert series[0] == 1
    assert series[2] == -1
    assert sum(abs(c) for c in series) == 2


def test_numerator_vanishes_at_one_for_nonzero_ideal():
    ideal = MonomialIdeal(3, [(1, 1, 0), (0, 2, 1), (3, 0, 0)])
    series = numerator_series(ideal, 20)
    assert series[0] == 1
    assert sum(series) == 0


def test_numerator_degree_bound():
    with pytest.raises(DegreeBoundError):
        numerator_series(MonomialIdeal(1, [(5,)]), 3)


def test_polynomial_ring_has_codim_zero():
    hf = hilbert_function([MonomialIdeal(2)], [0], 5)
    hf.divide_all()
    assert hf.codim == 0
    assert hf.degree == 1


@pytest.mark.parametrize("k", [1, 2, 3])
def test_linear_space_codimension(k):
    gens = [tuple(1 if i == j else 0 for i in range(4)) for j in range(k)]
    hf = hilbert_function([MonomialIdeal(4, gens)], [0], 10)
    hf.divide_all()
    assert hf.codim == k
    assert hf.degree == 1


def test_complete_intersection_degree():
    ideal = MonomialIdeal(3, [(2, 0, 0), (0, 3, 0)])
    hf = hilbert_function([ideal], [0], 10)
    hf.divide_all()
    assert hf.codim == 2
    assert hf.degree == 6


def test_rows_are_shifted_by_degree():
    hf = hilbert_function([MonomialIdeal(1), MonomialIdeal(1)], [0, 1], 4)
    assert hf.genfun[:2] == [1, 1]
    assert hf.degree == 2


def test_add_past_bound_raises():
    with pytest.raises(DegreeBoundError):
        hilbert_function([MonomialIdeal(1), MonomialIdeal(1)], [0, 3], 3)


def test_add_below_start_raises():
    hf = HilbertFunction(2, 5)
    with pytest.raises(ValueError):
        hf.add([1], 1)


def test_add_after_divide_raises():
    hf = HilbertFunction(0, 5)
    hf.add([1, -1], 0)
    hf.divide()
    with pytest.raises(ValueError):
        hf.add([1], 0)


def test_format_of_empty_series():
    assert HilbertFunction(0, 5).format() == "\n"


def test_describe_reports_codimension():
    ideal = MonomialIdeal(2, [(1, 0)])
    text = describe([ideal], [0], 5)
    assert "codimension = 1\n" in text
    assert text.endswith("\n")
    assert "genus       = " in text


def test_tull_vector_below_generators_is_zero():
    ideal = MonomialIdeal(2, [(2, 0), (0, 3)])
    assert tull_vector(ideal, 2, 1) == [0, 0]


def test_tull_vector_of_zero_ideal():
    assert tull_vector(MonomialIdeal(3), 3, 4) == [0, 0, 0]


def test_tull_vector_single_generator_in_own_degree():
    assert tull_vector(MonomialIdeal(1, [(1,)]), 1, 1) == [1]


def test_tull_vector_wrong_nvars():
    with pytest.raises(ValueError):
        tull_vector(MonomialIdeal(2), 3, 1)