"""Tests for collection lifting."""

from dataclasses import dataclass

from hypothesis import given
from hypothesis import strategies as st

from composable import compose, filter_over, fn, key_path, map_over, map_with, over


def incr(x):
    return x + 1


def square(x):
    return x * x


def is_even(x):
    return x % 2 == 0


@given(xs=st.lists(st.integers()))
def test_map_over_preserves_length_and_order(xs):
    """PROPERTY: map_over(f)(xs)[i] == f(xs[i]) for every i."""
    result = map_over(incr)(xs)

    assert len(result) == len(xs)
    assert all(result[i] == incr(xs[i]) for i in range(len(xs)))


@given(xs=st.lists(st.integers()))
def test_map_over_distributes_over_composition(xs):
    """Mapping twice equals mapping the composed function once."""
    assert compose(map_over(incr), map_over(square))(xs) == map_over(compose(incr, square))(xs)


def test_map_over_accepts_any_iterable():
    assert map_over(incr)(range(1, 4)) == [2, 3, 4]
    assert map_over(str)(x for x in (1, 2)) == ["1", "2"]


def test_map_over_does_not_mutate_input():
    xs = [1, 2, 3]
    map_over(incr)(xs)
    assert xs == [1, 2, 3]


def test_map_then_filter_pipeline():
    result = list(range(1, 11)) | fn(map_over(incr)) >> filter_over(is_even)

    assert result == [2, 4, 6, 8, 10]


@given(xs=st.lists(st.integers()))
def test_filter_over_keeps_relative_order(xs):
    result = filter_over(is_even)(xs)

    assert result == [x for x in xs if is_even(x)]


def test_map_with_is_curried_map():
    over_numbers = map_with(range(1, 4))

    assert over_numbers(incr) == [2, 3, 4]
    assert over_numbers(square) == [1, 4, 9], "Sequence is reusable across calls"


def test_record_setter_lifted_over_batch():
    @dataclass(frozen=True)
    class User:
        name: str
        age: int

    batch = [User("Blob", 42), User("Blob Jr.", 5), User("Blob Sr.", 70)]
    birthday = over(key_path(User, "age"), incr) >> fn(over(key_path(User, "name"), str.upper))

    assert map_over(birthday)(batch) == [
        User("BLOB", 43),
        User("BLOB JR.", 6),
        User("BLOB SR.", 71),
    ]
    assert batch[0] == User("Blob", 42)
