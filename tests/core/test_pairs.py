"""Tests for pair slot setters.

Critical Invariants:
- Only the targeted slot changes
- The untouched slot is passed through as the same object
- Setters nest to reach pairs inside pairs
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from composable import compose, compose_backward, fn, map_first, map_second


def incr(x):
    return x + 1


def square(x):
    return x * x


@given(x=st.integers(), y=st.text())
def test_map_first_transforms_slot_zero(x, y):
    """PROPERTY: map_first(f)((x, y)) == (f(x), y)."""
    assert map_first(incr)((x, y)) == (incr(x), y)


@given(x=st.text(), y=st.integers())
def test_map_second_transforms_slot_one(x, y):
    """PROPERTY: map_second(f)((x, y)) == (x, f(y))."""
    assert map_second(incr)((x, y)) == (x, incr(y))


def test_untouched_slot_is_same_object():
    payload = ["shared"]

    assert map_first(incr)((1, payload))[1] is payload
    assert map_second(incr)((payload, 1))[0] is payload


def test_input_pair_is_not_mutated():
    pair = [42, "Hello"]
    result = map_first(incr)(pair)

    assert pair == [42, "Hello"]
    assert result == (43, "Hello")
    assert isinstance(result, tuple)


def test_slot_type_can_change():
    pair = (42, "Hello")
    result = pair | fn(map_first(incr >> fn(square) >> str)) >> map_second(len)

    assert result == ("1849", 5)


def test_chained_setters_match_composed_transform():
    pair = (42, "Hello")
    chained = pair | fn(map_first(incr)) >> map_first(square) >> map_first(str)
    fused = pair | fn(map_first(compose(incr, square, str)))

    assert chained == fused == ("1849", "Hello")


def test_nested_pair_update():
    """Updating the first slot of the pair nested in the second slot."""
    nested = ("Hello", (42, "World"))

    assert map_second(map_first(incr))(nested) == ("Hello", (43, "World"))
    assert compose(map_first, map_second)(incr)(nested) == ("Hello", (43, "World"))
    assert compose_backward(map_second, map_first)(incr)(nested) == ("Hello", (43, "World"))


def test_nested_update_leaves_siblings_untouched():
    inner_tail = ["World"]
    nested = ("Hello", (42, inner_tail))

    result = map_second(map_first(incr))(nested)

    assert result[0] is nested[0]
    assert result[1][1] is inner_tail


@given(pair=st.tuples(st.integers(), st.integers()))
def test_disjoint_slot_setters_commute(pair):
    """PROPERTY: setters on different slots give the same result in any order."""
    first_then_second = compose(map_first(incr), map_second(square))
    second_then_first = compose(map_second(square), map_first(incr))

    assert first_then_second(pair) == second_then_first(pair)


def test_non_pair_raises():
    with pytest.raises(ValueError):
        map_first(incr)((1, 2, 3))
