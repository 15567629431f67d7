import pytest

from actor_motion.bounded import BoundedInt


@pytest.mark.parametrize(
    "initial, expected",
    [
        (0, 0),
        (2, 2),
        (-3, -3),
        (7, 5),
        (-10, -5),
    ],
)
def test_initialization_does_not_exceed_limits(initial: int, expected: int) -> None:
    assert BoundedInt(5, initial).value == expected


def test_created_at_zero() -> None:
    assert BoundedInt(5).value == 0


def test_addition_within_limit() -> None:
    value = BoundedInt(5)
    value += 1
    assert value == 1
    value += 2
    assert value == 3
    value += 2
    assert value == 5


def test_subtraction_within_limit() -> None:
    value = BoundedInt(5)
    value -= 1
    assert value == -1
    value -= 2
    assert value == -3
    value -= 2
    assert value == -5


@pytest.mark.parametrize(
    "initial, summand",
    [(3, 4), (2, 2), (0, 4), (0, 7), (-2, 15)],
)
def test_addition_saturates_at_limit(initial: int, summand: int) -> None:
    assert BoundedInt(3, initial).add(summand).value == 3


@pytest.mark.parametrize(
    "initial, subtrahend",
    [(-3, 4), (-2, 2), (0, 4), (0, 7), (2, 15)],
)
def test_subtraction_saturates_at_limit(initial: int, subtrahend: int) -> None:
    assert BoundedInt(3, initial).subtract(subtrahend).value == -3


def test_negative_delta_is_clamped_too() -> None:
    assert BoundedInt(3, 1).add(-10).value == -3
    assert BoundedInt(3, -1).subtract(-10).value == 3


def test_operations_do_not_mutate() -> None:
    value = BoundedInt(3, 1)
    value.add(1)
    value.subtract(1)
    assert value.value == 1


def test_magnitude() -> None:
    assert BoundedInt(5, -4).magnitude == 4
    assert abs(BoundedInt(5, 4)) == 4
    assert int(BoundedInt(5, -2)) == -2


def test_comparisons_against_int() -> None:
    value = BoundedInt(5, 2)
    assert value > 0
    assert value >= 2
    assert value < 3
    assert value <= 2
    assert value != 1
    assert 0 < value
    assert 2 == value


def test_equality_between_bounded_values() -> None:
    assert BoundedInt(5, 2) == BoundedInt(5, 2)
    assert BoundedInt(5, 1) < BoundedInt(5, 2)
    assert hash(BoundedInt(5, 2)) == hash(BoundedInt(5, 2))


def test_values_with_different_limits_compare_by_value() -> None:
    small, large = BoundedInt(5, 2), BoundedInt(6, 2)
    assert small == large
    assert not small < large
    assert not small > large
    assert small <= large
    assert small >= large
    assert BoundedInt(6, 1) < BoundedInt(3, 2)


def test_hash_agrees_with_int_equality() -> None:
    value = BoundedInt(5, 2)
    assert value == 2
    assert hash(value) == hash(2)
    assert value in {2}
    assert 2 in {value}
    assert {BoundedInt(5, -1): "a"}[-1] == "a"


def test_zero_limit_pins_value() -> None:
    value = BoundedInt(0, 3)
    assert value == 0
    assert value.add(1) == 0


def test_negative_limit_is_rejected() -> None:
    with pytest.raises(ValueError):
        BoundedInt(-1)
