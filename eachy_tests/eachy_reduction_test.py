from decimal import Decimal
from fractions import Fraction

import numpy as np

import suite
from eachy import E, empty, configure, get_config, EmptyError, IdentityError

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


class Money:
    """a value type that knows its own zero"""

    def __init__(self, cents):
        self.cents = cents

    @classmethod
    def additive_identity(cls):
        return cls(0)

    def __add__(self, other):
        return Money(self.cents + other.cents)

    def __eq__(self, other):
        return isinstance(other, Money) and self.cents == other.cents


# --- reduce ---

@test("reduce folds with the first element as seed")
def test_reduce_basic():
    assert_that(E([1, 2, 3, 4, 5]).reduce(lambda acc, i: acc + i) == 15, "sum is 15")
    assert_that(E([1]).reduce(lambda acc, i: acc + i) == 1, "a single element is returned as is")
    joined = E([1, 2, 3, 4, 5]).reduce(lambda acc, i: f"{acc}-{i}")
    assert_that(joined == "1-2-3-4-5", f"accumulator may change type: {joined}")


@test("reduce on an empty source raises unless seeded")
def test_reduce_empty():
    assert_raises(EmptyError, empty().reduce, lambda a, b: a + b)
    assert_that(empty().reduce(lambda a, b: a + b, 10) == 10, "the seed comes back unchanged")


@test("reduce with a seed")
def test_reduce_seed():
    assert_that(E([1, 2, 3, 4, 5]).reduce(lambda acc, i: acc + i, 10) == 25, "10 + 15")
    combine = lambda s, a: (s, a)
    assert_that(E(['a']).reduce(combine, 's') == ('s', 'a'), "one element gives f(seed, a)")
    reversed_list = E([1, 2, 3]).reduce(lambda memo, i: [i] + memo, [])
    assert_that(reversed_list == [3, 2, 1], f"got {reversed_list}")


@test("reduce accepts None as an explicit seed")
def test_reduce_none_seed():
    assert_that(empty().reduce(lambda a, b: b, None) is None, "None seed is returned for an empty source")


@test("reduce_or_none returns None instead of raising")
def test_reduce_or_none():
    assert_that(empty().reduce_or_none(lambda a, b: a + b) is None, "empty gives None")
    assert_that(E([2, 3]).reduce_or_none(lambda a, b: a * b) == 6, "non-empty reduces")


# --- accumulate ---

@test("accumulate returns prefix sums")
def test_accumulate():
    assert_that(E([1, 2, 3, 4, 5, 6]).accumulate() == [1, 3, 6, 10, 15, 21], "prefix sums")
    assert_that(E([1, 2, 3, 4, 5]).accumulate(initial=6) == [6, 7, 9, 12, 16, 21], "initial leads the list")
    assert_that(E([2, 3, 4, 5]).accumulate(lambda x, y: x * y) == [2, 6, 24, 120], "custom combiner")
    assert_that(E([1, 3, 5, 7]).accumulate(lambda x, y: x * y, 9) == [9, 9, 27, 135, 945], "combiner and initial")
    assert_that(empty().accumulate() == [], "empty source")
    assert_that(empty().accumulate(initial=0) == [0], "empty source with initial")


# --- sum ---

@test("sum infers the additive identity")
def test_sum_identity():
    assert_that(E([1, 2, 3, 4, 5, 6]).sum() == 21, "ints")
    assert_that(empty().sum() == 0, "empty sums to 0")
    assert_that(isinstance(E([0.5, 0.25]).sum(), float), "floats give a float")
    assert_that(E([Decimal('1.1'), Decimal('2.2')]).sum() == Decimal('3.3'), "decimals")
    assert_that(E([Fraction(1, 3), Fraction(2, 3)]).sum() == 1, "fractions")
    assert_that(E(['a', 'b', 'c']).sum() == 'abc', "strings concatenate")
    assert_that(E([[1], [2, 3]]).sum() == [1, 2, 3], "lists concatenate")


@test("sum with an explicit initial value")
def test_sum_initial():
    assert_that(E([1, 2, 3, 4, 5, 6]).sum(initial=7) == 28, "7 + 21")
    assert_that(empty().sum(initial=7) == 7, "empty returns the initial value")
    mixed = E([1, 'x'])
    assert_raises(TypeError, mixed.sum)
    assert_that(E(['x', 'y']).sum(initial='>') == '>xy', "initial fixes the result type")


@test("sum with a selector")
def test_sum_selector():
    assert_that(E(['Alice', 'Bob']).sum(len) == 8, "5 + 3")
    assert_that(E(['Alice', 'Bob']).sum(len, initial=1) == 9, "1 + 5 + 3")
    assert_that(empty().sum(lambda x: x + 1) == 0, "empty with selector")


@test("sum uses a type's own additive_identity")
def test_sum_hook():
    total = E([Money(150), Money(250)]).sum()
    assert_that(total == Money(400), "Money knows its own zero")
    assert_that(empty().sum(result_type=Money) == Money(0), "result_type picks the empty identity")


@test("sum of numpy scalars")
def test_sum_numpy():
    total = E(list(np.arange(1, 5, dtype=np.int32))).sum()
    assert_that(total == 10, f"got {total}")


@test("numpy result types keep their numpy identity")
def test_sum_numpy_result_type():
    zero = empty().sum(result_type=np.float64)
    assert_that(type(zero) is np.float64 and zero == 0, f"got {zero!r}")
    one = empty().product(result_type=np.float64)
    assert_that(type(one) is np.float64 and one == 1, f"got {one!r}")
    total = E([np.float64(1.5), np.float64(2.5)]).sum()
    assert_that(type(total) is np.float64 and total == 4.0, f"got {total!r}")


@test("sum without an inferable identity raises IdentityError")
def test_sum_no_identity():
    assert_raises(IdentityError, E([object()]).sum)
    assert_raises(IdentityError, empty().sum, result_type=object)


@test("sum respects the configured empty result type")
def test_sum_configured_type():
    previous = get_config()
    try:
        configure(default_sum_type=float)
        result = empty().sum()
        assert_that(result == 0.0 and isinstance(result, float), f"got {result!r}")
    finally:
        configure(previous)


# --- product ---

@test("product infers the multiplicative identity")
def test_product():
    assert_that(E([1, 2, 3, 4, 5, 6]).product() == 720, "6!")
    assert_that(empty().product() == 1, "empty product is 1")
    assert_that(E([1, 2, 3, 4, 5, 6]).product(initial=7) == 5040, "7 * 720")
    assert_that(E(['Alice', 'Bob']).product(len) == 15, "5 * 3")
    assert_that(E([Decimal('1.5'), Decimal('2')]).product() == Decimal('3.0'), "decimals")


@test("product of strings has no identity")
def test_product_strings():
    assert_raises(IdentityError, E(['a', 'b']).product)


if __name__ == "__main__":
    suite.main(title="eachy reduction test suite")
