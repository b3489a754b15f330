from fixedpoint.shared.utils.checked_math import (
    INT32_MAX,
    INT32_MIN,
    checked_add,
    checked_mul,
    checked_neg,
    checked_sub,
    is_int32,
)


def test_int32_bounds():
    assert is_int32(INT32_MAX)
    assert is_int32(INT32_MIN)
    assert not is_int32(INT32_MAX + 1)
    assert not is_int32(INT32_MIN - 1)


def test_checked_add_and_sub():
    assert checked_add(INT32_MAX - 1, 1) == INT32_MAX
    assert checked_add(INT32_MAX, 1) is None
    assert checked_sub(INT32_MIN + 1, 1) == INT32_MIN
    assert checked_sub(INT32_MIN, 1) is None


def test_checked_mul():
    assert checked_mul(214748364, 10) == 2147483640
    assert checked_mul(214748365, 10) is None
    assert checked_mul(-214748364, 10) == -2147483640
    assert checked_mul(0, 10) == 0


def test_checked_neg():
    assert checked_neg(INT32_MAX) == -INT32_MAX
    assert checked_neg(INT32_MIN) is None
