"""Integer conversion and arithmetic / comparison functions."""

from __future__ import annotations

import operator
from typing import Callable, Sequence

from .types import InvalidArgumentCount, OutOfRangeError, Value

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


def to_int(text: str) -> int:
    """Convert the longest numeric prefix of ``text`` to an integer.

    Leading whitespace is ignored, a single leading ``-`` negates the number,
    decimals are truncated, and anything unparsable yields 0.
    """
    s = text.lstrip()
    sign = 1
    if s.startswith("-"):
        s = s[1:]
        sign = -1
    digits = []
    for ch in s:
        if "0" <= ch <= "9":
            digits.append(ch)
        else:
            break
    if not digits:
        return 0
    number = int("".join(digits))
    if number > I64_MAX:
        return 0
    return number * sign


def _require_at_least_two(name: str, args: Sequence[object]) -> None:
    if len(args) < 2:
        raise InvalidArgumentCount(name, len(args))


def _checked(value: int) -> int:
    if not I64_MIN <= value <= I64_MAX:
        raise OutOfRangeError()
    return value


def add(args: Sequence[str]) -> str:
    """Sum all arguments; raises OutOfRangeError on overflow."""
    _require_at_least_two("add", args)
    total = 0
    for arg in args:
        total = _checked(total + to_int(arg))
    return str(total)


def sub(args: Sequence[str]) -> str:
    """Subtract every later argument from the first, saturating at the limits."""
    _require_at_least_two("sub", args)
    first, *rest = args
    result = to_int(first)
    for arg in rest:
        result = max(I64_MIN, min(I64_MAX, result - to_int(arg)))
    return str(result)


def mul(args: Sequence[str]) -> str:
    """Multiply all arguments; raises OutOfRangeError on overflow."""
    _require_at_least_two("mul", args)
    product = 1
    for arg in args:
        product = _checked(product * to_int(arg))
    return str(product)


def div(args: Sequence[str]) -> str:
    """Divide the first argument by each later one, truncating toward zero.

    Division by zero makes the running result 0.
    """
    _require_at_least_two("div", args)
    first, *rest = args
    result = to_int(first)
    for arg in rest:
        divisor = to_int(arg)
        if divisor == 0:
            result = 0
            continue
        quotient = abs(result) // abs(divisor)
        if (result < 0) != (divisor < 0):
            quotient = -quotient
        result = _checked(quotient)
    return str(result)


def min_value(args: Sequence[str]) -> str:
    """Return the smallest argument as an integer string."""
    _require_at_least_two("min", args)
    return str(min(to_int(arg) for arg in args))


def max_value(args: Sequence[str]) -> str:
    """Return the largest argument as an integer string."""
    _require_at_least_two("max", args)
    return str(max(to_int(arg) for arg in args))


def _compare(name: str, args: Sequence[Value], op: Callable[[int, int], bool]) -> Value:
    if len(args) != 2:
        raise InvalidArgumentCount(name, len(args))
    return Value("", op(to_int(args[0].text), to_int(args[1].text)))


def eq(args: Sequence[Value]) -> Value:
    """True if both arguments are equal as integers."""
    return _compare("eq", args, operator.eq)


def ne(args: Sequence[Value]) -> Value:
    """True if the arguments differ as integers."""
    return _compare("ne", args, operator.ne)


def gt(args: Sequence[Value]) -> Value:
    """True if the first argument is greater than the second."""
    return _compare("gt", args, operator.gt)


def gte(args: Sequence[Value]) -> Value:
    """True if the first argument is greater than or equal to the second."""
    return _compare("gte", args, operator.ge)


def lt(args: Sequence[Value]) -> Value:
    """True if the first argument is less than the second."""
    return _compare("lt", args, operator.lt)


def lte(args: Sequence[Value]) -> Value:
    """True if the first argument is less than or equal to the second."""
    return _compare("lte", args, operator.le)