"""Logical and conditional title-format functions."""

from __future__ import annotations

from functools import reduce
from operator import xor as _bool_xor
from typing import Sequence

from .numeric import to_int
from .types import InvalidArgumentCount, Value

_FALSE = Value("", False)


def _require_at_least_two(name: str, args: Sequence[Value]) -> None:
    if len(args) < 2:
        raise InvalidArgumentCount(name, len(args))


def _require_exactly(name: str, count: int, args: Sequence[Value]) -> None:
    if len(args) != count:
        raise InvalidArgumentCount(name, len(args))


def and_(args: Sequence[Value]) -> Value:
    """``$and(expr, ...)``: true only if every argument is true."""
    _require_at_least_two("and", args)
    return Value("", all(arg.cond for arg in args))


def or_(args: Sequence[Value]) -> Value:
    """``$or(expr, ...)``: true if at least one argument is true."""
    _require_at_least_two("or", args)
    return Value("", any(arg.cond for arg in args))


def xor(args: Sequence[Value]) -> Value:
    """``$xor(expr, ...)``: true if an odd number of arguments are true."""
    _require_at_least_two("xor", args)
    return Value("", reduce(_bool_xor, (arg.cond for arg in args), False))


def not_(args: Sequence[Value]) -> Value:
    """``$not(expr)``: the logical opposite of the single argument."""
    _require_exactly("not", 1, args)
    return Value("", not args[0].cond)


def if_(args: Sequence[Value]) -> Value:
    """``$if(cond,then[,else])``: ``then`` if ``cond`` is true, else ``else`` or false."""
    if len(args) not in (2, 3):
        raise InvalidArgumentCount("if", len(args))
    if args[0].cond:
        return args[1]
    if len(args) == 3:
        return args[2]
    return _FALSE


def if2(args: Sequence[Value]) -> Value:
    """``$if2(expr,else)``: ``expr`` if it is true, otherwise ``else``."""
    _require_exactly("if2", 2, args)
    first, fallback = args
    return first if first.cond else fallback


def if3(args: Sequence[Value]) -> Value:
    """``$if3(a1,...,aN,else)``: the first true argument, otherwise the last one."""
    _require_at_least_two("if3", args)
    return next((arg for arg in args if arg.cond), args[-1])


def ifequal(args: Sequence[Value]) -> Value:
    """``$ifequal(int1,int2,then,else)``: ``then`` if the integers are equal."""
    _require_exactly("ifequal", 4, args)
    a, b, then, otherwise = args
    return then if to_int(a.text) == to_int(b.text) else otherwise


def ifgreater(args: Sequence[Value]) -> Value:
    """``$ifgreater(int1,int2,then,else)``: ``then`` if int1 is greater than int2."""
    _require_exactly("ifgreater", 4, args)
    a, b, then, otherwise = args
    return then if to_int(a.text) > to_int(b.text) else otherwise


def iflonger(args: Sequence[Value]) -> Value:
    """``$iflonger(str,n,then,else)``: ``then`` if str is longer than n bytes.

    A negative ``n`` never counts as shorter than the string.
    """
    _require_exactly("iflonger", 4, args)
    text, limit, then, otherwise = args
    n = to_int(limit.text)
    if n >= 0 and len(text.text.encode("utf-8")) > n:
        return then
    return otherwise


def select(args: Sequence[Value]) -> Value:
    """``$select(n,a1,...,aN)``: the n-th argument when 1 <= n <= N, else false."""
    _require_at_least_two("select", args)
    n = to_int(args[0].text)
    if 0 < n < len(args):
        return args[n]
    return _FALSE