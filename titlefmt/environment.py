"""Evaluation environment: track metadata, variables and built-in functions."""

from __future__ import annotations

from typing import Callable, Dict, List, Mapping, Optional, Sequence

from . import control, numeric, strings
from .numeric import to_int
from .types import InvalidArgumentCount, UndefinedFunction, Value

_UNKNOWN = Value("?", False)

ValueFunction = Callable[[Sequence[Value]], Value]
TextFunction = Callable[[Sequence[str]], str]


def _from_text_function(func: TextFunction) -> ValueFunction:
    """Adapt a function on plain strings; the result is true only if every input is."""

    def call(args: Sequence[Value]) -> Value:
        return Value(func([arg.text for arg in args]), all(arg.cond for arg in args))

    return call


_TEXT_FUNCTIONS: Dict[str, TextFunction] = {
    "add": numeric.add,
    "sub": numeric.sub,
    "mul": numeric.mul,
    "div": numeric.div,
    "min": numeric.min_value,
    "max": numeric.max_value,
}

_VALUE_FUNCTIONS: Dict[str, ValueFunction] = {
    "eq": numeric.eq,
    "ne": numeric.ne,
    "gt": numeric.gt,
    "gte": numeric.gte,
    "lt": numeric.lt,
    "lte": numeric.lte,
    "if": control.if_,
    "if2": control.if2,
    "if3": control.if3,
    "ifequal": control.ifequal,
    "ifgreater": control.ifgreater,
    "iflonger": control.iflonger,
    "select": control.select,
    "and": control.and_,
    "or": control.or_,
    "xor": control.xor,
    "not": control.not_,
    "crlf": strings.crlf,
    "tab": strings.tab,
    "noop": strings.noop,
    "upper": strings.upper,
    "lower": strings.lower,
    "firstalphachar": strings.firstalphachar,
    "len": strings.length,
    "longer": strings.longer,
    "stripprefix": strings.stripprefix,
    "swapprefix": strings.swapprefix,
    "cut": strings.cut,
    "left": strings.left,
    "num": strings.num,
    "year": strings.year,
}


class Environment:
    """Holds track metadata, user variables and the table of callable functions."""

    def __init__(self, metadata: Optional[Mapping[str, Sequence[str]]] = None) -> None:
        self._metadata: Dict[str, List[str]] = {
            key: list(values) for key, values in (metadata or {}).items()
        }
        self._vars: Dict[str, str] = {}
        self._functions: Dict[str, ValueFunction] = {
            name: _from_text_function(func) for name, func in _TEXT_FUNCTIONS.items()
        }
        self._functions.update(_VALUE_FUNCTIONS)
        self._functions.update(
            {
                "meta": self._fn_meta,
                "meta_sep": self._fn_meta_sep,
                "meta_num": self._fn_meta_num,
                "meta_test": self._fn_meta_test,
                "get": self._fn_get,
                "put": self._fn_put,
                "puts": self._fn_puts,
            }
        )

    # --- variables --------------------------------------------------------

    def put(self, key: str, value: str) -> str:
        """Store ``value`` under ``key`` and return it."""
        self._vars[key] = value
        return value

    def puts(self, key: str, value: str) -> None:
        """Store ``value`` under ``key`` without returning it."""
        self._vars[key] = value

    def get(self, key: str) -> Value:
        """Return a stored variable, or a false ``?`` if it is unset."""
        if key in self._vars:
            return Value(self._vars[key], True)
        return _UNKNOWN

    # --- metadata ---------------------------------------------------------

    def get_variable(self, key: str) -> Value:
        """Return the first value of the tag ``key``."""
        return self.meta_index(key, 0)

    def meta_index(self, key: str, index: int) -> Value:
        """Return the ``index``-th value of the tag ``key``, or a false ``?``."""
        values = self._metadata.get(key)
        if values is None or not 0 <= index < len(values):
            return _UNKNOWN
        return Value(values[index], True)

    def meta(self, key: str) -> Value:
        """Return all values of the tag ``key`` joined with ``", "``."""
        return self.meta_sep(key, ", ")

    def meta_sep(self, key: str, sep: str, last_sep: Optional[str] = None) -> Value:
        """Join all values of ``key`` with ``sep``, using ``last_sep`` before the last."""
        values = self._metadata.get(key)
        if values is None:
            return _UNKNOWN
        if last_sep is None:
            last_sep = sep
        if len(values) < 2:
            return Value("".join(values), True)
        return Value(sep.join(values[:-1]) + last_sep + values[-1], True)

    def meta_num(self, key: str) -> int:
        """Return how many values the tag ``key`` has."""
        return len(self._metadata.get(key, ()))

    # --- functions --------------------------------------------------------

    def call(self, name: str, args: Sequence[Value]) -> Value:
        """Call the function ``name`` with evaluated arguments."""
        func = self._functions.get(name)
        if func is None:
            raise UndefinedFunction(name)
        return func(list(args))

    def _fn_put(self, args: Sequence[Value]) -> Value:
        if len(args) != 2:
            raise InvalidArgumentCount("put", len(args))
        return Value(self.put(args[0].text, args[1].text), True)

    def _fn_puts(self, args: Sequence[Value]) -> Value:
        if len(args) != 2:
            raise InvalidArgumentCount("puts", len(args))
        self.puts(args[0].text, args[1].text)
        return Value("", True)

    def _fn_get(self, args: Sequence[Value]) -> Value:
        if len(args) != 1:
            raise InvalidArgumentCount("get", len(args))
        return self.get(args[0].text)

    def _fn_meta(self, args: Sequence[Value]) -> Value:
        if len(args) == 1:
            return self.meta(args[0].text)
        if len(args) == 2:
            return self.meta_index(args[0].text, to_int(args[1].text))
        raise InvalidArgumentCount("meta", len(args))

    def _fn_meta_sep(self, args: Sequence[Value]) -> Value:
        if len(args) == 2:
            return self.meta_sep(args[0].text, args[1].text)
        if len(args) == 3:
            return self.meta_sep(args[0].text, args[1].text, args[2].text)
        raise InvalidArgumentCount("meta_sep", len(args))

    def _fn_meta_test(self, args: Sequence[Value]) -> Value:
        if not args:
            raise InvalidArgumentCount("meta_num", 0)
        return Value("", all(self.meta_num(arg.text) > 0 for arg in args))

    def _fn_meta_num(self, args: Sequence[Value]) -> Value:
        if len(args) != 1:
            raise InvalidArgumentCount("meta_num", len(args))
        return Value(str(self.meta_num(args[0].text)), True)