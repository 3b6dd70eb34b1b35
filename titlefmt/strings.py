"""String title-format functions: case, constants, dates, formatting and sizes."""

from __future__ import annotations

import re
from typing import Optional, Sequence, Tuple

from .numeric import to_int
from .types import InvalidArgumentCount, OutOfRangeError, Value

_DEFAULT_PREFIXES = ("A ", "The ")
_MAX_TABS = 256
_I32_MAX = 2**31 - 1
_MAX_YEAR = 9999


def _require_exactly(name: str, count: int, args: Sequence[Value]) -> None:
    if len(args) != count:
        raise InvalidArgumentCount(name, len(args))


def _require_some(name: str, args: Sequence[Value]) -> None:
    if not args:
        raise InvalidArgumentCount(name, 0)


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


# --- case -----------------------------------------------------------------


def upper(args: Sequence[Value]) -> Value:
    """``$upper(text)``: the text in upper case."""
    _require_exactly("upper", 1, args)
    return Value(args[0].text.upper(), args[0].cond)


def lower(args: Sequence[Value]) -> Value:
    """``$lower(text)``: the text in lower case."""
    _require_exactly("lower", 1, args)
    return Value(args[0].text.lower(), args[0].cond)


def firstalphachar(args: Sequence[Value]) -> Value:
    """``$firstalphachar(text[,nonalpha])``: the first character if alphabetic.

    Otherwise ``nonalpha`` is returned, which defaults to ``#``.
    """
    if len(args) == 1:
        missing = "#"
    elif len(args) == 2:
        missing = args[1].text
    else:
        raise InvalidArgumentCount("lower", len(args))
    text = args[0].text
    first = text[:1]
    result = first if first and first.isalpha() else missing
    return Value(result, args[0].cond)


# --- constants ------------------------------------------------------------


def crlf(args: Sequence[Value]) -> Value:
    """``$crlf()``: a carriage return and line feed."""
    _require_exactly("crlf", 0, args)
    return Value("\r\n", True)


def tab(args: Sequence[Value]) -> Value:
    """``$tab()`` or ``$tab(n)``: one tab, or ``n`` tabs (at most 256)."""
    if not args:
        return Value("\t", True)
    if len(args) == 1:
        count = to_int(args[0].text)
        if count > _MAX_TABS:
            raise OutOfRangeError()
        return Value("\t" * max(count, 0), True)
    raise InvalidArgumentCount("tab", len(args))


def noop(args: Sequence[Value]) -> Value:
    """``$noop(...)``: an empty true value, whatever the arguments."""
    return Value("", True)


# --- dates ----------------------------------------------------------------

_TIME = (
    r"(?:T[0-9]{2}(?::?[0-9]{2}(?::?[0-9]{2}(?:[.,][0-9]+)?)?)?"
    r"(?:Z|[+-][0-9]{2}(?::?[0-9]{2})?)?)?"
)

_DATES = (
    r"(?P<y>[0-9]{4})-(?P<m>[0-9]{2})-(?P<d>[0-9]{2})",
    r"(?P<y>[0-9]{4})(?P<m>[0-9]{2})(?P<d>[0-9]{2})",
    r"(?P<y>[0-9]{4})-W(?P<w>[0-9]{2})-(?P<wd>[0-9])",
    r"(?P<y>[0-9]{4})W(?P<w>[0-9]{2})(?P<wd>[0-9])",
    r"(?P<y>[0-9]{4})-W(?P<w>[0-9]{2})",
    r"(?P<y>[0-9]{4})W(?P<w>[0-9]{2})",
    r"(?P<y>[0-9]{4})-(?P<o>[0-9]{3})",
    r"(?P<y>[0-9]{4})(?P<o>[0-9]{3})",
    r"(?P<y>[0-9]{4})-(?P<m>[0-9]{2})",
    r"(?P<y>[0-9]{4})",
)

_DATE_PATTERNS = tuple(re.compile(date + _TIME, re.ASCII) for date in _DATES)

_FIELD_RANGES = {
    "m": (1, 12),
    "d": (1, 31),
    "w": (1, 53),
    "wd": (1, 7),
    "o": (1, 366),
}


def _fields_valid(fields: dict) -> bool:
    for key, (low, high) in _FIELD_RANGES.items():
        raw = fields.get(key)
        if raw is not None and not low <= int(raw) <= high:
            return False
    return True


def _iso_year(text: str) -> Optional[int]:
    for pattern in _DATE_PATTERNS:
        match = pattern.fullmatch(text)
        if match and _fields_valid(match.groupdict()):
            return int(match.group("y"))
    return None


def _leading_digits(text: str) -> str:
    end = 0
    for ch in text:
        if not ("0" <= ch <= "9"):
            break
        end += 1
    return text[:end]


def year(args: Sequence[Value]) -> Value:
    """``$year(date)``: the year of an ISO 8601 date, or empty if unparsable."""
    _require_exactly("year", 1, args)
    value = args[0]
    empty = Value("", value.cond)

    prefix = _leading_digits(value.text)
    if not prefix:
        return empty
    number = int(prefix)
    if number > _I32_MAX or number > _MAX_YEAR:
        return empty

    parsed = _iso_year(value.text)
    if parsed is None:
        return empty
    return Value(str(parsed), value.cond)


# --- formatting -----------------------------------------------------------


def num(args: Sequence[Value]) -> Value:
    """``$num(n,len)``: ``n`` as an integer, zero padded to ``len`` characters."""
    _require_exactly("num", 2, args)
    value = to_int(args[0].text)
    width = to_int(args[1].text)
    if width < 1 or (value < 0 and width < 2):
        return Value(str(value), True)
    sign = "-" if value < 0 else ""
    digits = str(abs(value))
    padding = "0" * max(width - len(sign) - len(digits), 0)
    return Value(sign + padding + digits, True)


# --- modification ---------------------------------------------------------


def _split_first(text: str, prefixes: Sequence[str]) -> Optional[Tuple[str, str]]:
    for prefix in prefixes:
        if text.startswith(prefix):
            return prefix, text[len(prefix):]
    return None


def _prefix_args(args: Sequence[Value]) -> list:
    return [arg.text for arg in args[1:]]


def stripprefix(args: Sequence[Value]) -> Value:
    """``$stripprefix(text[,prefix,...])``: remove the first matching prefix.

    With no prefixes given, ``A `` and ``The `` are removed.
    """
    _require_some("stripprefix", args)
    text = args[0].text
    if len(args) == 1:
        split = _split_first(text, _DEFAULT_PREFIXES)
        if split is not None:
            text = split[1]
    split = _split_first(text, _prefix_args(args))
    if split is not None:
        text = split[1]
    return Value(text, args[0].cond)


def swapprefix(args: Sequence[Value]) -> Value:
    """``$swapprefix(text[,prefix,...])``: move the first matching prefix to the end.

    With no prefixes given, ``A `` and ``The `` are moved.
    """
    _require_some("swapprefix", args)
    text = args[0].text
    if len(args) == 1:
        split = _split_first(text, _DEFAULT_PREFIXES)
        if split is not None:
            prefix, rest = split
            text = f"{rest}, {prefix.rstrip()}"
    split = _split_first(text, _prefix_args(args))
    if split is not None:
        prefix, rest = split
        text = f"{rest}, {prefix.rstrip()}"
    return Value(text, args[0].cond)


def _take_chars(args: Sequence[Value]) -> Value:
    count = max(to_int(args[1].text), 0)
    return Value(args[0].text[:count], args[0].cond)


def cut(args: Sequence[Value]) -> Value:
    """``$cut(text,n)``: the first ``n`` characters of text."""
    _require_exactly("cut", 2, args)
    return _take_chars(args)


def left(args: Sequence[Value]) -> Value:
    """``$left(text,n)``: the same as ``$cut``."""
    _require_exactly("left", 2, args)
    return _take_chars(args)


# --- size -----------------------------------------------------------------


def length(args: Sequence[Value]) -> Value:
    """``$len(text)``: the length of text in UTF-8 bytes."""
    _require_exactly("len", 1, args)
    return Value(str(_byte_len(args[0].text)), args[0].cond)


def longer(args: Sequence[Value]) -> Value:
    """``$longer(a,b)``: true if ``a`` is longer than ``b``."""
    _require_exactly("longer", 2, args)
    return Value("", _byte_len(args[0].text) > _byte_len(args[1].text))