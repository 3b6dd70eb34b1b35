"""Core value, expression and error types for title formatting."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union


@dataclass(frozen=True)
class Value:
    """An evaluated string together with its truth value."""

    text: str
    cond: bool


class TitleFormatError(Exception):
    """Base class for every error raised while parsing or running a format."""


class InvalidArgumentCount(TitleFormatError):
    """A built-in function was called with the wrong number of arguments."""

    def __init__(self, name: str, count: int) -> None:
        self.name = name
        self.count = count
        super().__init__(
            f"Syntax Error: Native function '{name}' called with the wrong "
            f"number of arguments {count}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidArgumentCount):
            return NotImplemented
        return (self.name, self.count) == (other.name, other.count)

    def __hash__(self) -> int:
        return hash((type(self), self.name, self.count))


class UndefinedFunction(TitleFormatError):
    """A function name that the environment does not know."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Undefined Function: {name}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UndefinedFunction):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash((type(self), self.name))


class OutOfRangeError(TitleFormatError):
    """A computed value does not fit in the allowed range."""

    def __init__(self) -> None:
        super().__init__("Computed value out of range")


class ParseError(TitleFormatError):
    """The format string could not be parsed."""

    def __init__(self) -> None:
        super().__init__("Unable the parse the input. Please recheck.")


@dataclass
class Literal:
    """Literal text."""

    text: str


@dataclass
class Variable:
    """A field reference such as ``%artist%``."""

    name: str


@dataclass
class Conditional:
    """A bracketed section such as ``[%artist%]``."""

    body: List["Expr"] = field(default_factory=list)


@dataclass
class FuncCall:
    """A function call such as ``$add(1,2)``; each argument is a list of expressions."""

    name: str
    args: List[List["Expr"]] = field(default_factory=list)


@dataclass
class ResolvedValue:
    """An expression that has already been evaluated."""

    value: Value


Expr = Union[Literal, Variable, Conditional, FuncCall, ResolvedValue]