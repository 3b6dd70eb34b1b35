import pytest

from titlefmt.parser import parse
from titlefmt.types import Conditional, FuncCall, Literal, ParseError, Variable


def test_empty():
    assert parse("") == []


def test_variable():
    assert parse("%ab%") == [Variable("ab")]


def test_empty_funccall():
    assert parse("$ab()") == [FuncCall("ab", [[]])]


def test_funccall_variable():
    assert parse("$ab(%ba%)") == [FuncCall("ab", [[Variable("ba")]])]


def test_funccall_funccall():
    assert parse("$ab($ba())") == [FuncCall("ab", [[FuncCall("ba", [[]])]])]


def test_funccall_complex():
    assert parse("$ab($cd(%e%,fg),hi)") == [
        FuncCall(
            "ab",
            [
                [FuncCall("cd", [[Variable("e")], [Literal("fg")]])],
                [Literal("hi")],
            ],
        )
    ]


def test_literal_variable():
    assert parse("ab") == [Literal("ab")]


def test_literal():
    assert parse("ab -_=+") == [Literal("ab -_=+")]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("'%'", "%"),
        ("'$'", "$"),
        ("'['", "["),
        ("']'", "]"),
        ("''", "'"),
    ],
)
def test_escaped_literals(text, expected):
    assert parse(text) == [Literal(expected)]


@pytest.mark.parametrize("text", ["$f(var)\n", "$f(\nvar)", "$f(\nvar\r\n)"])
def test_function_newlines(text):
    assert parse(text) == [FuncCall("f", [[Literal("var")]])]


def test_function_comment():
    assert parse("$f(var//\n)") == [FuncCall("f", [[Literal("var")]])]


def test_unclosed_function():
    with pytest.raises(ParseError):
        parse("$f(var")


def test_unclosed_conditional():
    with pytest.raises(ParseError):
        parse("[abc")


def test_empty_comment():
    assert parse("//\n") == []


@pytest.mark.parametrize("text", ["// comment\n", "// comment\r\n", "// comment"])
def test_comment(text):
    assert parse(text) == []


def test_comment_inside_literal():
    assert parse("ab// c\ncd") == [Literal("abcd")]


@pytest.mark.parametrize("text", [",", "<", ">", "(", ")", "/"])
def test_possibly_special_literals(text):
    assert parse(text) == [Literal(text)]


def test_combined_special():
    assert parse("a,b,c(d]") == [Literal("a,b,c(d]")]


def test_conditional_special():
    assert parse("[a),(]") == [Conditional([Literal("a),(")])]


def test_function_special():
    assert parse("$a(b(])") == [FuncCall("a", [[Literal("b(]")]])]


def test_conditional_literal():
    assert parse("[a]") == [Conditional([Literal("a")])]


def test_conditional_variable():
    assert parse("[%a%]") == [Conditional([Variable("a")])]


def test_conditional_variable_literal():
    assert parse("[%a%b]") == [Conditional([Variable("a"), Literal("b")])]


def test_conditional_function():
    assert parse("[$a(b)]") == [Conditional([FuncCall("a", [[Literal("b")]])])]


def test_conditional_conditional():
    assert parse("[[%a%]]") == [Conditional([Conditional([Variable("a")])])]


def test_func_conditional():
    assert parse("$a([%b%])") == [FuncCall("a", [[Conditional([Variable("b")])]])]


def test_func_empty_arg():
    assert parse("$a(,)") == [FuncCall("a", [[], []])]


def test_literal_then_variable():
    assert parse("x%a%y") == [Literal("x"), Variable("a"), Literal("y")]


def test_unterminated_variable_stops_parsing():
    assert parse("x%abc") == [Literal("x")]


def test_literal_then_conditional():
    assert parse("x[%a%]") == [Literal("x"), Conditional([Variable("a")])]