import pytest

from titlefmt.environment import Environment
from titlefmt.types import InvalidArgumentCount, UndefinedFunction, Value


def v(text, cond=True):
    return Value(text, cond)


@pytest.fixture
def env_a():
    return Environment({"a": ["0", "1", "2", "3"], "b": ["4"]})


def test_put_get():
    env = Environment({})
    assert env.put("a", "val") == "val"
    assert env.get("a") == v("val", True)


def test_put_get_value():
    env = Environment({})
    assert env.call("put", [v("a"), v("val")]) == v("val", True)
    assert env.call("get", [v("a")]) == v("val", True)
    assert env.call("puts", [v("b"), v("bar")]) == v("", True)
    assert env.call("get", [v("b")]) == v("bar", True)


def test_puts_get():
    env = Environment({})
    assert env.puts("a", "val") is None
    assert env.get("a") == v("val", True)


def test_get_unknown():
    env = Environment({})
    assert env.get("invalid") == v("?", False)


def test_call():
    env = Environment({})
    assert env.call("add", [v("2"), v("2")]) == v("4", True)


def test_call_text_function_condition_is_all_inputs():
    env = Environment({})
    assert env.call("add", [v("2"), v("2", False)]) == v("4", False)


def test_call_unknown():
    env = Environment({})
    with pytest.raises(UndefinedFunction) as info:
        env.call("unknown", [])
    assert info.value == UndefinedFunction("unknown")


@pytest.mark.parametrize(
    "func, expected_name",
    [
        ("meta", "meta"),
        ("meta_sep", "meta_sep"),
        ("meta_num", "meta_num"),
        ("meta_test", "meta_num"),
        ("put", "put"),
        ("puts", "puts"),
        ("get", "get"),
    ],
)
def test_wrong_n_arguments(func, expected_name):
    env = Environment({})
    with pytest.raises(InvalidArgumentCount) as info:
        env.call(func, [])
    assert info.value == InvalidArgumentCount(expected_name, 0)


def test_meta(env_a):
    assert env_a.call("meta", [v("a")]) == v("0, 1, 2, 3", True)
    assert env_a.call("meta", [v("a"), v("1")]) == v("1", True)
    assert env_a.call("meta", [v("a"), v("1000")]) == v("?", False)


def test_meta_negative_index(env_a):
    assert env_a.call("meta", [v("a"), v("-1")]) == v("?", False)


def test_meta_unknown(env_a):
    assert env_a.meta("missing") == v("?", False)


def test_meta_sep(env_a):
    assert env_a.call("meta_sep", [v("a"), v("|")]) == v("0|1|2|3", True)
    assert env_a.call("meta_sep", [v("a"), v("|"), v("^")]) == v("0|1|2^3", True)


def test_meta_sep_single_value(env_a):
    assert env_a.meta_sep("b", "|", "^") == v("4", True)


def test_meta_num(env_a):
    assert env_a.call("meta_num", [v("a")]) == v("4", True)
    assert env_a.call("meta_num", [v("unknown")]) == v("0", True)
    assert env_a.meta_num("a") == 4


def test_meta_test(env_a):
    assert env_a.call("meta_test", [v("a"), v("b")]) == v("", True)
    assert env_a.call("meta_test", [v("unknown")]) == v("", False)


def test_get_variable(env_a):
    assert env_a.get_variable("a") == v("0", True)
    assert env_a.get_variable("missing") == v("?", False)


def test_metadata_is_copied():
    metadata = {"a": ["x"]}
    env = Environment(metadata)
    metadata["a"].append("y")
    assert env.meta_num("a") == 1


def test_builtin_string_function_via_call():
    env = Environment({})
    assert env.call("upper", [v("abc")]) == v("ABC", True)
    assert env.call("if", [v("", False), v("then"), v("else")]) == v("else", True)