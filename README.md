# titlefmt

A parser and evaluator for title formatting scripts in the style of
foobar2000. A script combines literal text, `%field%` references to
metadata tags, `[...]` conditional sections and `$function(...)` calls,
and produces one string for each set of tag values.

The package has no runtime dependencies.

## Installation

```
pip install titlefmt
```

## Usage

```python
from titlefmt.program import Program

program = Program()
program.parse("$if2(%artist%,Unknown) - %title%")

print(program.run_with_meta({"artist": ["Happy"], "title": ["Song"]}))
# Happy - Song

print(program.run_with_meta({"title": ["Song"]}))
# Unknown - Song

program.parse("[%artist%]")
print(program.run_with_meta({"artist": ["Happy"]}))
# Happy
print(program.run())
# (empty string)
```

Metadata maps a tag name to a list of values, so a tag can hold several
values. `Program.run()` evaluates the script with no metadata at all.
Calling `Program.parse()` again replaces the previously parsed script.

### Syntax

- `%name%` is replaced by the first value of the tag `name`, or `?` if the
  tag is missing.
- `[ ... ]` yields its contents only if something inside it evaluated to
  true, for example a tag that exists. Otherwise it yields nothing.
- `$func(a,b,...)` calls a built-in function.
- `'...'` quotes special characters; `''` produces a single quote.
- `//` starts a comment that runs to the end of the line.
- Line breaks in the script are dropped from the output; use `$crlf()` to
  produce one.

### Built-in functions

- Arithmetic: `$add`, `$sub`, `$mul`, `$div`, `$min`, `$max`
- Comparison: `$eq`, `$ne`, `$gt`, `$gte`, `$lt`, `$lte`
- Control flow: `$if`, `$if2`, `$if3`, `$ifequal`, `$ifgreater`,
  `$iflonger`, `$select`, `$and`, `$or`, `$xor`, `$not`
- Strings: `$upper`, `$lower`, `$firstalphachar`, `$len`, `$longer`,
  `$stripprefix`, `$swapprefix`, `$cut`, `$left`, `$num`, `$year`,
  `$crlf`, `$tab`, `$noop`
- Metadata and variables: `$meta`, `$meta_sep`, `$meta_num`,
  `$meta_test`, `$get`, `$put`, `$puts`

Numbers are taken from the longest leading integer in a string, so
`c3po` counts as 0 and `4.8` as 4 (see `titlefmt.numeric.to_int`).
`$len` and `$longer` count UTF-8 bytes, while `$cut` and `$left` count
characters. `$year` reads the year from an ISO 8601 date such as
`2000-06-04`, and yields an empty string for anything else.

The functions are plain Python callables in `titlefmt.numeric`,
`titlefmt.control` and `titlefmt.strings`, and the tag and variable
lookups live on `titlefmt.environment.Environment`, which can also be used
directly:

```python
from titlefmt.environment import Environment
from titlefmt.types import Value

env = Environment({"artist": ["He", "She", "It"]})
print(env.meta_sep("artist", ", ", ", and ").text)
# He, She, and It
print(env.call("add", [Value("2", True), Value("2", True)]).text)
# 4
```

### Errors

All errors derive from `titlefmt.types.TitleFormatError`:

- `ParseError`: the script could not be parsed, for example an unclosed
  function call such as `$f(var`.
- `UndefinedFunction`: a `$function` name is not known.
- `InvalidArgumentCount`: a function was called with the wrong number of
  arguments.
- `OutOfRangeError`: a computed value is out of range, for example an
  overflowing `$add` or `$mul`, or `$tab` with more than 256 tabs.

```python
from titlefmt.program import Program
from titlefmt.types import UndefinedFunction

program = Program()
program.parse("$nosuchfunc()")
try:
    program.run()
except UndefinedFunction as exc:
    print(exc)
# Undefined Function: nosuchfunc
```

## Limitations

- Parsing stops quietly at the first part of a script that matches
  nothing; the rest of the script is ignored rather than reported.
- A `[...]` section is only accepted when nothing follows it in the
  enclosing text, so `[%artist%]` works but `[%artist% - ]%title%`
  produces no output.
- The package is a library only: it provides no command-line tool and
  does not read tags from audio files; the metadata must be supplied as a
  mapping.