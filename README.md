# loxlang

Tools for the Lox scripting language: a scanner that turns source text into
tokens, expression tree classes with a visitor interface, and a printer that
renders expression trees in a parenthesised prefix form.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

Scan a script file and list its tokens:

```
loxlang script.lox
```

The command prints `Running :` followed by the script text, then one line per
token (the token's `repr`), ending with the `EOF` token.

Start an interactive prompt, where each line you enter is scanned and its
tokens are listed the same way:

```
loxlang
```

The prompt stops at end of input. Scanning errors on a prompt line are written
to standard error and the prompt carries on.

Exit statuses:

- `0` – the script scanned cleanly, or the prompt ended.
- `64` – more than one argument was given; a usage message is printed.
- `65` – the script contained scanning errors: an unexpected character, an
  unterminated string or an unterminated block comment.

A script file that cannot be read is not caught by the command; the `OSError`
propagates.

## The language as scanned

- Single-character tokens `( ) { } , . - + ; * /` and the one- or
  two-character operators `! != = == < <= > >=`.
- Numbers such as `12` or `3.25` (a trailing `.` without digits is not part
  of the number); their value is stored as a `float` in `Token.literal`.
- Strings in double quotes, which may span lines; the text between the quotes
  is stored in `Token.literal`.
- Identifiers made of ASCII letters, digits and `_`, not starting with a digit.
- Keywords: `and class else false for fun if nil or print return super this
  true var while`.
- Comments: `// ...` to the end of a line, and `/* ... */` blocks, which may
  be nested.

## Library use

```python
from loxlang.scanner import scan_tokens
from loxlang.errors import ScanError

try:
    tokens = scan_tokens("var answer = 42;")
except ScanError as err:
    for problem in err.errors:
        print(problem)  # e.g. "Unexpected character error encountered on line 1"
else:
    for token in tokens:
        print(token.type, token.lexeme, token.line, token.literal)
```

Scanning collects every error in the input before it reports them, so one
`ScanError` carries all the problems found in `errors`, each a `ScanningError`
with a `kind` (`ScanErrorKind`) and a `line`. `loxlang.errors.format_error`
returns that report as text and `print_error` writes it to standard error or
to a file you pass.

`loxlang.lox.Lox` runs a script the way the command does; `Lox(out=stream)`
sends its output to a stream of your choice. `Lox.error(line, message)` prints
`[line N] Error : message` and sets `had_error`. `run_file(path)` and
`run_prompt(lox, stdin, stdout)` are the functions behind the command.

Expression trees are built from `Binary`, `Grouping`, `Literal` and `Unary`
nodes in `loxlang.expressions`, and `loxlang.printer.print_ast` renders them:

```python
from loxlang.expressions import Binary, Grouping, Literal, Unary
from loxlang.printer import print_ast
from loxlang.tokens import Token, TokenType

expr = Binary(
    Unary(Token(TokenType.MINUS, "-", 1), Literal(123.0)),
    Token(TokenType.STAR, "*", 1),
    Grouping(Literal(45.67)),
)
print(print_ast(expr))  # (* (- 123) (group 45.67))
```

Literal values may be strings, numbers, booleans (`true`/`false`) or `None`
(`nil`). Numbers are printed without an exponent and without a trailing `.0`
(`loxlang.printer.format_number`).

To write your own pass over a tree, subclass `loxlang.expressions.Visitor` and
implement `visit_binary`, `visit_grouping`, `visit_literal` and `visit_unary`.
Then call `expr.accept(visitor)` on the tree.

## What it does not do

There is no parser that builds expression trees from tokens, and nothing
evaluates Lox code: running a script or a prompt line only scans it and lists
its tokens. Expression trees have to be built by hand.