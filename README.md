# imwlang

A front end for Imw, a small C-like teaching language. It turns source
text into tokens, checks the tokens against the grammar statement by
statement, and keeps a symbol table of the variables declared along
the way.

## The language

Keywords:

| Keyword                   | Token type  |
|---------------------------|-------------|
| `Imw`                     | Integer     |
| `SIMw`                    | SInteger    |
| `IMwf`                    | Float       |
| `SIMwf`                   | SFloat      |
| `Chj`                     | Character   |
| `Series`                  | String      |
| `NOReturn`                | Void        |
| `IfTrue`, `Otherwise`     | Condition   |
| `RepeatWhen`, `Reiterate` | Loop        |
| `Turnback`                | Return      |
| `OutLoop`                 | Break       |
| `Loli`                    | Struct      |
| `Include`                 | Include     |

Comments are written `/^ to the end of the line` or
`/@ across several lines @/`.

Operators are `+ - * /`, the comparisons `== != < > <= >=`, `=` for
assignment, `->` for access, `&&`, `||` and `~`. Brackets are
`( ) { } [ ]`, with `;` and `,` as separators. Numbers are integer
constants (`42`) or float constants (`4.2`).

An example:

```
/^ sum up to ten
Imw total, i;
NOReturn count() {
    i = 0;
    RepeatWhen (i < 10) {
        total = total + i;
        i = i + 1;
    }
}
```

## Command line

```
imwlang
```

prompts for a program on standard input and reads it until a line
holding only `end`. It then prints the scanner output (line, lexeme
and type of each token), the rules the parser matched, and the final
symbol table. Scanner errors, parser errors, warnings about redeclared
or undeclared variables, and the total number of parser errors go to
standard error.

```
imwlang-quick
```

is a lighter checker for a reduced token set (`/@ ... @/` comments,
`NOReturn`, `int`, identifiers, constants, `=`, braces and `;`). It
reads until a line holding only `END`, lists the tokens it recognised,
and reports numbers fused with letters (such as `3abc`) as invalid
identifiers, followed by the total number of errors.

## Library use

```python
from imwlang.scanner import scan
from imwlang.parser import parse
from imwlang.symbol_table import SymbolTable
from imwlang.tokens import token_type_name

tokens = scan("Imw x;\nx = 4 + 2;\n")
for token in tokens:
    print(token.line, token.lexeme, token_type_name(token.type))

symtab = SymbolTable()
parser = parse(tokens, symtab)
print(parser.output)          # matched rules
print(parser.error_count)     # number of syntax errors
print(symtab.exists("x"))
print(symtab.format_table())
```

- `imwlang.tokens` — `TokenType`, `Token` and `token_type_name`.
- `imwlang.scanner` — `Scanner(source).scan_tokens()` collects every
  error in `Scanner.errors`; `scan(source)` raises the first
  `ScanError` instead. The token list always ends with an
  `END_OF_FILE` token.
- `imwlang.parser` — `Parser(tokens, symtab)` with `parse_program()`,
  or `parse(tokens, symtab)`, which returns the finished parser.
  Syntax errors are collected as `ParseError` objects in
  `Parser.errors`; match reports are in `Parser.output` and
  diagnostics in `Parser.diagnostics`.
- `imwlang.symbol_table` — `SymbolTable` with `declare_variable`,
  `declare_function`, `declare_struct`, `exists`, `lookup` and
  `format_table`; each name may be declared only once.
- `imwlang.compiler` — `compile_source(source)` runs the whole
  pipeline on a string and returns a `CompileResult` holding the
  tokens, symbol table, errors and report text. `read_source`,
  `map_token_type` and `handle_declarations` are available as helpers.
- `imwlang.quick_scan` — `QuickScanner`, `format_scanner_output` and
  `check_tokens` behind `imwlang-quick`.

## What it does not do

The package checks programs; it does not build a syntax tree, generate
code or run anything. Programs are read from standard input or passed
as strings; there is no option to compile a file by name. Function
parameter lists are skipped rather than checked, and `Loli` and
`Include` are recognised by the scanner but have no grammar rule.

## Tests

```
pip install -e .[test]
pytest
```