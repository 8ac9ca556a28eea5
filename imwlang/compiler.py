"""Driver that scans, parses and reports on a program read from input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

from .parser import ParseError, parse
from .scanner import ScanError, Scanner
from .symbol_table import SymbolTable, SymbolType
from .tokens import Token, TokenType, token_type_name

PROMPT = "Enter your Project#3 code (type 'end' alone to finish input):\n"
TERMINATOR = "end"

_TYPE_MAP: dict[TokenType, SymbolType] = {
    TokenType.INTEGER: SymbolType.INTEGER,
    TokenType.SINTEGER: SymbolType.SINTEGER,
    TokenType.CHARACTER: SymbolType.CHARACTER,
    TokenType.STRING: SymbolType.STRING,
    TokenType.FLOAT: SymbolType.FLOAT,
    TokenType.SFLOAT: SymbolType.SFLOAT,
    TokenType.VOID: SymbolType.VOID,
}


def map_token_type(token_type: TokenType) -> SymbolType:
    """Return the symbol type a type keyword stands for, or UNKNOWN."""
    return _TYPE_MAP.get(token_type, SymbolType.UNKNOWN)


def handle_declarations(tokens: Iterable[Token], symtab: SymbolTable) -> list[str]:
    """Declare every ``type a, b, ...`` list found in the tokens.

    Returns one message per name that was already declared. The token that
    ends a declaration list is consumed along with it.
    """
    messages: list[str] = []
    stream = iter(tokens)
    for token in stream:
        if token.type not in _TYPE_MAP:
            continue
        var_type = map_token_type(token.type)
        while True:
            name = next(stream, None)
            if name is None or name.type is not TokenType.IDENTIFIER:
                break
            if not symtab.declare_variable(name.lexeme, var_type):
                messages.append(
                    f"Error: Variable '{name.lexeme}' already declared "
                    f"(line {name.line})"
                )
            separator = next(stream, None)
            if separator is None or separator.type is not TokenType.COMMA:
                break
    return messages


@dataclass
class CompileResult:
    """Everything produced by one pass over a source text."""

    tokens: list[Token]
    symtab: SymbolTable
    scan_errors: list[ScanError]
    parse_errors: list[ParseError]
    scanner_output: str
    parser_output: str
    diagnostics: str

    @property
    def error_count(self) -> int:
        return len(self.scan_errors) + len(self.parse_errors)

    @property
    def report(self) -> str:
        """The text written to standard output: tokens, matches, symbols."""
        return self.scanner_output + self.parser_output + self.symtab.format_table()


def _format_tokens(tokens: Iterable[Token]) -> str:
    rows = "".join(
        f"Line: {tok.line} Token Text: {tok.lexeme} "
        f"Token Type: {token_type_name(tok.type)}\n"
        for tok in tokens
    )
    return "\n--- Scanner Output ---\n" + rows


def compile_source(source: str) -> CompileResult:
    """Scan and parse a source text, collecting all output."""
    scanner = Scanner(source)
    tokens = scanner.scan_tokens()
    symtab = SymbolTable()
    parser = parse(tokens, symtab)
    diagnostics = "".join(f"{err}\n" for err in scanner.errors) + parser.diagnostics
    return CompileResult(
        tokens=tokens,
        symtab=symtab,
        scan_errors=list(scanner.errors),
        parse_errors=list(parser.errors),
        scanner_output=_format_tokens(tokens),
        parser_output=parser.output,
        diagnostics=diagnostics,
    )


def read_source(lines: Iterable[str], terminator: str = TERMINATOR) -> str:
    """Join lines up to, not including, the one equal to ``terminator``."""
    parts: list[str] = []
    for raw in lines:
        line = raw[:-1] if raw.endswith("\n") else raw
        if line == terminator:
            break
        parts.append(line + "\n")
    return "".join(parts)


def _prompted_lines(stdin: TextIO, stdout: TextIO) -> Iterator[str]:
    while True:
        stdout.write("> ")
        line = stdin.readline()
        if not line:
            return
        yield line


def run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> CompileResult:
    """Read a program interactively, compile it and print the reports."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stdout.write(PROMPT)
    source = read_source(_prompted_lines(stdin, stdout), TERMINATOR)
    result = compile_source(source)
    sys.stderr.write(result.diagnostics)
    stdout.write(result.report)
    stdout.flush()
    return result


def main(argv: list[str] | None = None) -> int:
    """Command entry point."""
    argparse.ArgumentParser(
        description="Scan and parse a program typed on standard input."
    ).parse_args(argv)
    run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())