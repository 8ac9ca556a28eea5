"""A small stand-alone scanner and checker for a reduced token set."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum, auto

from .compiler import read_source


class QuickTokenType(Enum):
    """Kinds of token the quick scanner recognises."""

    COMMENT_START = auto()
    COMMENT_END = auto()
    COMMENT_CONTENT = auto()
    VOID = auto()
    IDENTIFIER = auto()
    TYPE = auto()
    BRACES = auto()
    OPERATOR = auto()
    CONSTANT = auto()
    ASSIGNMENT = auto()
    SEMICOLON = auto()
    INVALID = auto()
    END_OF_FILE = auto()


_LABELS: dict[QuickTokenType, str] = {
    QuickTokenType.COMMENT_START: "Comment Start",
    QuickTokenType.COMMENT_CONTENT: "Comment Content",
    QuickTokenType.COMMENT_END: "Comment End",
    QuickTokenType.VOID: "Void",
    QuickTokenType.IDENTIFIER: "Identifier",
    QuickTokenType.TYPE: "Type",
    QuickTokenType.BRACES: "Braces",
    QuickTokenType.ASSIGNMENT: "Assignment operator",
    QuickTokenType.CONSTANT: "Constant",
    QuickTokenType.INVALID: "Invalid Identifier",
}

_WHITESPACE = " \t\n\v\f\r"
_BRACES = "(){}"


def _is_word(c: str) -> bool:
    return (c.isascii() and c.isalnum()) or c == "_"


@dataclass(frozen=True)
class QuickToken:
    """A lexeme with its kind and starting line."""

    type: QuickTokenType
    lexeme: str
    line: int


class QuickScanner:
    """Scans text into quick tokens, counting invalid identifiers."""

    def __init__(self) -> None:
        self.tokens: list[QuickToken] = []
        self.error_count = 0

    def scan(self, source: str) -> list[QuickToken]:
        """Scan ``source``; state from earlier calls is discarded."""
        self.tokens = []
        self.error_count = 0
        pos = 0
        line = 1
        length = len(source)

        def add(kind: QuickTokenType, lexeme: str) -> None:
            self.tokens.append(QuickToken(kind, lexeme, line))

        while pos < length:
            while pos < length and source[pos] in _WHITESPACE:
                if source[pos] == "\n":
                    line += 1
                pos += 1
            if pos >= length:
                break

            c = source[pos]
            if source.startswith("/@", pos):
                pos += 2
                add(QuickTokenType.COMMENT_START, "/@")
                end = source.find("@/", pos)
                if end != -1:
                    add(QuickTokenType.COMMENT_CONTENT, source[pos:end])
                    add(QuickTokenType.COMMENT_END, "@/")
                    pos = end + 2
            elif source.startswith("NOReturn", pos):
                add(QuickTokenType.VOID, "NOReturn")
                pos += len("NOReturn")
            elif source.startswith("int", pos):
                add(QuickTokenType.TYPE, "int")
                pos += len("int")
            elif c.isascii() and (c.isalpha() or c.isdigit() or c == "_"):
                start = pos
                while pos < length and _is_word(source[pos]):
                    pos += 1
                word = source[start:pos]
                if not c.isdigit():
                    add(QuickTokenType.IDENTIFIER, word)
                elif word.isdigit():
                    add(QuickTokenType.CONSTANT, word)
                else:
                    self.error_count += 1
                    add(QuickTokenType.INVALID, word)
            elif c == "=":
                add(QuickTokenType.ASSIGNMENT, "=")
                pos += 1
            elif c in _BRACES:
                add(QuickTokenType.BRACES, c)
                pos += 1
            elif c == ";":
                add(QuickTokenType.SEMICOLON, ";")
                pos += 1
            else:
                pos += 1
        return list(self.tokens)


def format_scanner_output(tokens: list[QuickToken], error_count: int) -> str:
    """Render the token listing, with an error total when there are errors."""
    rows = []
    for tok in tokens:
        label = _LABELS.get(tok.type)
        suffix = f"Token Type: {label}" if label else ""
        rows.append(f"Line : {tok.line} Token Text: {tok.lexeme:<15}{suffix}\n")
    text = "\nScanner Output:\n" + "".join(rows)
    if error_count > 0:
        text += f"\nTotal NO of errors: {error_count}\n"
    return text


def check_tokens(tokens: list[QuickToken]) -> tuple[str, int]:
    """Report comments, function markers and invalid identifiers.

    Returns the report text and the number of errors found.
    """
    lines = ["\nParser Phase Output:\n"]
    errors = 0
    for tok in tokens:
        if tok.type is QuickTokenType.COMMENT_START:
            lines.append(f"Line : {tok.line} Matched\t\tRule used: Comment\n")
        elif tok.type is QuickTokenType.VOID:
            lines.append(f"Line : {tok.line} Matched\t\tRule used: fun-declaration\n")
        elif tok.type is QuickTokenType.INVALID:
            errors += 1
            lines.append(
                f"Line : {tok.line} Not Matched\t\t"
                f'Error: Invalid identifier "{tok.lexeme}"\n'
            )
    lines.append(f"\nTotal NO of errors: {errors}\n")
    return "".join(lines), errors


def main(argv: list[str] | None = None) -> int:
    """Read code up to an END line, then print the scan and check reports."""
    argparse.ArgumentParser(
        description="Scan and check code typed on standard input."
    ).parse_args(argv)
    sys.stdout.write("Enter your code (Enter 'END' on a new line to finish):\n")
    source = read_source(sys.stdin, "END")
    scanner = QuickScanner()
    tokens = scanner.scan(source)
    sys.stdout.write(format_scanner_output(tokens, scanner.error_count))
    report, _ = check_tokens(tokens)
    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())