"""Lexical analysis of source text into tokens."""

from __future__ import annotations

from types import MappingProxyType

from .tokens import Token, TokenType

KEYWORDS = MappingProxyType(
    {
        "IfTrue": TokenType.CONDITION,
        "Otherwise": TokenType.CONDITION,
        "Imw": TokenType.INTEGER,
        "SIMw": TokenType.SINTEGER,
        "Chj": TokenType.CHARACTER,
        "Series": TokenType.STRING,
        "IMwf": TokenType.FLOAT,
        "SIMwf": TokenType.SFLOAT,
        "NOReturn": TokenType.VOID,
        "RepeatWhen": TokenType.LOOP,
        "Reiterate": TokenType.LOOP,
        "Turnback": TokenType.RETURN,
        "OutLoop": TokenType.BREAK,
        "Loli": TokenType.STRUCT,
        "Include": TokenType.INCLUDE,
    }
)

_SINGLE = {
    "+": TokenType.PLUS,
    "*": TokenType.MULTIPLY,
    "~": TokenType.NOT,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
}

# first char -> (second char, two-char kind, one-char kind or None to drop it)
_PAIRED = {
    "-": (">", TokenType.ACCESS, TokenType.MINUS),
    "=": ("=", TokenType.EQUAL, TokenType.ASSIGNMENT),
    "!": ("=", TokenType.NOT_EQUAL, None),
    "<": ("=", TokenType.LESS_EQUAL, TokenType.LESS),
    ">": ("=", TokenType.GREATER_EQUAL, TokenType.GREATER),
    "&": ("&", TokenType.AND, None),
    "|": ("|", TokenType.OR, None),
}


def _is_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _is_digit(c: str) -> bool:
    return c.isascii() and c.isdigit()


def _is_word(c: str) -> bool:
    return (c.isascii() and c.isalnum()) or c == "_"


class ScanError(Exception):
    """A lexical error, with the line it occurred on."""

    def __init__(self, message: str, line: int) -> None:
        super().__init__(f"Scanner Error at line {line}: {message}")
        self.message = message
        self.line = line


class Scanner:
    """Turns source text into tokens, collecting errors as it goes."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.errors: list[ScanError] = []
        self._start = 0
        self._current = 0
        self._line = 1
        self._tokens: list[Token] = []
        self._done = False

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source; the result always ends with END_OF_FILE."""
        if not self._done:
            while not self._at_end():
                self._start = self._current
                self._scan_token()
            self._tokens.append(Token(TokenType.END_OF_FILE, "", self._line))
            self._done = True
        return list(self._tokens)

    def _at_end(self) -> bool:
        return self._current >= len(self.source)

    def _advance(self) -> str:
        c = self.source[self._current]
        self._current += 1
        return c

    def _peek(self) -> str:
        return "" if self._at_end() else self.source[self._current]

    def _peek_next(self) -> str:
        nxt = self._current + 1
        return self.source[nxt] if nxt < len(self.source) else ""

    def _add(self, token_type: TokenType) -> None:
        lexeme = self.source[self._start:self._current]
        self._tokens.append(Token(token_type, lexeme, self._line))

    def _error(self, message: str) -> None:
        self.errors.append(ScanError(message, self._line))

    def _skip_whitespace(self) -> None:
        while (c := self._peek()) in (" ", "\t", "\r", "\n") and c:
            if c == "\n":
                self._line += 1
            self._advance()

    def _scan_token(self) -> None:
        self._skip_whitespace()
        if self._at_end():
            return
        self._start = self._current
        c = self._advance()

        if c in _SINGLE:
            self._add(_SINGLE[c])
        elif c in _PAIRED:
            second, double, single = _PAIRED[c]
            if self._peek() == second:
                self._advance()
                self._add(double)
            elif single is not None:
                self._add(single)
        elif c == "/":
            self._slash()
        elif _is_alpha(c) or c == "_":
            self._identifier()
        elif _is_digit(c):
            self._number()
        else:
            self._error(f"Unexpected character '{c}'")

    def _slash(self) -> None:
        nxt = self._peek()
        if nxt == "^":
            self._advance()
            self._add(TokenType.SINGLE_COMMENT)
            self._single_line_comment()
        elif nxt == "@":
            self._advance()
            self._add(TokenType.S_MULTI_COMMENT)
            self._multi_line_comment()
        else:
            self._add(TokenType.DIVIDE)

    def _identifier(self) -> None:
        while _is_word(self._peek()):
            self._advance()
        text = self.source[self._start:self._current]
        self._add(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _number(self) -> None:
        while _is_digit(self._peek()):
            self._advance()
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()
            self._add(TokenType.FLOAT_CONSTANT)
        else:
            self._add(TokenType.INTEGER_CONSTANT)

    def _single_line_comment(self) -> None:
        begin = self._current
        while not self._at_end() and self._peek() != "\n":
            self._advance()
        text = self.source[begin:self._current]
        self._tokens.append(Token(TokenType.COMMENT_CONTENT, text, self._line))

    def _multi_line_comment(self) -> None:
        begin = self._current
        while not self._at_end():
            if self._peek() == "@" and self._peek_next() == "/":
                text = self.source[begin:self._current]
                self._tokens.append(
                    Token(TokenType.COMMENT_CONTENT, text, self._line)
                )
                self._advance()
                self._advance()
                # The closing token's text spans the whole comment from "/@".
                self._add(TokenType.E_MULTI_COMMENT)
                return
            if self._peek() == "\n":
                self._line += 1
            self._advance()
        self._error("Unterminated multi-line comment")


def scan(source: str) -> list[Token]:
    """Scan source text, raising the first ScanError if any occurred."""
    scanner = Scanner(source)
    tokens = scanner.scan_tokens()
    if scanner.errors:
        raise scanner.errors[0]
    return tokens