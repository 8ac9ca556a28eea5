"""Recursive-descent parser that checks statements and fills a symbol table."""

from __future__ import annotations

import io
from collections.abc import Iterable

from .symbol_table import SymbolTable, SymbolType
from .tokens import Token, TokenType

_DECLARABLE: dict[TokenType, SymbolType] = {
    TokenType.INTEGER: SymbolType.INTEGER,
    TokenType.SINTEGER: SymbolType.SINTEGER,
    TokenType.CHARACTER: SymbolType.CHARACTER,
    TokenType.STRING: SymbolType.STRING,
    TokenType.FLOAT: SymbolType.FLOAT,
    TokenType.SFLOAT: SymbolType.SFLOAT,
}

_RETURNABLE: dict[TokenType, SymbolType] = {
    **_DECLARABLE,
    TokenType.VOID: SymbolType.VOID,
}

_COMMENT_TOKENS = frozenset(
    {
        TokenType.SINGLE_COMMENT,
        TokenType.S_MULTI_COMMENT,
        TokenType.COMMENT_CONTENT,
        TokenType.E_MULTI_COMMENT,
    }
)

_STATEMENT_START = frozenset(
    {
        *_RETURNABLE,
        TokenType.CONDITION,
        TokenType.LOOP,
        TokenType.RETURN,
        TokenType.BREAK,
        TokenType.LEFT_BRACE,
    }
)

_RELATIONAL = frozenset(
    {
        TokenType.LESS,
        TokenType.GREATER,
        TokenType.EQUAL,
        TokenType.NOT_EQUAL,
        TokenType.LESS_EQUAL,
        TokenType.GREATER_EQUAL,
    }
)

_ADDITIVE = frozenset({TokenType.PLUS, TokenType.MINUS})
_MULTIPLICATIVE = frozenset({TokenType.MULTIPLY, TokenType.DIVIDE})


class ParseError(Exception):
    """A syntax error, with the line of the token where it was noticed."""

    def __init__(self, message: str, line: int) -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        return f"Parser Error at line   Line:: {self.line}: {self.message}"


class Parser:
    """Checks a token stream statement by statement.

    Match reports go to ``output``; syntax errors, semantic warnings and the
    final error total go to ``diagnostics``. Syntax errors are also kept in
    ``errors``.
    """

    def __init__(
        self, tokens: Iterable[Token], symtab: SymbolTable | None = None
    ) -> None:
        self.tokens: list[Token] = list(tokens)
        self.symtab = symtab if symtab is not None else SymbolTable()
        self.errors: list[ParseError] = []
        self._current = 0
        self._out = io.StringIO()
        self._err = io.StringIO()

    @property
    def output(self) -> str:
        return self._out.getvalue()

    @property
    def diagnostics(self) -> str:
        return self._err.getvalue()

    @property
    def error_count(self) -> int:
        return len(self.errors)

    # -- token cursor -----------------------------------------------------

    def _at_end(self) -> bool:
        return (
            self._current >= len(self.tokens)
            or self.tokens[self._current].type is TokenType.END_OF_FILE
        )

    def _peek(self) -> Token:
        if self._current < len(self.tokens):
            return self.tokens[self._current]
        line = self.tokens[-1].line if self.tokens else 0
        return Token(TokenType.END_OF_FILE, "", line)

    def _previous(self) -> Token:
        return self.tokens[self._current - 1]

    def _advance(self) -> Token:
        if not self._at_end():
            self._current += 1
        return self._previous() if self._current > 0 else self._peek()

    def _match(self, token_type: TokenType) -> bool:
        if not self._at_end() and self._peek().type is token_type:
            self._advance()
            return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        return self._peek().type is token_type

    def _starts_function(self) -> bool:
        i = self._current
        return (
            i + 2 < len(self.tokens)
            and self.tokens[i + 1].type is TokenType.IDENTIFIER
            and self.tokens[i + 2].type is TokenType.LEFT_PAREN
        )

    # -- reporting --------------------------------------------------------

    def _emit(self, text: str) -> None:
        self._out.write(text)

    def _warn(self, text: str) -> None:
        self._err.write(text)

    def _error(self, message: str) -> None:
        err = ParseError(message, self._peek().line)
        self.errors.append(err)
        self._warn(f"{err}\n")

    def _last_line(self) -> int:
        return self._peek().line - 1

    def _synchronize(self) -> None:
        self._advance()
        while not self._at_end():
            kind = self._peek().type
            if kind is TokenType.SEMICOLON:
                self._advance()
                return
            if kind in _STATEMENT_START:
                return
            self._advance()

    # -- grammar ----------------------------------------------------------

    def parse_program(self) -> int:
        """Parse every token; return the number of syntax errors found."""
        self._emit("\n--- Parser Output ---\n")
        limit = len(self.tokens) * 2
        iterations = 0

        while not self._at_end():
            exhausted = iterations >= limit
            iterations += 1
            if exhausted:
                break

            if self._peek().type in _COMMENT_TOKENS:
                self._handle_comment()
                continue

            try:
                if self._peek().type in _DECLARABLE:
                    if self._starts_function():
                        self._function_definition()
                    else:
                        self._declaration()
                else:
                    self._statement()
            except ParseError as exc:
                self._error(f"Parsing error: {exc.message}")
                self._synchronize()

        if iterations >= limit:
            self._error("Parser stuck in infinite loop - aborting")

        self._warn(f"\nTotal parser errors: {self.error_count}\n")
        return self.error_count

    def _declare(self, token: Token, var_type: SymbolType) -> None:
        if not self.symtab.declare_variable(token.lexeme, var_type):
            self._warn(
                f"Error: Variable '{token.lexeme}' already declared "
                f"(line {token.line})\n"
            )

    def _declaration(self) -> None:
        type_token = self._advance()
        var_type = _DECLARABLE.get(type_token.type)
        if var_type is None:
            self._error("Invalid type")
            return
        if not self._match(TokenType.IDENTIFIER):
            self._error("Expected variable name")
            return
        self._declare(self._previous(), var_type)

        while self._check(TokenType.COMMA):
            self._advance()
            if not self._match(TokenType.IDENTIFIER):
                self._error("Expected variable name")
                return
            self._declare(self._previous(), var_type)

        if not self._match(TokenType.SEMICOLON):
            self._error("Expected ';'")
            return
        self._emit(f"Matched: var-declaration    Line::  {self._last_line()}\n")

    def _function_definition(self) -> None:
        return_token = self._advance()
        if return_token.type not in _RETURNABLE:
            self._error("Invalid return type")
            return
        if not self._match(TokenType.IDENTIFIER):
            self._error("Expected function name")
            return
        name = self._previous().lexeme

        if not self._match(TokenType.LEFT_PAREN):
            self._error("Expected '(' after function name")
            return
        # Parameters are skipped, not checked.
        while not self._match(TokenType.RIGHT_PAREN):
            if self._at_end():
                self._error("Expected ')' after parameters")
                return
            self._advance()

        if not self._match(TokenType.LEFT_BRACE):
            self._error("Expected '{' at start of function body")
            return

        while not self._match(TokenType.RIGHT_BRACE):
            self._statement()
            if self._at_end():
                self._error("Unterminated function body")
                return

        self._emit(
            f" Matched:  fun-declaration   ({name}) Line::  {self._last_line()}\n"
        )

    def _statement(self) -> None:
        kind = self._peek().type
        if kind in _COMMENT_TOKENS:
            self._handle_comment()
        elif kind is TokenType.IDENTIFIER:
            self._assignment()
        elif kind is TokenType.CONDITION:
            self._selection_statement()
        elif kind is TokenType.LOOP:
            self._iteration_statement()
        elif kind in (TokenType.RETURN, TokenType.BREAK):
            self._jump_statement()
        elif kind is TokenType.LEFT_BRACE:
            self._block()
        elif kind is TokenType.VOID:
            self._function_definition()
        elif kind is TokenType.SEMICOLON:
            self._match(TokenType.SEMICOLON)
            self._emit(" Matched: Empty Statement\n")
        elif kind in _DECLARABLE:
            if self._starts_function():
                self._function_definition()
            else:
                self._declaration()
        else:
            self._expression_statement()

    def _expression_statement(self) -> None:
        self._expression()
        if not self._match(TokenType.SEMICOLON):
            self._error("Expected ';'")
            return
        self._emit(" Matched: Expression Statement\n")

    def _selection_statement(self) -> None:
        self._advance()
        if not self._match(TokenType.LEFT_PAREN):
            self._error("Expected '('")
            return
        self._expression()
        if not self._match(TokenType.RIGHT_PAREN):
            self._error("Expected ')'")
            return

        self._statement()

        if self._check(TokenType.CONDITION):
            self._advance()
            self._statement()

        self._emit(f" Matched: If/Else Statement    Line::  {self._last_line()}")

    def _iteration_statement(self) -> None:
        loop_token = self._advance()
        if not self._match(TokenType.LEFT_PAREN):
            self._error("Expected '(' after loop condition")
            return
        self._expression()
        if not self._match(TokenType.RIGHT_PAREN):
            self._error("Expected ')' after loop condition")
            return

        self._statement()

        self._emit(
            f" Matched: Itration-Statement ({loop_token.lexeme})  "
            f"{self._last_line()}\n"
        )

    def _jump_statement(self) -> None:
        jump = self._advance()
        if jump.type is TokenType.RETURN:
            self._expression()
        elif jump.type is not TokenType.BREAK:
            return
        if not self._match(TokenType.SEMICOLON):
            self._error("Expected ';'")
            return
        self._emit(" Matched: Jump-Statement\n")

    def _assignment(self) -> None:
        if not self._match(TokenType.IDENTIFIER):
            self._error("Expected identifier")
            return
        target = self._previous()
        if not self.symtab.exists(target.lexeme):
            self._warn(
                f" Error: Variable '{target.lexeme}' not declared before use "
                f"(line {target.line})\n"
            )

        if not self._match(TokenType.ASSIGNMENT):
            self._error("Expected '='")
            return

        self._expression()

        if not self._match(TokenType.SEMICOLON):
            self._error("Expected ';'")
            return
        self._emit(f" Matched: Assignment   Line::  {self._last_line()}\n")

    def _expression(self) -> None:
        self._logical_or()

    def _logical_or(self) -> None:
        self._logical_and()
        while self._match(TokenType.OR):
            self._logical_and()
            self._emit(
                f" Matched: Logical OR expressionLine::  {self._last_line()}\n"
            )

    def _logical_and(self) -> None:
        self._simple_expression()
        while self._match(TokenType.AND):
            self._simple_expression()
            self._emit(
                f" Matched: Logical And expressionLine::  {self._last_line()}\n"
            )

    def _simple_expression(self) -> None:
        self._additive()
        if self._peek().type in _RELATIONAL:
            self._advance()
            self._additive()

    def _additive(self) -> None:
        self._term()
        while self._peek().type in _ADDITIVE:
            self._advance()
            self._term()

    def _term(self) -> None:
        self._factor()
        while self._peek().type in _MULTIPLICATIVE:
            self._advance()
            self._factor()

    def _factor(self) -> None:
        if self._match(TokenType.LEFT_PAREN):
            self._expression()
            if not self._match(TokenType.RIGHT_PAREN):
                self._error("Expected ')'")
                raise ParseError("Unmatched parenthesis", self._peek().line)
        elif self._match(TokenType.IDENTIFIER):
            name = self._previous()
            if not self.symtab.exists(name.lexeme):
                self._warn(
                    f" Error: Undefined variable '{name.lexeme}' "
                    f"(line {name.line})\n"
                )
        elif self._match(TokenType.INTEGER_CONSTANT) or self._match(
            TokenType.FLOAT_CONSTANT
        ):
            pass
        else:
            self._error("Expected expression factor")
            raise ParseError("Invalid factor", self._peek().line)

    def _handle_comment(self) -> None:
        if self._match(TokenType.SINGLE_COMMENT):
            if self._match(TokenType.COMMENT_CONTENT):
                self._emit(
                    f" Matched: Single-line comment: {self._previous().lexeme}\n"
                )
        elif self._match(TokenType.S_MULTI_COMMENT):
            while not self._at_end() and not self._check(TokenType.E_MULTI_COMMENT):
                if self._match(TokenType.COMMENT_CONTENT):
                    self._emit(
                        " Matched: Multi-line comment part: "
                        f"{self._previous().lexeme}\n"
                    )
                else:
                    self._advance()
            if self._match(TokenType.E_MULTI_COMMENT):
                self._emit(" Matched: Multi-line comment end\n")
        else:
            self._advance()

    def _block(self) -> None:
        if not self._match(TokenType.LEFT_BRACE):
            self._error("Expected '{'")
            return
        while not self._check(TokenType.RIGHT_BRACE) and not self._at_end():
            self._statement()
        if not self._match(TokenType.RIGHT_BRACE):
            self._error("Expected '}'")
            return
        self._emit(f" Matched: Block    {self._last_line()}\n")


def parse(tokens: Iterable[Token], symtab: SymbolTable | None = None) -> Parser:
    """Parse a token stream into ``symtab`` and return the finished parser."""
    parser = Parser(tokens, symtab)
    parser.parse_program()
    return parser