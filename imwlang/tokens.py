"""Token kinds and token records produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Every kind of token the language knows about."""

    # Keywords
    CONDITION = auto()
    INTEGER = auto()
    SINTEGER = auto()
    CHARACTER = auto()
    STRING = auto()
    FLOAT = auto()
    SFLOAT = auto()
    VOID = auto()
    LOOP = auto()
    RETURN = auto()
    BREAK = auto()
    STRUCT = auto()
    INCLUDE = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    DIVIDE = auto()

    EQUAL = auto()
    LESS = auto()
    GREATER = auto()
    NOT_EQUAL = auto()
    LESS_EQUAL = auto()
    GREATER_EQUAL = auto()
    ASSIGNMENT = auto()
    ACCESS = auto()
    ARITHMETIC_OPERATION = auto()

    # Logical operators
    AND = auto()
    OR = auto()
    NOT = auto()
    LOGICAL_OPERATION = auto()

    # Braces and delimiters
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    SEMICOLON = auto()
    COMMA = auto()

    # Literals and identifiers
    IDENTIFIER = auto()
    INTEGER_CONSTANT = auto()
    FLOAT_CONSTANT = auto()

    # Comments
    S_MULTI_COMMENT = auto()
    E_MULTI_COMMENT = auto()
    SINGLE_COMMENT = auto()
    COMMENT_CONTENT = auto()

    # Special
    END_OF_FILE = auto()
    INVALID = auto()


_NAMES: dict[TokenType, str] = {
    TokenType.CONDITION: "Condition",
    TokenType.INTEGER: "Integer",
    TokenType.SINTEGER: "SInteger",
    TokenType.CHARACTER: "Character",
    TokenType.STRING: "String",
    TokenType.FLOAT: "Float",
    TokenType.SFLOAT: "SFloat",
    TokenType.VOID: "Void",
    TokenType.LOOP: "Loop",
    TokenType.RETURN: "Return",
    TokenType.BREAK: "Break",
    TokenType.STRUCT: "Struct",
    TokenType.INCLUDE: "Include",
    TokenType.PLUS: "Plus",
    TokenType.MINUS: "Minus",
    TokenType.MULTIPLY: "Multiply",
    TokenType.DIVIDE: "Divide",
    TokenType.AND: "And",
    TokenType.OR: "Or",
    TokenType.NOT: "Not",
    TokenType.EQUAL: "Equal",
    TokenType.LESS: "Less",
    TokenType.GREATER: "Greater",
    TokenType.NOT_EQUAL: "NotEqual",
    TokenType.LESS_EQUAL: "LessEqual",
    TokenType.GREATER_EQUAL: "GreaterEqual",
    TokenType.ASSIGNMENT: "Assignment",
    TokenType.ACCESS: "Access",
    TokenType.LEFT_BRACE: "LeftBrace",
    TokenType.RIGHT_BRACE: "RightBrace",
    TokenType.LEFT_BRACKET: "LeftBracket",
    TokenType.RIGHT_BRACKET: "RightBracket",
    TokenType.LEFT_PAREN: "LeftParen",
    TokenType.RIGHT_PAREN: "RightParen",
    TokenType.SEMICOLON: "Semicolon",
    TokenType.COMMA: "Comma",
    TokenType.IDENTIFIER: "Identifier",
    TokenType.INTEGER_CONSTANT: "IntConstant",
    TokenType.FLOAT_CONSTANT: "FloatConstant",
    TokenType.S_MULTI_COMMENT: "SMulticomment",
    TokenType.E_MULTI_COMMENT: "EMulticomment",
    TokenType.SINGLE_COMMENT: "Singlecomment",
    TokenType.COMMENT_CONTENT: "CommentContent",
    TokenType.END_OF_FILE: "EndOfFile",
    TokenType.INVALID: "Invalid",
}


def token_type_name(token_type: TokenType) -> str:
    """Return the display name of a token type, or "Unknown"."""
    return _NAMES.get(token_type, "Unknown")


@dataclass(frozen=True)
class Token:
    """A single lexeme with its kind and the line it was found on."""

    type: TokenType
    lexeme: str
    line: int