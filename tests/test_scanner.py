import pytest

from imwlang.scanner import KEYWORDS, ScanError, Scanner, scan
from imwlang.tokens import TokenType


def kinds(tokens):
    return [t.type for t in tokens]


@pytest.mark.parametrize(
    ("word", "token_type"),
    [
        ("IfTrue", TokenType.CONDITION),
        ("Otherwise", TokenType.CONDITION),
        ("Imw", TokenType.INTEGER),
        ("SIMw", TokenType.SINTEGER),
        ("Chj", TokenType.CHARACTER),
        ("Series", TokenType.STRING),
        ("IMwf", TokenType.FLOAT),
        ("SIMwf", TokenType.SFLOAT),
        ("NOReturn", TokenType.VOID),
        ("RepeatWhen", TokenType.LOOP),
        ("Reiterate", TokenType.LOOP),
        ("Turnback", TokenType.RETURN),
        ("OutLoop", TokenType.BREAK),
        ("Loli", TokenType.STRUCT),
        ("Include", TokenType.INCLUDE),
    ],
)
def test_keywords(word, token_type):
    tokens = scan(word)
    assert kinds(tokens) == [token_type, TokenType.END_OF_FILE]
    assert tokens[0].lexeme == word
    assert KEYWORDS[word] is token_type


def test_identifiers_are_not_keyword_prefixes():
    tokens = scan("Imwx _tmp a1_b")
    assert kinds(tokens)[:-1] == [TokenType.IDENTIFIER] * 3
    assert [t.lexeme for t in tokens[:-1]] == ["Imwx", "_tmp", "a1_b"]


def test_operators_and_delimiters():
    source = "+ - -> * / == = != < <= > >= && || ~ { } [ ] ( ) ; ,"
    tokens = scan(source)
    assert [t.lexeme for t in tokens[:-1]] == source.split()
    assert kinds(tokens)[:-1] == [
        TokenType.PLUS,
        TokenType.MINUS,
        TokenType.ACCESS,
        TokenType.MULTIPLY,
        TokenType.DIVIDE,
        TokenType.EQUAL,
        TokenType.ASSIGNMENT,
        TokenType.NOT_EQUAL,
        TokenType.LESS,
        TokenType.LESS_EQUAL,
        TokenType.GREATER,
        TokenType.GREATER_EQUAL,
        TokenType.AND,
        TokenType.OR,
        TokenType.NOT,
        TokenType.LEFT_BRACE,
        TokenType.RIGHT_BRACE,
        TokenType.LEFT_BRACKET,
        TokenType.RIGHT_BRACKET,
        TokenType.LEFT_PAREN,
        TokenType.RIGHT_PAREN,
        TokenType.SEMICOLON,
        TokenType.COMMA,
    ]


def test_lone_bang_amp_pipe_are_dropped_silently():
    scanner = Scanner("a ! & | b")
    tokens = scanner.scan_tokens()
    assert [t.lexeme for t in tokens[:-1]] == ["a", "b"]
    assert scanner.error_count == 0


def test_numbers():
    tokens = scan("42 3.14")
    assert kinds(tokens)[:-1] == [TokenType.INTEGER_CONSTANT, TokenType.FLOAT_CONSTANT]
    assert [t.lexeme for t in tokens[:-1]] == ["42", "3.14"]


def test_trailing_dot_is_not_part_of_number():
    scanner = Scanner("12.")
    tokens = scanner.scan_tokens()
    assert tokens[0].type is TokenType.INTEGER_CONSTANT
    assert tokens[0].lexeme == "12"
    assert scanner.errors[0].message == "Unexpected character '.'"


def test_single_line_comment():
    tokens = scan("/^ hello\nx")
    assert kinds(tokens) == [
        TokenType.SINGLE_COMMENT,
        TokenType.COMMENT_CONTENT,
        TokenType.IDENTIFIER,
        TokenType.END_OF_FILE,
    ]
    assert tokens[0].lexeme == "/^"
    assert tokens[1].lexeme == " hello"
    assert tokens[2].line == tokens[1].line + 1


def test_multi_line_comment():
    source = "/@ a\nb @/ y"
    tokens = scan(source)
    assert kinds(tokens) == [
        TokenType.S_MULTI_COMMENT,
        TokenType.COMMENT_CONTENT,
        TokenType.E_MULTI_COMMENT,
        TokenType.IDENTIFIER,
        TokenType.END_OF_FILE,
    ]
    assert tokens[0].lexeme == "/@"
    assert tokens[1].lexeme == " a\nb "
    assert tokens[2].lexeme == "/@ a\nb @/"
    assert tokens[3].line == tokens[1].line == tokens[0].line + 1


def test_unterminated_multi_line_comment():
    scanner = Scanner("/@ never closed")
    tokens = scanner.scan_tokens()
    assert kinds(tokens) == [TokenType.S_MULTI_COMMENT, TokenType.END_OF_FILE]
    assert [e.message for e in scanner.errors] == ["Unterminated multi-line comment"]


def test_unexpected_character_is_reported_and_skipped():
    scanner = Scanner("a\n#b")
    tokens = scanner.scan_tokens()
    assert [t.lexeme for t in tokens[:-1]] == ["a", "b"]
    assert scanner.error_count == 1
    error = scanner.errors[0]
    assert error.message == "Unexpected character '#'"
    assert error.line == tokens[1].line
    assert str(error) == f"Scanner Error at line {error.line}: Unexpected character '#'"


def test_non_ascii_letter_is_unexpected():
    scanner = Scanner("é")
    scanner.scan_tokens()
    assert scanner.errors[0].message == "Unexpected character 'é'"


def test_end_of_file_token_is_last():
    source = "a\nb\n"
    tokens = scan(source)
    eof = tokens[-1]
    assert eof.type is TokenType.END_OF_FILE
    assert eof.lexeme == ""
    assert eof.line == source.count("\n") + 1


def test_empty_source():
    tokens = scan("")
    assert kinds(tokens) == [TokenType.END_OF_FILE]


def test_scan_tokens_is_repeatable():
    scanner = Scanner("Imw x;")
    first = scanner.scan_tokens()
    expected = [
        TokenType.INTEGER,
        TokenType.IDENTIFIER,
        TokenType.SEMICOLON,
        TokenType.END_OF_FILE,
    ]
    assert kinds(first) == expected
    second = scanner.scan_tokens()
    assert kinds(second) == expected
    assert [t.lexeme for t in second] == ["Imw", "x", ";", ""]


def test_scan_raises_on_error():
    with pytest.raises(ScanError) as info:
        scan("x = $;")
    assert info.value.message == "Unexpected character '$'"
    assert str(info.value).startswith("Scanner Error at line")


def test_small_program():
    tokens = scan("Imw x;\nx = 5 + y2;")
    assert kinds(tokens) == [
        TokenType.INTEGER,
        TokenType.IDENTIFIER,
        TokenType.SEMICOLON,
        TokenType.IDENTIFIER,
        TokenType.ASSIGNMENT,
        TokenType.INTEGER_CONSTANT,
        TokenType.PLUS,
        TokenType.IDENTIFIER,
        TokenType.SEMICOLON,
        TokenType.END_OF_FILE,
    ]
    assert tokens[3].line == tokens[0].line + 1