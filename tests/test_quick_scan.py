import io
import sys

from imwlang.quick_scan import (
    QuickScanner,
    QuickToken,
    QuickTokenType,
    check_tokens,
    format_scanner_output,
    main,
)

T = QuickTokenType


def kinds(tokens):
    return [tok.type for tok in tokens]


def lexemes(tokens):
    return [tok.lexeme for tok in tokens]


def test_simple_declaration():
    tokens = QuickScanner().scan("int x = 5;")
    assert kinds(tokens) == [T.TYPE, T.IDENTIFIER, T.ASSIGNMENT, T.CONSTANT, T.SEMICOLON]
    assert lexemes(tokens) == ["int", "x", "=", "5", ";"]


def test_invalid_identifier_counts_error():
    scanner = QuickScanner()
    tokens = scanner.scan("9abc 42")
    assert kinds(tokens) == [T.INVALID, T.CONSTANT]
    assert lexemes(tokens) == ["9abc", "42"]
    assert scanner.error_count == 1


def test_scan_resets_between_calls():
    scanner = QuickScanner()
    scanner.scan("1a 2b")
    tokens = scanner.scan("ok")
    assert scanner.error_count == 0
    assert lexemes(tokens) == ["ok"]


def test_terminated_comment():
    tokens = QuickScanner().scan("/@ hello @/ x")
    assert kinds(tokens) == [T.COMMENT_START, T.COMMENT_CONTENT, T.COMMENT_END, T.IDENTIFIER]
    assert tokens[1].lexeme == " hello "


def test_unterminated_comment_scans_rest():
    tokens = QuickScanner().scan("/@ abc")
    assert kinds(tokens) == [T.COMMENT_START, T.IDENTIFIER]
    assert tokens[1].lexeme == "abc"


def test_keyword_prefixes_split_words():
    tokens = QuickScanner().scan("NOReturnMain integer")
    assert kinds(tokens) == [T.VOID, T.IDENTIFIER, T.TYPE, T.IDENTIFIER]
    assert lexemes(tokens) == ["NOReturn", "Main", "int", "eger"]


def test_braces_and_skipped_characters():
    tokens = QuickScanner().scan("f(a + b) { }")
    assert lexemes(tokens) == ["f", "(", "a", "b", ")", "{", "}"]
    assert kinds(tokens).count(T.BRACES) == 4


def test_line_numbers():
    tokens = QuickScanner().scan("a\nb\n\nc")
    assert [tok.line for tok in tokens] == [1, 2, 4]


def test_format_scanner_output_pads_lexeme():
    text = format_scanner_output([QuickToken(T.IDENTIFIER, "x", 1)], 0)
    assert text.startswith("\nScanner Output:\n")
    assert "Token Text: x" + " " * 14 + "Token Type: Identifier" in text
    assert "Total NO of errors" not in text


def test_format_scanner_output_error_total_and_unlabelled():
    scanner = QuickScanner()
    tokens = scanner.scan("7up;")
    text = format_scanner_output(tokens, scanner.error_count)
    assert text.endswith("\nTotal NO of errors: 1\n")
    assert "Token Type: Invalid Identifier" in text
    semicolon_row = next(row for row in text.splitlines() if "Token Text: ;" in row)
    assert "Token Type" not in semicolon_row


def test_check_tokens_reports_rules_and_errors():
    tokens = QuickScanner().scan("/@ c @/ NOReturn f 9x")
    report, errors = check_tokens(tokens)
    assert errors == 1
    assert report.startswith("\nParser Phase Output:\n")
    assert "Matched\t\tRule used: Comment" in report
    assert "Rule used: fun-declaration" in report
    assert 'Not Matched\t\tError: Invalid identifier "9x"' in report
    assert report.endswith("\nTotal NO of errors: 1\n")


def test_check_tokens_without_errors():
    report, errors = check_tokens(QuickScanner().scan("int a;"))
    assert errors == 0
    assert report.endswith("\nTotal NO of errors: 0\n")


def test_main_reads_until_end(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("int a;\nEND\nignored\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Enter your code")
    assert "Scanner Output:" in out
    assert "Parser Phase Output:" in out
    assert "Total NO of errors: 0" in out
    assert "ignored" not in out