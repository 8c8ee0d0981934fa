import pytest

from compkit.lexer import Token, TokenKind, analyze, is_keyword, main, tokenize


@pytest.mark.parametrize("word", ["int", "return", "float", "void", "while"])
def test_keywords_are_recognised(word):
    assert is_keyword(word) is True


@pytest.mark.parametrize("word", ["main", "printf", "Int", ""])
def test_non_keywords(word):
    assert is_keyword(word) is False


def test_tokenize_declaration():
    assert list(tokenize("int a = 10;")) == [
        Token(TokenKind.KEYWORD, "int"),
        Token(TokenKind.IDENTIFIER, "a"),
        Token(TokenKind.SYMBOL, "="),
        Token(TokenKind.NUMBER, "10"),
        Token(TokenKind.SYMBOL, ";"),
    ]


def test_decimal_number_is_one_token():
    tokens = list(tokenize("float b = 20.5;"))
    assert Token(TokenKind.NUMBER, "20.5") in tokens
    assert tokens[0] == Token(TokenKind.KEYWORD, "float")


def test_number_accepts_repeated_points():
    assert list(tokenize("1.2.3")) == [Token(TokenKind.NUMBER, "1.2.3")]


def test_whitespace_after_first_character_is_dropped():
    assert list(tokenize("a b")) == [Token(TokenKind.IDENTIFIER, "ab")]


def test_line_comment_is_skipped():
    texts = [t.text for t in tokenize("x; // note here\ny")]
    assert texts == ["x", ";", "y"]


def test_block_comment_is_skipped():
    texts = [t.text for t in tokenize("x; /* hidden words */ y")]
    assert texts == ["x", ";", "y"]


def test_non_ascii_is_ignored():
    assert list(tokenize("\u00e9")) == []


def test_analyze_report_matches_tokens():
    text = "if (a < b) { a = a + 1; }"
    tokens = list(tokenize(text))
    report = analyze(text)
    lines = report.splitlines()
    assert lines[: len(tokens)] == [str(t) for t in tokens]
    assert report.endswith(f"\nTotal number of tokens: {len(tokens)}\n")


def test_analyze_first_line():
    assert analyze("return 0;").splitlines()[0] == "Keyword: return"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.c")]) == 1
    assert capsys.readouterr().out.strip() == "Error: Could not open file."


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "source_code.c"
    path.write_text("int a = 10;\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Lexical Analysis Output:\nKeyword: int\n")
    assert out == "Lexical Analysis Output:\n" + analyze("int a = 10;\n")