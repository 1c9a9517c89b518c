from codewriter import Token, TokenType, tokenize


def types(tokens):
    return [t.type for t in tokens]


def test_classifies_basic_command():
    tokens = tokenize("create variable x value 10")
    assert types(tokens) == [
        TokenType.KEYWORD, TokenType.KEYWORD, TokenType.IDENTIFIER,
        TokenType.KEYWORD, TokenType.NUMBER,
    ]
    assert tokens[4] == Token(TokenType.NUMBER, "10")


def test_quoted_span_is_one_string_token():
    tokens = tokenize('print "hello world"')
    assert tokens == [Token(TokenType.KEYWORD, "print"), Token(TokenType.STRING, "hello world")]


def test_single_quotes_and_escapes():
    assert tokenize("print 'single quoted'")[1] == Token(TokenType.STRING, "single quoted")
    assert tokenize(r'print "a \"b\" c" x') == [
        Token(TokenType.KEYWORD, "print"),
        Token(TokenType.STRING, r'a \"b\" c'),
        Token(TokenType.IDENTIFIER, "x"),
    ]


def test_numbers_booleans_and_unknowns():
    tokens = tokenize("set flag true -3.5 42 $x 9lives")
    assert types(tokens) == [
        TokenType.KEYWORD, TokenType.IDENTIFIER, TokenType.BOOLEAN,
        TokenType.NUMBER, TokenType.NUMBER, TokenType.UNKNOWN, TokenType.UNKNOWN,
    ]
    assert tokens[3].value == "-3.5"


def test_keywords_hold_canonical_spelling():
    tokens = tokenize("if x greater than 5 then print x else print y")
    keywords = [t.value for t in tokens if t.type == TokenType.KEYWORD]
    assert keywords == ["if", "greater", "than", "then", "print", "else", "print"]


def test_result_is_an_identifier():
    assert tokenize("add x and y store in result")[-1] == Token(TokenType.IDENTIFIER, "result")


def test_empty_input_yields_no_tokens():
    assert tokenize("") == []
    assert tokenize("   ") == []
    assert tokenize(None) == []


def test_token_source_requotes_strings():
    assert Token(TokenType.STRING, "hi").source() == '"hi"'
    assert Token(TokenType.IDENTIFIER, "hi").source() == "hi"
