import pytest

from server import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def test_index(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.get_json()["languages"] == ["python", "java", "cpp"]


def test_languages_and_examples(client):
    assert client.get("/api/languages").get_json() == {"languages": ["python", "java", "cpp"]}
    examples = client.get("/api/examples").get_json()["examples"]
    assert examples[0] == {"title": "Hello World", "code": 'print "Hello World"'}


def test_translate_program(client):
    response = client.post("/api/translate", json={
        "text": "create variable x value 10\nblah blah\nprint x",
        "language": "python",
    })
    assert response.status_code == 200
    data = response.get_json()
    assert data["success"] is True
    assert data["code"] == "x = 10\nprint(x)"
    assert data["mode"] == "program"
    assert data["errors"][0]["line"] == 2
    assert data["nodes"][0] == {"type": "variable_creation", "name": "x", "value": "10"}
    assert "debug_output" not in data


def test_translate_line(client):
    data = client.post("/api/translate", json={
        "text": "for i from 1 to 11 do print i",
        "language": "C++",
        "mode": "line",
    }).get_json()
    assert data["success"]
    assert data["language"] == "cpp"
    assert data["ast"]["from"] == "1"
    assert data["ast"]["body"] == {"type": "print", "values": ["i"]}
    assert data["code"].startswith("for (int i = 1; i < 11; i++) {")


def test_translate_failure_is_not_an_http_error(client):
    response = client.post("/api/translate", json={"text": "blah blah"})
    assert response.status_code == 200
    assert response.get_json()["success"] is False


@pytest.mark.parametrize("payload", [
    {},
    {"text": "   "},
    {"text": 42},
    {"text": "print x", "language": "cobol"},
    {"text": "print x", "mode": "batch"},
])
def test_bad_requests(client, payload):
    response = client.post("/api/translate", json=payload)
    assert response.status_code == 400
    assert response.get_json()["success"] is False


def test_debug_request_returns_trace_and_tokens(client):
    data = client.post("/api/translate", json={"text": "Make x equal 5", "debug": True}).get_json()
    assert data["success"]
    assert "PHASE 1: NORMALIZATION" in data["debug_output"]
    assert data["tokens"] == [{
        "line": 1,
        "normalized": "create x value 5",
        "tokens": [
            {"num": 0, "type": "KEYWORD", "value": "create"},
            {"num": 1, "type": "IDENTIFIER", "value": "x"},
            {"num": 2, "type": "KEYWORD", "value": "value"},
            {"num": 3, "type": "NUMBER", "value": "5"},
        ],
    }]
    assert data["debug_metadata"]["tokens_count"] == 4


def test_unexpected_exception_returns_500(client, monkeypatch):
    import server

    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(server.translator, "translate_program", boom)
    response = client.post("/api/translate", json={"text": "print x"})
    assert response.status_code == 500
    assert response.get_json()["error"] == "boom"
