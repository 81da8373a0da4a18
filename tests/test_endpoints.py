from fastapi.testclient import TestClient

from pickbot.generate import FALLBACK_OPTIONS
from pickbot.personas import default_personality


def _body(*contents, personality="Dry wit, short sentences."):
    messages = [
        {"id": str(i), "type": "user" if i % 2 == 0 else "assistant", "content": c}
        for i, c in enumerate(contents)
    ]
    return {"messages": messages, "personality": {"description": personality}}


def test_root_ok(client: TestClient):
    r = client.get("/")
    assert r.status_code == 200
    assert "message" in r.json()


def test_health_ok(client: TestClient):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_healthz_reports_engine(client: TestClient):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["engine"] == "ScriptedClient"


def test_chat_liveness(client: TestClient):
    r = client.get("/api/chat")
    assert r.status_code == 200
    assert r.json() == {"message": "Chat API is running"}


def test_chat_returns_model_options(client: TestClient):
    r = client.post("/api/chat", json=_body("Want to grab lunch?"))
    assert r.status_code == 200
    assert r.json() == {"options": ["one option here", "two option here", "three option here", "four option here"]}


def test_chat_passes_history_and_personality(client: TestClient, use_model, scripted):
    model = use_model(scripted('["a", "b", "c", "d"]'))
    r = client.post("/api/chat", json=_body("hi", "hello", "how are you?"))
    assert r.status_code == 200
    assert r.json()["options"] == ["a", "b", "c", "d"]

    messages, params = model.calls[0]
    assert "Dry wit, short sentences." in messages[0].content
    assert messages[1].content == (
        "Previous conversation:\nUser: hi\nAssistant: hello\n\nUser's latest message: how are you?"
    )
    assert params.temperature == 0.8


def test_chat_ignores_extra_message_fields(client: TestClient):
    body = _body("hey")
    body["messages"][0].update({"timestamp": "2024-01-01T00:00:00Z", "options": None})
    r = client.post("/api/chat", json=body)
    assert r.status_code == 200
    assert len(r.json()["options"]) == 4


def test_missing_personality_uses_default(client: TestClient, use_model, scripted):
    model = use_model(scripted('["a", "b", "c", "d"]'))
    r = client.post("/api/chat", json={"messages": [{"type": "user", "content": "hey"}]})
    assert r.status_code == 200
    assert default_personality().description in model.calls[0][0][0].content


def test_empty_messages_is_bad_request(client: TestClient):
    r = client.post("/api/chat", json={"messages": [], "personality": {"description": "x"}})
    assert r.status_code == 400
    assert r.json() == {"error": "Messages array is required"}
    assert "options" not in r.json()


def test_missing_messages_is_bad_request(client: TestClient):
    r = client.post("/api/chat", json={"personality": {"description": "x"}})
    assert r.status_code == 400
    assert "error" in r.json()


def test_messages_not_a_list_is_bad_request(client: TestClient):
    r = client.post("/api/chat", json={"messages": "hello"})
    assert r.status_code == 400
    assert "error" in r.json()


def test_malformed_message_is_bad_request(client: TestClient):
    r = client.post("/api/chat", json={"messages": [{"type": "user"}]})
    assert r.status_code == 400
    assert "content" in r.json()["error"]


def test_invalid_json_is_bad_request(client: TestClient):
    r = client.post("/api/chat", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert "error" in r.json()


def test_model_failure_returns_fallback_with_200(client: TestClient, use_model, scripted):
    use_model(scripted(error=TimeoutError("model timed out")))
    r = client.post("/api/chat", json=_body("anything"))
    assert r.status_code == 200
    assert r.json() == {"options": FALLBACK_OPTIONS}


def test_unusable_output_still_gives_four(client: TestClient, use_model, scripted):
    for text in ["", "nope", '["x", "y"]', "[1, 2, 3, 4]", "Sure! Happy to help."]:
        use_model(scripted(text))
        r = client.post("/api/chat", json=_body("pizza tonight?"))
        assert r.status_code == 200
        options = r.json()["options"]
        assert len(options) == 4
        assert all(isinstance(o, str) and o.strip() for o in options)
