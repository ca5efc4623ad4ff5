from scripture_ai.routes import assistant as assistant_routes
from scripture_ai.services.translation_service import TeluguExplainer


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["knowledge_cards"] == 29
    assert body["concept_cards"] == 13


# ── Assistant ────────────────────────────────────────────

def test_ask_reference(client):
    resp = client.post("/api/assistant/ask", json={"question": "Give moral from Gita 2:47"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["kind"] == "reference"
    assert body["mode"] == "moral"
    assert body["matches"] == ["Gita 2:47"]
    assert body["answer"].startswith("Gita 2:47")


def test_ask_concept(client):
    body = client.post("/api/assistant/ask", json={"question": "Explain karma yoga"}).json()
    assert body["kind"] == "concept"
    assert body["mode"] == "full"
    assert "Related reference: Gita 2:47" in body["answer"]


def test_ask_requires_question(client):
    assert client.post("/api/assistant/ask", json={}).status_code == 422


def test_roko_conversation(client):
    first = client.post("/api/assistant/roko", json={"text": "good morning"}).json()
    session_id = first["session_id"]
    assert first["reply"] is None
    assert first["active"] is False

    wake = client.post("/api/assistant/roko", json={"text": "hey roko", "session_id": session_id}).json()
    assert wake["active"] is True
    assert wake["reply"] == "Roko here! How can I help you today?"

    turn = client.post(
        "/api/assistant/roko",
        json={"text": "Read John chapter 3 verse 16", "session_id": session_id},
    ).json()
    assert turn["reply"] == "Opening John 3:16 for you."
    assert turn["intent"] == "bible_verse"
    assert turn["sentiment"] == "neutral"
    assert turn["active"] is False

    assert client.delete(f"/api/assistant/roko/{session_id}").status_code == 200
    assert client.delete(f"/api/assistant/roko/{session_id}").status_code == 404


def test_telugu_without_translators_is_bad_gateway(client):
    resp = client.post("/api/assistant/telugu", json={"text": "Do your duty"})
    assert resp.status_code == 502
    assert resp.json() == {
        "detail": "Telugu explanation failed from all providers: no translators configured",
        "type": "TranslationError",
    }


def test_telugu_passes_telugu_text_through(client):
    resp = client.post("/api/assistant/telugu", json={"text": " ధర్మం "})
    assert resp.status_code == 200
    assert resp.json() == {"text": " ధర్మం ", "explanation": "ధర్మం"}


def test_telugu_uses_injected_translators(client):
    calls = []

    async def fake_translator(text):
        calls.append(text)
        return " కర్తవ్యం  చేయి "

    client.app.state.telugu_explainer = TeluguExplainer([fake_translator])
    for _ in range(2):
        resp = client.post("/api/assistant/telugu", json={"text": "Do your duty"})
        assert resp.status_code == 200
        assert resp.json()["explanation"] == "కర్తవ్యం చేయి"
    assert calls == ["Do your duty"]


def test_telugu_provider_error_message_is_returned(client):
    async def failing_translator(text):
        raise RuntimeError("status 503")

    client.app.state.telugu_explainer = TeluguExplainer([failing_translator])
    resp = client.post("/api/assistant/telugu", json={"text": "peace"})
    assert resp.status_code == 502
    assert resp.json()["detail"] == "Telugu explanation failed from all providers: status 503"


def test_unhandled_error_is_internal_server_error(client, monkeypatch):
    def broken(question):
        raise ValueError("boom")

    monkeypatch.setattr(assistant_routes, "answer", broken)
    resp = client.post("/api/assistant/ask", json={"question": "dharma"})
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error", "type": "ValueError"}


# ── Analysis ─────────────────────────────────────────────

def test_sentiment_endpoint(client):
    body = client.post("/api/analysis/sentiment", json={"text": "I am not happy"}).json()
    assert body["sentiment"] == "negative"
    assert body["score"] == -1.0
    assert body["confidence"] == 1.0
    assert body["empathetic_response"]


def test_intent_endpoint(client):
    body = client.post("/api/analysis/intent", json={"text": "latest headlines"}).json()
    assert body == {
        "matched": True,
        "intent": "news",
        "response": "Fetching the latest news headlines for you.",
    }


def test_reference_endpoint(client):
    body = client.post("/api/analysis/reference", json={"text": "bible 1 corinthians 13:4"}).json()
    assert body["found"] is True
    assert body["tradition"] == "Bible"
    assert body["book"] == "1 Corinthians"
    assert body["label"] == "1 Corinthians 13:4"

    missing = client.post("/api/analysis/reference", json={"text": "peace"}).json()
    assert missing == {
        "found": False, "tradition": None, "book": None,
        "chapter": None, "verse": None, "label": None,
    }


def test_mode_endpoint(client):
    body = client.post("/api/analysis/mode", json={"text": "what is the takeaway"}).json()
    assert body["mode"] == "moral"


# ── Knowledge ────────────────────────────────────────────

def test_list_cards_by_tradition(client):
    cards = client.get("/api/knowledge/cards", params={"tradition": "quran"}).json()
    assert len(cards) == 9
    assert all(card["tradition"] == "Quran" for card in cards)
    assert cards[0]["reference"] == "1:1"


def test_list_cards_unknown_tradition(client):
    assert client.get("/api/knowledge/cards", params={"tradition": "vedas"}).status_code == 404


def test_concepts(client):
    concepts = client.get("/api/knowledge/concepts").json()
    assert len(concepts) == 13
    sabr = client.get("/api/knowledge/concepts/sabr").json()
    assert sabr["title"] == "Sabr (Patient Endurance)"
    assert client.get("/api/knowledge/concepts/nirvana").status_code == 404


def test_topic_search(client):
    body = client.get("/api/knowledge/search", params={"q": "patience hardship"}).json()
    assert body["count"] == 3
    assert body["results"][0]["reference"] == "2:153"


def test_topic_search_validates_length(client):
    assert client.get("/api/knowledge/search", params={"q": "a"}).status_code == 422
