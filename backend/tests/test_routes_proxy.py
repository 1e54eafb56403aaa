"""
HTTP-level tests for the proxy endpoint.
"""
from sqlmodel import Session, select

from voiceos.models.api_key import ApiKey
from voiceos.models.usage import TTSUsageLog

PROXY_URL = "/functions/v1/tts-proxy"


class TestProxyEndpoint:

    def test_preflight(self, client, upstream):
        response = client.options(PROXY_URL)

        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-methods"] == "POST, OPTIONS"
        assert "x-api-key" in response.headers["access-control-allow-headers"]
        assert upstream.calls == []

    def test_missing_key(self, client):
        response = client.post(PROXY_URL, json={"text": "Hello"})

        assert response.status_code == 401
        assert response.json() == {"error": "API key required"}
        assert response.headers["access-control-allow-origin"] == "*"

    def test_invalid_key(self, client):
        response = client.post(PROXY_URL, json={"text": "Hello"}, headers={"x-api-key": "vos_wrong"})
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid API key"}

    def test_missing_text(self, client, api_key):
        response = client.post(PROXY_URL, json={"voice_id": "hindi_male"}, headers={"x-api-key": api_key.api_key})
        assert response.status_code == 400
        assert response.json() == {"error": "Text is required"}

    def test_success(self, client, engine, upstream, api_key):
        response = client.post(PROXY_URL, json={"text": "Hello"}, headers={"x-api-key": api_key.api_key})

        assert response.status_code == 200
        assert response.json() == upstream.result
        assert response.headers["content-type"] == "application/json"

        with Session(engine) as session:
            logs = session.exec(select(TTSUsageLog)).all()
            key = session.get(ApiKey, api_key.id)

        assert len(logs) == 1
        assert key.usage_count == 1
        assert key.last_used_at is not None

    def test_get_not_allowed(self, client):
        response = client.get(PROXY_URL)
        assert response.status_code == 405


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"
