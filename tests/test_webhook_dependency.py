"""
Tests for the webhook signature dependency, mounted on a throwaway app.
"""

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from config.settings import get_settings
from connectors.dependencies import verified_webhook_body
from connectors.signature import compute_nylas_signature

BODY = b'{"deltas":[]}'


def _make_client(settings) -> TestClient:
    app = FastAPI()

    @app.post("/webhook")
    async def webhook(body: bytes = Depends(verified_webhook_body)):
        return {"size": len(body)}

    app.dependency_overrides[get_settings] = lambda: settings
    return TestClient(app)


class TestVerifiedWebhookBody:
    def test_valid_signature_passes_body_through(self, settings):
        client = _make_client(settings)
        response = client.post(
            "/webhook",
            content=BODY,
            headers={"x-nylas-signature": compute_nylas_signature(BODY, "nylas-secret")},
        )
        assert response.status_code == 200
        assert response.json() == {"size": len(BODY)}

    @pytest.mark.parametrize("headers", [{}, {"x-nylas-signature": "deadbeef"}])
    def test_bad_signature_is_401(self, settings, headers):
        client = _make_client(settings)
        response = client.post("/webhook", content=BODY, headers=headers)
        assert response.status_code == 401

    def test_unconfigured_secret_is_503(self, unconfigured_settings):
        client = _make_client(unconfigured_settings)
        response = client.post(
            "/webhook",
            content=BODY,
            headers={"x-nylas-signature": compute_nylas_signature(BODY, "")},
        )
        assert response.status_code == 503
