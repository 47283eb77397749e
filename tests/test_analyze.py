# tests/test_analyze.py

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from urlspecs.errors import PredictionServiceError
from urlspecs.inference.prediction_client import PredictionResult
from urlspecs.routes.analyze import router

# ─── Dummy stand‑ins ─────────────────────────────────────────────────────

class DummyPredictionClient:
    """Always predicts label "1" without touching the network."""
    def __init__(self):
        self.seen = []

    def predict(self, fv):
        self.seen.append(fv)
        return PredictionResult(prediction="1", probaPercentile=90, probas={"0": 0.1, "1": 0.9})


class FailingPredictionClient:
    def predict(self, fv):
        raise PredictionServiceError("Prediction service unavailable: boom")

# ─── Helpers ──────────────────────────────────────────────────────────────

def make_client():
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


@pytest.fixture
def dummy_prediction(monkeypatch):
    import urlspecs.routes.analyze as mod
    dummy = DummyPredictionClient()
    monkeypatch.setattr(mod, "prediction_client", dummy)
    return dummy

# ─── Tests ────────────────────────────────────────────────────────────────

def test_extract_endpoint():
    resp = make_client().post("/extract", json={"url": "https://www.example.com/path?x=1&y=2"})
    assert resp.status_code == 200

    features = resp.json()["features"]
    assert features["URL"] == "https://www.example.com/path?x=1&y=2"
    assert features["URLLength"] == 36
    assert features["TLD"] == "com"
    assert features["NoOfQMarkInURL"] == 1
    assert features["NoOfEqualsInURL"] == 2
    assert features["NoOfAmpersandInURL"] == 1
    assert features["IsDomainIP"] == 0


@pytest.mark.parametrize("url", ["", "   ", "https://exa mple.com"])
def test_extract_rejects_invalid_url(url):
    resp = make_client().post("/extract", json={"url": url})
    assert resp.status_code == 422
    assert isinstance(resp.json()["detail"], str)


def test_predict_endpoint(dummy_prediction):
    resp = make_client().post("/predict", json={"url": "192.168.1.1/login"})
    assert resp.status_code == 200

    data = resp.json()
    assert data["features"]["IsDomainIP"] == 1
    assert data["result"]["prediction"] == "1"
    assert data["result"]["probaPercentile"] == 90
    assert data["result"]["probas"] == {"0": 0.1, "1": 0.9}
    assert len(dummy_prediction.seen) == 1


def test_predict_invalid_url_never_calls_service(dummy_prediction):
    resp = make_client().post("/predict", json={"url": ""})
    assert resp.status_code == 422
    assert dummy_prediction.seen == []


def test_predict_service_failure(monkeypatch):
    import urlspecs.routes.analyze as mod
    monkeypatch.setattr(mod, "prediction_client", FailingPredictionClient())

    resp = make_client().post("/predict", json={"url": "example.com"})
    assert resp.status_code == 502
    assert "unavailable" in resp.json()["detail"]


def test_app_mounts_router_with_cors():
    from urlspecs.main import app

    client = TestClient(app)
    resp = client.post(
        "/extract",
        json={"url": "ipfs.io"},
        headers={"Origin": "chrome-extension://abc"},
    )
    assert resp.status_code == 200
    assert resp.json()["features"]["TLD"] == "io"
    assert "access-control-allow-origin" in resp.headers
