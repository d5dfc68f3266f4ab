"""
Name: HTTP API Unit Tests (FastAPI TestClient)

Responsibilities:
  - Health check y propagación de X-Request-Id
  - Arranque: DEFAULT_DATASET_ID debe existir en el registro
  - Endpoints de datasets (listado, detalle, índice de chunks)
  - Endpoints del pipeline (retrieve, ask, catálogo)
  - Errores RFC7807 (404 / 422) con media type problem+json
  - Exposición de métricas Prometheus

Notes:
  - Todo corre in-memory sobre el corpus de ejemplo; sin mocks de IO.
"""

import pytest
from fastapi.testclient import TestClient

import rag_sandbox.api.main as api_main
from rag_sandbox.api.main import app
from rag_sandbox.crosscutting.config import Settings
from rag_sandbox.crosscutting.exceptions import SeedDataError

pytestmark = pytest.mark.unit

PROBLEM_JSON = "application/problem+json"


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as test_client:
        yield test_client


class TestHealth:

    def test_healthz(self, client):
        response = client.get("/healthz")

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is True
        assert body["datasets"] == 2

    def test_request_id_is_echoed(self, client):
        response = client.get("/healthz", headers={"X-Request-Id": "req-123"})

        assert response.headers["X-Request-Id"] == "req-123"
        assert response.json()["request_id"] == "req-123"

    def test_request_id_generated_when_missing(self, client):
        response = client.get("/healthz")
        assert response.headers["X-Request-Id"]


class TestStartup:

    def test_unknown_default_dataset_fails_startup(self, monkeypatch):
        monkeypatch.setattr(
            api_main,
            "get_settings",
            lambda: Settings(default_dataset_id="nope"),
        )

        with pytest.raises(SeedDataError, match="nope"):
            with TestClient(app):
                pass

    def test_known_default_dataset_starts(self, monkeypatch):
        monkeypatch.setattr(
            api_main,
            "get_settings",
            lambda: Settings(default_dataset_id="security-blueprints"),
        )

        with TestClient(app) as test_client:
            assert test_client.get("/healthz").status_code == 200


class TestDatasets:

    def test_list(self, client):
        response = client.get("/v1/datasets")

        assert response.status_code == 200
        datasets = response.json()["datasets"]
        assert [d["id"] for d in datasets] == [
            "support-playbook",
            "security-blueprints",
        ]
        assert datasets[0]["document_count"] == 3
        assert datasets[0]["color"] == "#3b82f6"
        assert len(datasets[0]["sample_queries"]) == 2
        assert response.json()["default_dataset_id"] == "support-playbook"

    def test_detail(self, client):
        response = client.get("/v1/datasets/support-playbook")

        assert response.status_code == 200
        body = response.json()
        assert [d["id"] for d in body["documents"]] == [
            "doc-support-1",
            "doc-support-2",
            "doc-support-3",
        ]
        assert body["stats"]["document_count"] == 3
        assert body["stats"]["word_count"] == sum(
            d["word_count"] for d in body["documents"]
        )
        assert body["stats"]["popular_tags"][0] == {"tag": "sso", "count": 1}

    def test_detail_not_found(self, client):
        response = client.get("/v1/datasets/nope")

        assert response.status_code == 404
        assert response.headers["content-type"].startswith(PROBLEM_JSON)
        body = response.json()
        assert body["code"] == "NOT_FOUND"
        assert body["status"] == 404
        assert "nope" in body["detail"]

    def test_chunk_index(self, client):
        response = client.get(
            "/v1/datasets/security-blueprints/chunks", params={"chunk_size": 20}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["chunk_size"] == 20
        assert body["total_chunks"] == len(body["chunks"])
        first = body["chunks"][0]
        assert first["id"] == "doc-sec-1-chunk-1"
        assert first["word_count"] == 20
        assert len(first["embedding"]) == 7

    def test_chunk_index_default_size(self, client):
        response = client.get("/v1/datasets/support-playbook/chunks")
        assert response.json()["chunk_size"] == 90

    def test_chunk_index_invalid_size(self, client):
        response = client.get(
            "/v1/datasets/support-playbook/chunks", params={"chunk_size": 0}
        )

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert any(e.get("field") == "query.chunk_size" for e in body["errors"])

    def test_chunk_index_unknown_dataset(self, client):
        response = client.get("/v1/datasets/nope/chunks")
        assert response.status_code == 404


class TestRetrieve:

    def test_keyword_retrieve_with_highlights(self, client):
        response = client.post(
            "/v1/datasets/support-playbook/retrieve",
            json={"query": "sso provisioning", "top_k": 2, "mode": "keyword"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["mode"] == "keyword"
        assert body["top_k"] == 2
        assert len(body["results"]) == 2

        top = body["results"][0]
        assert top["chunk"]["doc_id"] == "doc-support-1"
        assert top["keyword_score"] == 1.0
        highlighted = [h["text"] for h in top["highlights"] if h["highlighted"]]
        assert "provisioning" in highlighted
        assert "".join(h["text"] for h in top["highlights"]) == top["chunk"]["text"]

    def test_retrieve_has_no_answer_fields(self, client):
        response = client.post(
            "/v1/datasets/support-playbook/retrieve", json={"query": "sla"}
        )
        assert "answer" not in response.json()

    def test_defaults(self, client):
        response = client.post(
            "/v1/datasets/support-playbook/retrieve", json={"query": "sla"}
        )

        body = response.json()
        assert body["chunk_size"] == 90
        assert body["top_k"] == 3
        assert body["mode"] == "hybrid"

    @pytest.mark.parametrize(
        "payload,field",
        [
            ({"query": "sso", "top_k": 0}, "body.top_k"),
            ({"query": "sso", "chunk_size": 0}, "body.chunk_size"),
            ({"query": "sso", "mode": "fuzzy"}, "body.mode"),
        ],
    )
    def test_invalid_payloads(self, client, payload, field):
        response = client.post("/v1/datasets/support-playbook/retrieve", json=payload)

        assert response.status_code == 422
        assert response.headers["content-type"].startswith(PROBLEM_JSON)
        assert any(e.get("field") == field for e in response.json()["errors"])

    def test_unknown_dataset(self, client):
        response = client.post("/v1/datasets/nope/retrieve", json={"query": "sso"})
        assert response.status_code == 404


class TestAsk:

    def test_full_answer(self, client):
        response = client.post(
            "/v1/datasets/security-blueprints/ask",
            json={"query": "How often do we rotate credentials?", "top_k": 3},
        )

        assert response.status_code == 200
        body = response.json()
        assert len(body["results"]) == 3
        assert len(body["query_embedding"]) == 7

        answer = body["answer"]
        assert [c["label"] for c in answer["citations"]] == [
            "Source 1",
            "Source 2",
            "Source 3",
        ]
        assert answer["response_tokens"] >= 120
        assert answer["prompt_parts"]["user_query"] == (
            "How often do we rotate credentials?"
        )
        assert [s["id"] for s in body["stages"]] == [
            "question",
            "embedding",
            "vector-search",
            "rerank",
            "compose",
        ]
        assert "total_ms" in body["timings"]

    def test_blank_query(self, client):
        response = client.post(
            "/v1/datasets/support-playbook/ask", json={"query": "   "}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["results"] == []
        assert body["answer"] is None
        assert body["query_embedding"] == []
        assert body["chunks_indexed"] > 0

    def test_query_too_long(self, client):
        response = client.post(
            "/v1/datasets/support-playbook/ask", json={"query": "x" * 2001}
        )
        assert response.status_code == 422


class TestCatalogAndMetrics:

    def test_pipeline_steps(self, client):
        response = client.get("/v1/pipeline/steps")

        assert response.status_code == 200
        body = response.json()
        assert [s["label"] for s in body["narrative"]] == ["01", "02", "03", "04"]
        assert len(body["stages"]) == 5
        assert {m["mode"] for m in body["modes"]} == {"semantic", "keyword", "hybrid"}

    def test_metrics_exposed(self, client):
        client.post("/v1/datasets/support-playbook/ask", json={"query": "sla"})

        response = client.get("/metrics")

        assert response.status_code == 200
        text = response.text
        assert "rag_sandbox_requests_total" in text
        assert 'endpoint="/v1/datasets/{dataset_id}/ask"' in text
        assert "rag_sandbox_stage_latency_seconds" in text
        assert 'rag_sandbox_retrievals_total{mode="hybrid"}' in text
