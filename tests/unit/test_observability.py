"""
Name: Observability Unit Tests (logging, context, timing, metrics)

Responsibilities:
  - JSONFormatter: payload, contexto de request, redacción y excepciones
  - Context vars: set / get / clear
  - StageTimings: claves {stage}_ms y total_ms
  - Helpers de métricas: normalización de endpoint y agrupado de status
"""

import json
import logging
import sys

import pytest

from rag_sandbox.context import clear_context, get_context_dict, set_request_context
from rag_sandbox.crosscutting.logger import JSONFormatter
from rag_sandbox.crosscutting.metrics import (
    _normalize_endpoint,
    _status_bucket,
    get_metrics_response,
    observe_stage_latency,
    record_retrieval,
)
from rag_sandbox.crosscutting.timing import StageTimings, Timer

pytestmark = pytest.mark.unit


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="rag-sandbox",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestContext:

    def test_set_get_clear(self):
        set_request_context(request_id="abc", method="GET", path="/healthz")
        assert get_context_dict() == {
            "request_id": "abc",
            "method": "GET",
            "path": "/healthz",
        }

        clear_context()
        assert get_context_dict() == {}

    def test_empty_values_are_omitted(self):
        set_request_context(request_id="abc")
        try:
            assert get_context_dict() == {"request_id": "abc"}
        finally:
            clear_context()


class TestJSONFormatter:

    def test_basic_payload(self):
        payload = json.loads(JSONFormatter().format(_record(dataset_id="tiny")))

        assert payload["level"] == "INFO"
        assert payload["message"] == "hello"
        assert payload["logger"] == "rag-sandbox"
        assert payload["dataset_id"] == "tiny"

    def test_includes_request_context(self):
        set_request_context(request_id="req-9", method="POST", path="/v1/x")
        try:
            payload = json.loads(JSONFormatter().format(_record()))
        finally:
            clear_context()

        assert payload["request_id"] == "req-9"
        assert payload["method"] == "POST"

    def test_redacts_sensitive_keys(self):
        payload = json.loads(
            JSONFormatter().format(_record(token="s3cr3t", api_key="k"))
        )
        assert payload["token"] == "***REDACTADO***"
        assert payload["api_key"] == "***REDACTADO***"

    def test_truncates_long_strings(self):
        payload = json.loads(JSONFormatter().format(_record(query="q" * 5000)))
        assert payload["query"].startswith("q" * 4000)
        assert payload["query"].endswith("(truncado)")

    def test_exception_info(self):
        try:
            raise ValueError("bad input")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()

        payload = json.loads(JSONFormatter().format(record))

        assert payload["exception"]["type"] == "ValueError"
        assert payload["exception"]["message"] == "bad input"


class TestTiming:

    def test_timer_context_manager(self):
        with Timer() as timer:
            pass
        assert timer.elapsed_seconds >= 0
        assert timer.elapsed_ms >= 0

    def test_timer_stop_without_start_raises(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_stage_timings(self):
        timings = StageTimings()
        with timings.measure("chunk"):
            pass
        with timings.measure("retrieve"):
            pass

        result = timings.to_dict()

        assert list(result) == ["chunk_ms", "retrieve_ms", "total_ms"]
        assert set(timings.seconds()) == {"chunk", "retrieve"}


class TestMetrics:

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/v1/datasets", "/v1/datasets"),
            ("/v1/datasets/support-playbook", "/v1/datasets/{dataset_id}"),
            ("/v1/datasets/abc/ask", "/v1/datasets/{dataset_id}/ask"),
            ("/healthz", "/healthz"),
        ],
    )
    def test_normalize_endpoint(self, path, expected):
        assert _normalize_endpoint(path) == expected

    @pytest.mark.parametrize(
        "code,bucket",
        [(200, "2xx"), (204, "2xx"), (404, "4xx"), (422, "4xx"), (500, "5xx"), (302, "other")],
    )
    def test_status_bucket(self, code, bucket):
        assert _status_bucket(code) == bucket

    def test_pipeline_metrics_in_payload(self):
        observe_stage_latency("chunk", 0.001)
        record_retrieval("semantic", 3)

        body, content_type = get_metrics_response()

        assert content_type.startswith("text/plain")
        text = body.decode()
        assert 'rag_sandbox_stage_latency_seconds_count{stage="chunk"}' in text
        assert 'rag_sandbox_retrievals_total{mode="semantic"}' in text
