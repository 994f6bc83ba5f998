"""Tests for the live model-list fetchers.

Everything runs against MockTransport except the deadline test, which uses a
local socket that trickles its response.
"""

import socket
import threading
import time

import httpx
import pytest

from llmconf.exceptions import FetchFailedError, FetchTimeoutError
from llmconf.fetchers import (
    ModelFetcher,
    OllamaFetcher,
    OpenAICompatibleFetcher,
    OpenRouterFetcher,
    decode_modality,
    enrich_model,
    fetch_for_provider,
    get_model_fetcher,
    infer_context_window,
)
from llmconf.fetchers.fetch import catalog_models
from llmconf.providers.registry import get_provider


def _transport(payload=None, status=200, seen=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status, json=payload)

    return httpx.MockTransport(handler)


OPENROUTER_PAYLOAD = {
    "data": [
        {
            "id": "openai/gpt-4o",
            "name": "GPT-4o",
            "description": "Omni model",
            "context_length": 128000,
            "top_provider": {"max_completion_tokens": 16384},
            "architecture": {"modality": ["text", "image"]},
            "pricing": {"prompt": "0.0000025", "completion": "0.00001"},
        },
        {
            "id": "meta-llama/llama-3.3-70b-instruct:free",
            "context_length": 65536,
            "architecture": {"modality": "text->text"},
            "pricing": {"prompt": "0", "completion": "0"},
        },
        {
            "id": "odd/model",
            "architecture": {"modality": 42},
            "pricing": {"prompt": 0.000001, "completion": None},
        },
    ],
}


class TestOpenRouter:
    def test_parses_models(self):
        seen = []
        fetcher = OpenRouterFetcher(_transport(OPENROUTER_PAYLOAD, seen=seen))
        models = fetcher.fetch_models("sk-or-test")

        assert seen[0].url == "https://openrouter.ai/api/v1/models"
        assert seen[0].headers["Authorization"] == "Bearer sk-or-test"

        gpt = models["openai/gpt-4o"]
        assert gpt.supports_images is True
        assert gpt.context_window == 128000
        assert gpt.max_tokens == 16384
        assert gpt.input_price == pytest.approx(2.5)
        assert gpt.output_price == pytest.approx(10.0)

        free = models["meta-llama/llama-3.3-70b-instruct:free"]
        assert free.supports_images is False
        assert free.input_price == 0
        assert free.max_tokens == 0

        odd = models["odd/model"]
        assert odd.supports_images is False
        assert odd.input_price == pytest.approx(1.0)
        assert odd.output_price == 0

    def test_no_auth_header_without_key(self):
        seen = []
        OpenRouterFetcher(_transport({"data": []}, seen=seen)).fetch_models()
        assert "Authorization" not in seen[0].headers

    def test_unauthorised(self):
        fetcher = OpenRouterFetcher(_transport({"error": "bad key"}, status=401))
        with pytest.raises(FetchFailedError, match="status 401"):
            fetcher.fetch_models("sk-or-bad")


@pytest.mark.parametrize(
    "value, expected",
    [
        (["text", "image"], ["text", "image"]),
        ("text", ["text"]),
        (None, []),
        (3, []),
    ],
)
def test_decode_modality(value, expected):
    assert decode_modality(value) == expected


class TestOllama:
    def test_lists_tags(self):
        seen = []
        payload = {
            "models": [
                {"name": "llama3:8b"},
                {"name": "codellama:13b"},
                {"name": "llama3:8b"},
                {"name": ""},
            ],
        }
        fetcher = OllamaFetcher(_transport(payload, seen=seen))
        models = fetcher.fetch_models(base_url="http://gpu-box:11434/")

        assert str(seen[0].url) == "http://gpu-box:11434/api/tags"
        assert "Authorization" not in seen[0].headers
        assert sorted(models) == ["codellama:13b", "llama3:8b"]
        assert models["llama3:8b"].context_window == 8192
        assert models["codellama:13b"].context_window == 16384
        assert models["llama3:8b"].description == "Ollama model: llama3:8b"
        assert models["llama3:8b"].max_tokens == 2048

    @pytest.mark.parametrize(
        "name, window",
        [
            ("mistral-32k", 32768),
            ("qwen2.5-coder", 32768),
            ("phi3", 2048),
            ("llama2", 4096),
            ("unknown-thing", 4096),
        ],
    )
    def test_infer_context_window(self, name, window):
        assert infer_context_window(name) == window


class TestOpenAICompatible:
    def test_groq_enrichment(self):
        seen = []
        payload = {"data": [{"id": "llama-3.3-70b-versatile"}, {"id": "new-x"}]}
        fetcher = OpenAICompatibleFetcher(_transport(payload, seen=seen))
        models = fetcher.fetch_models("gsk", "https://api.groq.com/openai")

        assert str(seen[0].url) == "https://api.groq.com/openai/v1/models"
        llama = models["llama-3.3-70b-versatile"]
        assert llama.context_window == 128000
        assert llama.input_price == pytest.approx(0.59)
        assert models["new-x"].description == "Model: new-x"
        assert models["new-x"].context_window == 8192

    def test_openai_enrichment(self):
        info = enrich_model("gpt-4o-mini", "https://api.openai.com")
        assert info.context_window == 128000
        assert info.supports_images is True
        assert info.input_price == pytest.approx(2.5)
        assert info.output_price == pytest.approx(10.0)

    def test_generic_enrichment(self):
        info = enrich_model("Claude-Proxy", "http://localhost:4000")
        assert info.context_window == 200000
        assert info.description == "Claude compatible model"
        other = enrich_model("mystery", "http://localhost:4000")
        assert other.description == "OpenAI-compatible model: mystery"

    def test_defaults_to_public_endpoint(self):
        seen = []
        OpenAICompatibleFetcher(_transport({"data": []}, seen=seen)).fetch_models()
        assert str(seen[0].url) == "https://api.openai.com/v1/models"


def test_invalid_json_is_fetch_failure():
    transport = httpx.MockTransport(
        lambda request: httpx.Response(200, content=b"<html>"),
    )
    with pytest.raises(FetchFailedError, match="decode"):
        OllamaFetcher(transport).fetch_models()


def test_timeout_raises_timeout_error():
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    fetcher = OpenRouterFetcher(httpx.MockTransport(handler), timeout=0.5)
    with pytest.raises(FetchTimeoutError, match="timeout"):
        fetcher.fetch_models("sk")


@pytest.mark.parametrize(
    "fetcher_cls, payload",
    [
        (OpenRouterFetcher, {"data": 5}),
        (OpenRouterFetcher, ["not", "an", "object"]),
        (OllamaFetcher, {"models": "x"}),
        (OpenAICompatibleFetcher, {"data": {"id": "gpt-4o"}}),
    ],
)
def test_wrong_shape_is_decode_failure(fetcher_cls, payload):
    with pytest.raises(FetchFailedError, match="failed to decode response"):
        fetcher_cls(_transport(payload)).fetch_models("sk")


def test_missing_list_is_empty():
    assert OllamaFetcher(_transport({"models": None})).fetch_models() == {}


@pytest.fixture
def trickle_server():
    """HTTP server on a local socket that sends its body a byte at a time."""
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    done = threading.Event()

    def serve():
        conn, _ = listener.accept()
        with conn:
            conn.recv(65536)
            body = b'{"models": []}' + b" " * 200
            conn.sendall(
                b"HTTP/1.1 200 OK\r\n"
                b"Content-Type: application/json\r\n"
                b"Content-Length: " + str(len(body)).encode() + b"\r\n\r\n",
            )
            for i in range(len(body)):
                if done.is_set():
                    break
                try:
                    conn.sendall(body[i:i + 1])
                except OSError:
                    break
                time.sleep(0.2)

    thread = threading.Thread(target=serve, daemon=True)
    thread.start()
    yield "http://127.0.0.1:%d" % listener.getsockname()[1]
    done.set()
    listener.close()


def test_deadline_covers_a_trickling_body(trickle_server):
    # each byte arrives well inside the read timeout; only the total
    # deadline can stop this
    fetcher = OllamaFetcher(httpx.HTTPTransport(), timeout=1)
    started = time.monotonic()
    with pytest.raises(FetchTimeoutError, match="timeout after 1s"):
        fetcher.fetch_models(base_url=trickle_server)
    assert time.monotonic() - started < 3


def test_fetcher_must_implement_fetch_models():
    class Incomplete(ModelFetcher):
        pass

    with pytest.raises(TypeError):
        Incomplete()


def test_connection_error_is_fetch_failure():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(FetchFailedError) as exc_info:
        OllamaFetcher(httpx.MockTransport(handler)).fetch_models()
    assert not isinstance(exc_info.value, FetchTimeoutError)
    assert isinstance(exc_info.value.cause, httpx.ConnectError)


class TestFetchForProvider:
    def test_static_provider_uses_catalog(self):
        defn = get_provider("anthropic")
        models, error = fetch_for_provider(defn, "sk")
        assert error is None
        assert set(models) == set(defn.models)

    def test_falls_back_on_401(self):
        defn = get_provider("openrouter")
        models, error = fetch_for_provider(
            defn,
            "sk-or-bad",
            transport=_transport({"error": "unauthorised"}, status=401),
        )
        assert isinstance(error, FetchFailedError)
        assert models == catalog_models(defn)
        assert "deepseek/deepseek-chat-v3.1:free" in models

    def test_falls_back_on_empty_result(self):
        defn = get_provider("groq")
        models, error = fetch_for_provider(
            defn,
            "gsk",
            transport=_transport({"data": []}),
        )
        assert "no models" in str(error)
        assert set(models) == set(defn.models)

    def test_live_result_replaces_catalog(self):
        defn = get_provider("openrouter")
        models, error = fetch_for_provider(
            defn,
            "sk-or",
            transport=_transport(OPENROUTER_PAYLOAD),
        )
        assert error is None
        assert "odd/model" in models

    def test_falls_back_on_wrong_shape(self):
        defn = get_provider("openrouter")
        models, error = fetch_for_provider(
            defn,
            "sk-or",
            transport=_transport({"data": 5}),
        )
        assert "failed to decode response" in str(error)
        assert models == catalog_models(defn)

    def test_dynamic_provider_without_fetcher(self):
        defn = get_provider("together")
        assert get_model_fetcher("together") is None
        models, error = fetch_for_provider(defn)
        assert error is None
        assert set(models) == set(defn.models)
