import asyncio
import json
import unittest

import httpx

from app.ai.errors import (
    MissingCredential,
    ProviderConnectionError,
    ProviderContentMissing,
    ProviderHTTPError,
)
from app.ai.providers.external_provider import ExternalProvider
from app.ai.providers.ollama_provider import OllamaProvider
from app.ai.types import ChatMessage, LLMRequest

REQUEST = LLMRequest(
    system_prompt="Use only the résumé.",
    resume_context={"name": "Jordan Lee"},
    chat_history=(ChatMessage(role="user", content="Hi"), ChatMessage(role="assistant", content="Hello")),
    user_message="What does Jordan do?",
    model="test-model",
)


class RecordingTransport:
    def __init__(self, response: httpx.Response | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


def _generate(provider, request: LLMRequest = REQUEST) -> str:
    return asyncio.run(provider.generate(request))


class OllamaProviderTests(unittest.TestCase):
    def test_posts_chat_body_and_returns_trimmed_content(self):
        transport = RecordingTransport(httpx.Response(200, json={"message": {"content": "  Jordan builds APIs.\n"}}))
        provider = OllamaProvider("http://ollama.local:11434//", http_client=transport.client())

        self.assertEqual(_generate(provider), "Jordan builds APIs.")

        sent = transport.requests[0]
        self.assertEqual(sent.method, "POST")
        self.assertEqual(str(sent.url), "http://ollama.local:11434/api/chat")
        body = json.loads(sent.content)
        self.assertEqual(body["model"], "test-model")
        self.assertIs(body["stream"], False)
        self.assertEqual([m["role"] for m in body["messages"]], ["system", "system", "user", "assistant", "user"])
        self.assertNotIn("authorization", sent.headers)

    def test_non_2xx_raises_http_error_with_status(self):
        transport = RecordingTransport(httpx.Response(503, text="model loading"))
        provider = OllamaProvider("http://ollama.local:11434", http_client=transport.client())

        with self.assertRaises(ProviderHTTPError) as ctx:
            _generate(provider)
        self.assertEqual(ctx.exception.status, 503)
        self.assertEqual(ctx.exception.body, "model loading")
        self.assertEqual(len(transport.requests), 1)

    def test_missing_content_raises(self):
        for payload in ({}, {"message": {}}, {"message": {"content": "   "}}, {"message": {"content": 7}}, []):
            with self.subTest(payload=payload):
                transport = RecordingTransport(httpx.Response(200, json=payload))
                provider = OllamaProvider("http://ollama.local:11434", http_client=transport.client())
                with self.assertRaises(ProviderContentMissing):
                    _generate(provider)

    def test_non_json_success_body_raises_content_missing(self):
        transport = RecordingTransport(httpx.Response(200, text="<html>proxy</html>"))
        provider = OllamaProvider("http://ollama.local:11434", http_client=transport.client())
        with self.assertRaises(ProviderContentMissing):
            _generate(provider)

    def test_transport_failure_raises_connection_error(self):
        transport = RecordingTransport(error=httpx.ConnectTimeout("timed out"))
        provider = OllamaProvider("http://ollama.local:11434", http_client=transport.client())
        with self.assertRaises(ProviderConnectionError):
            _generate(provider)


def _completion(content) -> dict:
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 0,
        "model": "test-model",
        "choices": [
            {"index": 0, "finish_reason": "stop", "message": {"role": "assistant", "content": content}}
        ],
    }


class ExternalProviderTests(unittest.TestCase):
    def test_posts_completion_request_with_bearer_token(self):
        transport = RecordingTransport(httpx.Response(200, json=_completion(" Jordan leads platform work. ")))
        provider = ExternalProvider("sk-test", "https://llm.example.com/v1/", http_client=transport.client())

        self.assertEqual(provider.base_url, "https://llm.example.com/v1")
        self.assertEqual(_generate(provider), "Jordan leads platform work.")

        sent = transport.requests[0]
        self.assertEqual(sent.method, "POST")
        self.assertEqual(str(sent.url), "https://llm.example.com/v1/chat/completions")
        self.assertEqual(sent.headers["authorization"], "Bearer sk-test")
        body = json.loads(sent.content)
        self.assertEqual(body["model"], "test-model")
        self.assertEqual(body["temperature"], 0.2)
        self.assertEqual(body["messages"][0], {"role": "system", "content": "Use only the résumé."})
        self.assertEqual(body["messages"][-1], {"role": "user", "content": "What does Jordan do?"})

    def test_whitespace_content_raises_content_missing(self):
        transport = RecordingTransport(httpx.Response(200, json=_completion("  \n ")))
        provider = ExternalProvider("sk-test", http_client=transport.client())
        with self.assertRaises(ProviderContentMissing):
            _generate(provider)

    def test_empty_choices_raise_content_missing(self):
        payload = _completion("unused")
        payload["choices"] = []
        transport = RecordingTransport(httpx.Response(200, json=payload))
        provider = ExternalProvider("sk-test", http_client=transport.client())
        with self.assertRaises(ProviderContentMissing):
            _generate(provider)

    def test_invalid_json_success_body_raises_content_missing(self):
        transport = RecordingTransport(
            httpx.Response(200, headers={"content-type": "application/json"}, content=b"{not json")
        )
        provider = ExternalProvider("sk-test", http_client=transport.client())
        with self.assertRaises(ProviderContentMissing):
            _generate(provider)

    def test_error_status_raises_http_error_without_retry(self):
        transport = RecordingTransport(
            httpx.Response(500, json={"error": {"message": "upstream exploded", "type": "server_error"}})
        )
        provider = ExternalProvider("sk-test", http_client=transport.client())
        with self.assertRaises(ProviderHTTPError) as ctx:
            _generate(provider)
        self.assertEqual(ctx.exception.status, 500)
        self.assertIn("upstream exploded", ctx.exception.body)
        self.assertEqual(len(transport.requests), 1)

    def test_connection_failure_raises_connection_error(self):
        transport = RecordingTransport(error=httpx.ConnectError("refused"))
        provider = ExternalProvider("sk-test", http_client=transport.client())
        with self.assertRaises(ProviderConnectionError):
            _generate(provider)

    def test_blank_credential_is_rejected(self):
        with self.assertRaises(MissingCredential):
            ExternalProvider("   ")

    def test_default_base_url(self):
        provider = ExternalProvider("sk-test")
        self.assertEqual(provider.base_url, "https://api.openai.com/v1")


if __name__ == "__main__":
    unittest.main()
