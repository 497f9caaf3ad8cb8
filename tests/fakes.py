"""Stand-ins for the Gemini API used across the test suite."""

import httpx

from apps.ai_forwarder import GeminiForwarder

EMAIL = "student@example.edu"


def gemini_reply(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class FakeGemini:
    """Records requests and answers with a canned Gemini payload."""

    def __init__(self, payload=None, status_code=200, exc=None):
        self.payload = payload if payload is not None else gemini_reply("Paris is the capital.")
        self.status_code = status_code
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, json=self.payload)

    def forwarder(self, config):
        client = httpx.AsyncClient(transport=httpx.MockTransport(self))
        return GeminiForwarder(config, client=client)
