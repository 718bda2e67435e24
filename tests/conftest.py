import json
from typing import Callable, List

import httpx
import pytest

from calorie_scanner.scanner.gemini import GeminiClient
from calorie_scanner.scanner.orchestrator import Orchestrator
from calorie_scanner.scanner.schema import SelectedImage

def answer(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}

class FakeGemini:
    """Records every outgoing request and answers through a handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []
        self._handler = handler
        self.client = GeminiClient(
            api_key="test-key",
            base_url="https://gemini.test/v1beta",
            model="test-model",
            client=httpx.AsyncClient(transport=httpx.MockTransport(self._handle)),
        )

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def bodies(self) -> List[dict]:
        return [json.loads(r.content) for r in self.requests]

    def prompt(self, i: int = -1) -> str:
        return self.bodies()[i]["contents"][0]["parts"][0]["text"]

@pytest.fixture
def image() -> SelectedImage:
    return SelectedImage(data=b"\xff\xd8\xff\xe0fake-jpeg", mime_type="image/jpeg", filename="obiad.jpg")

@pytest.fixture
def fake_gemini():
    def make(handler=None, text="X"):
        handler = handler or (lambda req: httpx.Response(200, json=answer(text)))
        return FakeGemini(handler)
    return make

@pytest.fixture
def orchestrator_with(fake_gemini):
    def make(handler=None, text="X"):
        fake = fake_gemini(handler, text)
        return Orchestrator(fake.client), fake
    return make
