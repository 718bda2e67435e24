import httpx
import pytest

from calorie_scanner.scanner.errors import EmptyResponseError, TransportError
from calorie_scanner.scanner.gemini import GeminiClient, build_payload, extract_text
from calorie_scanner.scanner.schema import EncodedPayload

from conftest import answer

@pytest.mark.parametrize("data", [
    {},
    None,
    [],
    {"candidates": []},
    {"candidates": [{}]},
    {"candidates": [{"content": {}}]},
    {"candidates": [{"content": {"parts": []}}]},
    {"candidates": [{"content": {"parts": [{"inlineData": {}}]}}]},
    {"candidates": [{"content": {"parts": [{"text": None}]}}]},
    {"candidates": [{"content": {"parts": [{"text": ""}]}}]},
    {"candidates": [{"content": None}]},
])
def test_extract_text_treats_missing_levels_as_no_answer(data):
    assert extract_text(data) is None

def test_extract_text_keeps_whitespace():
    assert extract_text(answer("Kalorie:\n  ok. 500 kcal\n")) == "Kalorie:\n  ok. 500 kcal\n"

def test_payload_without_image_has_single_text_part():
    assert build_payload("hej") == {"contents": [{"role": "user", "parts": [{"text": "hej"}]}]}

def test_payload_with_image_appends_inline_data():
    body = build_payload("hej", EncodedPayload(data="QUJD", mime_type="image/png"))
    assert body["contents"][0]["parts"][1] == {"inlineData": {"mimeType": "image/png", "data": "QUJD"}}

def test_endpoint_from_settings_shape():
    c = GeminiClient(api_key="", base_url="https://example.test/v1beta/", model="m1")
    assert c.endpoint == "https://example.test/v1beta/models/m1:generateContent"
    assert c.api_key == ""

async def test_empty_key_is_sent_as_is():
    seen = []

    def handler(req):
        seen.append(req)
        return httpx.Response(200, json=answer("ok"))

    c = GeminiClient(api_key="", base_url="https://example.test/v1beta", model="m1",
                     client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    assert await c.generate("p") == "ok"
    assert seen[0].url.params["key"] == ""
    assert seen[0].headers["content-type"] == "application/json"

async def test_non_2xx_raises_transport_error_with_status():
    c = GeminiClient(api_key="k", base_url="https://example.test", model="m",
                     client=httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(429))))
    with pytest.raises(TransportError) as info:
        await c.generate("p")
    assert info.value.status_code == 429
    assert str(info.value) == "Błąd API: 429 Too Many Requests"

async def test_missing_candidates_raises_empty_response():
    c = GeminiClient(api_key="k", base_url="https://example.test", model="m",
                     client=httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={}))))
    with pytest.raises(EmptyResponseError):
        await c.generate("p")
