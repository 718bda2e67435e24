"""
Purpose:
- Call the Gemini generateContent REST endpoint with one prompt (+ optional inline image).
- Read the answer text out of the response without ever crashing on a missing level.

Notes:
- Exactly one POST per call; no retries.
- The key goes in the query string as-is. An empty key is allowed: auth may be
  added outside this service (proxy, gateway).
"""

from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

import httpx

from ..core.settings import settings
from .errors import EmptyResponseError, TransportError
from .schema import EncodedPayload

logger = logging.getLogger(__name__)

def build_payload(prompt: str, image: Optional[EncodedPayload] = None) -> Dict[str, Any]:
    parts: List[Dict[str, Any]] = [{"text": prompt}]
    if image is not None:
        parts.append({"inlineData": {"mimeType": image.mime_type, "data": image.data}})
    return {"contents": [{"role": "user", "parts": parts}]}

def extract_text(data: Any) -> Optional[str]:
    """candidates[0].content.parts[0].text, or None if any level is absent."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(text, str) or not text:
        return None
    return text

class GeminiClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout_s: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = settings.gemini_api_key if api_key is None else api_key
        self.base_url = (base_url or settings.gemini_base_url).rstrip("/")
        self.model = model or settings.gemini_model
        self.timeout_s = settings.gemini_timeout_s if timeout_s is None else timeout_s
        # injected client (tests, shared pools); otherwise one client per call
        self._client = client

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def _post(self, client: httpx.AsyncClient, payload: Dict[str, Any]) -> httpx.Response:
        return await client.post(
            self.endpoint,
            params={"key": self.api_key},
            json=payload,
            headers={"Content-Type": "application/json"},
        )

    async def generate(self, prompt: str, image: Optional[EncodedPayload] = None) -> str:
        """
        Send one request and return the answer text.
        Raises TransportError on non-2xx, EmptyResponseError when no text comes back.
        """
        payload = build_payload(prompt, image)
        if self._client is not None:
            resp = await self._post(self._client, payload)
        else:
            # None -> no timeout, like a plain browser fetch
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout_s)) as client:
                resp = await self._post(client, payload)

        if not resp.is_success:
            raise TransportError(resp.status_code, resp.reason_phrase)

        text = extract_text(resp.json())
        if text is None:
            raise EmptyResponseError("response carried no candidate text")
        logger.info("gemini answered: model=%s chars=%d", self.model, len(text))
        return text
