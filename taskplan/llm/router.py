"""
LLM call wrapper and it does:
- Sends the system instruction + user goal to the Gemini REST API
- Asks for JSON output (responseMimeType)
- Parses the answer into an untrusted JSON value

Main purpose:
Single interface for the one model call a request makes.
No retries: a failed call surfaces as LLMError.
"""


import httpx
from typing import Any, Optional

from taskplan.core.config import Settings
from taskplan.core.logging import get_logger
from taskplan.llm.json_parse import extract_json

log = get_logger("llm.router")

TEMPERATURE = 0.3


class LLMError(RuntimeError):
    pass


def _safe_snippet(text: str, n: int = 400) -> str:
    return (text or "")[:n].replace("\n", "\\n").replace("\r", "\\r")


def _response_text(data: Any) -> str:
    try:
        parts = data["candidates"][0]["content"]["parts"]
        return "".join(p.get("text", "") for p in parts if isinstance(p, dict))
    except (KeyError, IndexError, TypeError):
        raise LLMError(f"Unexpected Gemini response: {_safe_snippet(str(data))}")


async def _gemini_generate(
    settings: Settings,
    system: str,
    user: str,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    if not settings.has_model:
        raise LLMError("Missing AI_API_KEY. Put it in your .env")

    url = f"{settings.AI_BASE_URL.rstrip('/')}/models/{settings.AI_MODEL}:generateContent"
    headers = {"x-goog-api-key": settings.AI_API_KEY}
    payload = {
        "systemInstruction": {"parts": [{"text": system}]},
        "contents": [{"role": "user", "parts": [{"text": user}]}],
        "generationConfig": {
            "temperature": TEMPERATURE,
            "responseMimeType": "application/json",
        },
    }

    timeout = httpx.Timeout(40.0, connect=10.0)

    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            r = await client.post(url, headers=headers, json=payload)
    except httpx.HTTPError as e:
        raise LLMError(f"Gemini call failed: {e}") from e

    if r.status_code >= 400:
        raise LLMError(f"Gemini error {r.status_code}: {_safe_snippet(r.text)}")

    try:
        data = r.json()
    except ValueError as e:
        raise LLMError(f"Gemini returned non-JSON body: {_safe_snippet(r.text)}") from e
    return _response_text(data)


async def llm_json(
    settings: Settings,
    system: str,
    user: str,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    """
    Calls Gemini once and returns the parsed JSON value.
    The value is untrusted: callers must normalize it before use.
    """
    text = (await _gemini_generate(settings, system, user, transport=transport)).strip()
    if not text:
        raise LLMError("Empty AI response.")

    try:
        return extract_json(text)
    except ValueError:
        log.warning(f"JSON parse failed. Snippet={_safe_snippet(text)}")
        raise
