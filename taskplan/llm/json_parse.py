import json
import re
from typing import Any


def _strip_code_fences(s: str) -> str:
    s = s.strip()
    # remove ```json ... ``` or ``` ... ```
    if s.startswith("```"):
        s = re.sub(r"^```[a-zA-Z0-9]*\s*", "", s)
        s = re.sub(r"\s*```$", "", s)
    return s.strip()


def extract_json(text: str) -> Any:
    """
    Parse the model's JSON answer.
    A surrounding markdown fence is ignored; everything else must be one
    valid JSON document (no leading chatter, no trailing text).
    Raises ValueError (json.JSONDecodeError included) otherwise.
    """
    candidate = _strip_code_fences(text or "")
    if not candidate:
        raise ValueError("Empty JSON text")
    return json.loads(candidate)
