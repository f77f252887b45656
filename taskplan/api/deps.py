from typing import Optional

import httpx
from fastapi import Request

from taskplan.core.config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_llm_transport(request: Request) -> Optional[httpx.AsyncBaseTransport]:
    # None -> real network; tests install an httpx.MockTransport
    return getattr(request.app.state, "llm_transport", None)
