"""
Server-rendered plan page.
What it provides:
- GET /  empty page
- POST / form submit -> plan or error
- Production-only client bundle routes (static files + index fallback)

And, the main purpose:
Let a user type a goal in a browser and read the plan back.
"""


from pathlib import Path
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import FileResponse
from fastapi.templating import Jinja2Templates

from taskplan.api.deps import get_llm_transport, get_settings
from taskplan.api.types import GENERATION_FAILED
from taskplan.core.config import Settings
from taskplan.core.logging import get_logger
from taskplan.planning.service import generate_plan
from taskplan.web.state import PlanView

log = get_logger("web.views")

_THIS_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = _THIS_DIR / "templates"
STATIC_DIR = _THIS_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["ui"])


def _render(request: Request, view: PlanView):
    return templates.TemplateResponse(request, "index.html", {"view": view})


@router.get("/")
async def ui_index(request: Request):
    return _render(request, PlanView())


@router.post("/")
async def ui_submit(
    request: Request,
    goal: str = Form(""),
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_llm_transport),
):
    view = PlanView()
    if not view.begin(goal):
        return _render(request, view)

    try:
        view.succeed(await generate_plan(settings, goal.strip(), transport=transport))
    except Exception:
        log.exception("Plan generation failed (ui)")
        view.fail(GENERATION_FAILED)
    return _render(request, view)


def bundle_router(dist_dir: Path) -> APIRouter:
    """Catch-all for unmatched GET paths, served from a prebuilt client bundle."""
    bundle = APIRouter(tags=["bundle"])
    root = dist_dir.resolve()

    @bundle.get("/{full_path:path}", include_in_schema=False)
    async def serve_bundle(request: Request, full_path: str):
        target = (root / full_path).resolve()
        if full_path and target.is_relative_to(root) and target.is_file():
            return FileResponse(target)
        index = root / "index.html"
        if index.is_file():
            return FileResponse(index)
        return _render(request, PlanView())

    return bundle
