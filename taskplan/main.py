from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from taskplan.api.routes import router
from taskplan.core.config import Settings
from taskplan.core.logging import configure_logging, get_logger
from taskplan.web.views import STATIC_DIR, bundle_router
from taskplan.web.views import router as ui_router

log = get_logger("main")


def create_app(
    settings: Optional[Settings] = None,
    *,
    llm_transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Task Breakdown Assistant API", version="0.1.0")
    app.state.settings = settings
    app.state.llm_transport = llm_transport

    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=".*",
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)
    app.include_router(ui_router)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    if settings.is_production:
        # must stay last: catches every unmatched GET
        app.include_router(bundle_router(settings.CLIENT_DIST_DIR))

    @app.on_event("startup")
    async def on_startup():
        mode = f"model={settings.AI_MODEL}" if settings.has_model else "fallback plan (AI_API_KEY not set)"
        log.info(f"Server running on port {settings.PORT} ({mode}, env={settings.APP_ENV})")

    return app


def run() -> None:
    import uvicorn

    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT, log_level="info")


if __name__ == "__main__":
    run()
