"""Air quality advisory API: FastAPI app exposing the public actions."""

import os
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from airwise.actions import Actions
from airwise.config.loader import load_config
from airwise.config.schema import AppConfig
from airwise.models.common import ActionResult
from airwise.models.requests import format_error_list
from airwise.reporting.health_checker import HealthChecker

CONFIG_ENV_VAR = "AIRWISE_CONFIG"
DEFAULT_CONFIG = "configs/default.yaml"


def create_app(config: AppConfig | None = None, actions: Actions | None = None) -> FastAPI:
    if config is None:
        config = load_config(os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG))
    if actions is None:
        actions = Actions(config)

    app = FastAPI(title="airwise", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.config = config
    app.state.actions = actions

    def get_actions() -> Actions:
        return app.state.actions

    @app.exception_handler(RequestValidationError)
    async def body_validation_error(request: Request, exc: RequestValidationError):
        # Same envelope as action-level validation errors
        return JSONResponse({"data": None, "error": format_error_list(exc.errors())})

    # ── Actions ─────────────────────────────────────────────────────

    @app.post("/api/advisory")
    async def advisory(body: dict[str, Any], acts: Actions = Depends(get_actions)):
        return _envelope(await acts.get_health_advisory(body))

    @app.post("/api/chat")
    async def chat(body: dict[str, Any], acts: Actions = Depends(get_actions)):
        return _envelope(await acts.chat(body))

    @app.post("/api/tips")
    async def tips(body: dict[str, Any], acts: Actions = Depends(get_actions)):
        return _envelope(await acts.get_pollution_reduction_tips(body))

    @app.post("/api/news")
    async def news(body: dict[str, Any], acts: Actions = Depends(get_actions)):
        return _envelope(await acts.get_news(body))

    @app.post("/api/reverse-geocode")
    async def reverse_geocode(body: dict[str, Any], acts: Actions = Depends(get_actions)):
        return _envelope(await acts.reverse_geocode(body))

    @app.post("/api/health-report")
    async def health_report(body: dict[str, Any], acts: Actions = Depends(get_actions)):
        return _envelope(await acts.extract_health_report(body))

    # ── Status ──────────────────────────────────────────────────────

    @app.get("/api/status")
    async def status(probe: bool = False):
        """Configured sources and demo mode; ``probe`` pings each endpoint."""
        return jsonable_encoder(await HealthChecker(app.state.config).check(probe=probe))

    return app


def _envelope(result: ActionResult) -> dict:
    return {"data": jsonable_encoder(result.data), "error": result.error}
