"""HTTP API for laoroman."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException

from laoroman import __version__
from laoroman.config import load_config
from laoroman.core import run_romanization
from laoroman.models import HealthResponse, RomanizeRequest, RomanizeResponse


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="laoroman",
        version=__version__,
        description="BGN/PCGN romanization of Lao text.",
    )
    config = load_config()

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__, env=config.env)

    @app.post("/v1/romanize", response_model=RomanizeResponse, tags=["romanization"])
    def romanize(request: RomanizeRequest) -> RomanizeResponse:
        try:
            return run_romanization(request, default_join_mode=config.join_mode)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    return app


app = create_app()
