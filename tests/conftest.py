"""Shared test fixtures."""

import pytest
from fastapi import FastAPI

from kinoprogram.api.errors import register_exception_handlers
from kinoprogram.api.routes import cinemas, health, program


@pytest.fixture
def test_app() -> FastAPI:
    """Minimal FastAPI app without CORS or logging setup, for API tests."""
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(health.router)
    app.include_router(cinemas.router, prefix="/api")
    app.include_router(program.router, prefix="/api")
    return app
