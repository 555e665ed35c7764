"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kinoprogram.api.errors import register_exception_handlers
from kinoprogram.api.routes import cinemas, health, program
from kinoprogram.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Kinoprogram API",
    description="Daily programs of Prague cinemas",
    version="0.1.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(health.router)
app.include_router(cinemas.router, prefix="/api", tags=["cinemas"])
app.include_router(program.router, prefix="/api", tags=["program"])
