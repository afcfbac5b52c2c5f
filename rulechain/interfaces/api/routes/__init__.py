from fastapi import FastAPI

from .rules import router as rules_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(rules_router)
