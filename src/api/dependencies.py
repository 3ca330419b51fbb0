"""Shared FastAPI dependency functions."""

from fastapi import HTTPException, Request

from src.formatting import Formatter


def get_formatter(request: Request) -> Formatter:
    """Get Formatter from app state."""
    if not hasattr(request.app.state, "formatter"):
        raise HTTPException(status_code=500, detail="Formatter not initialized")
    return request.app.state.formatter
