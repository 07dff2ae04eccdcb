"""Shared Pydantic schema bases."""

from __future__ import annotations

from pydantic import BaseModel


class RowModel(BaseModel):
    """Response models read straight from database rows (mappings or ORM objects)."""

    model_config = {
        "from_attributes": True,
    }


class RequestBody(BaseModel):
    """Request bodies pass values through to text columns; numbers become strings."""

    model_config = {
        "coerce_numbers_to_str": True,
    }


class ErrorResponse(BaseModel):
    """Body of every error response: `{ error: "..." }`"""
    error: str


class HealthResponse(BaseModel):
    """Health-check response returned by /health."""
    status: str = "ok"
    app: str
    env: str
