"""Data model for the hand-edited override file."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class OverrideDocument(BaseModel):
    """Sparse manual overrides; a null value anywhere means "keep the fetched value"."""

    model_config = ConfigDict(extra="ignore")

    meetup: dict[str, Any] | None = None
    speakers: dict[str, dict[str, Any] | None] | None = None
    sponsor: dict[str, Any] | None = None
