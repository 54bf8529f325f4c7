from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class JWoCModel(BaseModel):
    """Base model with permissive extra handling for upstream compatibility."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
