from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, cast

from pydantic import BaseModel

JsonLike = dict[str, Any] | list[Any] | str | int | float | bool | None


def to_plain_data(value: Any) -> JsonLike:
    """Convert pydantic/dataclass/native objects into plain JSON-serializable structures."""

    if isinstance(value, Enum):
        return to_plain_data(value.value)
    if isinstance(value, BaseModel):
        return to_plain_data(value.model_dump(mode="json", by_alias=True))
    if is_dataclass(value) and not isinstance(value, type):
        return {item.name: to_plain_data(getattr(value, item.name)) for item in fields(value)}
    if isinstance(value, dict):
        return {str(key): to_plain_data(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain_data(item) for item in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return cast(JsonLike, value)
