from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from .errors import ParseError


class Envelope(BaseModel):
    """Outer `{event, payload}` object carried by every text frame."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    event: StrictStr = Field(..., description="Event tag such as update or delete")
    payload: StrictStr = Field(..., description="Entity JSON, or a bare id for delete")

    @classmethod
    def from_json(cls, raw: Union[str, bytes]) -> "Envelope":
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise ParseError(f"Envelope validation failed: {exc}", payload=_preview(raw)) from exc


def _preview(raw: Union[str, bytes], limit: int = 200) -> str:
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
    return text if len(text) <= limit else text[:limit] + "..."


__all__ = ["Envelope"]
