import json
from typing import Any

from pydantic import BaseModel, field_validator


class ContactSubmission(BaseModel):
    # Missing fields are relayed as blanks, anything else as its JSON text
    name: str = ""
    email: str = ""
    message: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> str:
        if isinstance(value, str):
            return value
        return json.dumps(value, ensure_ascii=False)


class ContactResponse(BaseModel):
    success: bool
    message: str
    detail: list[str] = []
    errors: list[str] | None = None
