# schemas.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from data_class import Role


class ConversationMessage(BaseModel):
    role: Role
    content: str


class GenerationRequest(BaseModel):
    """
    Body of POST /api/generate-game.

    `prompt` is optional at the schema level so a missing or blank prompt
    is reported as a validation problem rather than a malformed body.
    """
    model_config = ConfigDict(extra="ignore")

    prompt: Optional[str] = None
    conversation: List[ConversationMessage] = []

    @field_validator("prompt")
    @classmethod
    def _strip_prompt(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else None

    @field_validator("conversation", mode="before")
    @classmethod
    def _null_conversation(cls, value):
        return [] if value is None else value


class GenerateResponse(BaseModel):
    reply: str
    game: str


class ErrorResponse(BaseModel):
    error: str
