# data_class.py
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Literal

Role = Literal["user", "assistant", "system"]


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Message:
    """One turn of a client session. Never mutated once appended."""
    role: Role
    content: str
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_now)

    def to_wire(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class GenerationResult:
    reply: str
    html: str

    def to_wire(self) -> Dict[str, str]:
        # The model's `html` key is exposed as `game` on the HTTP contract
        return {"reply": self.reply, "game": self.html}
