from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from openai import OpenAI

from errors import ConfigurationError

DEFAULT_MODEL = "gpt-4o"


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str]
    model: str = DEFAULT_MODEL
    base_url: Optional[str] = None


def load_settings() -> Settings:
    # Load .env BEFORE reading env vars
    load_dotenv()
    return Settings(
        api_key=os.getenv("OPENAI_API_KEY") or None,
        model=os.getenv("OPENAI_MODEL") or DEFAULT_MODEL,
        base_url=os.getenv("OPENAI_BASE_URL") or None,
    )


def get_client(settings: Settings) -> OpenAI:
    if not settings.api_key:
        raise ConfigurationError()
    return OpenAI(api_key=settings.api_key, base_url=settings.base_url)
