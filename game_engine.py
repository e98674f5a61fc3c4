# game_engine.py
from __future__ import annotations

import logging
from typing import Any, Sequence

from openai import OpenAI, OpenAIError

from data_class import GenerationResult
from errors import EmptyResponseError, UpstreamError, ValidationError
from instructions import RESPONSE_DIRECTIVE, SPEAKER_LABELS, SYSTEM_INSTRUCTIONS
from schemas import ConversationMessage, GenerationRequest
from utils import ensure_game_payload, parse_model_json, self_containment_issues

logger = logging.getLogger(__name__)

# Only the most recent turns are forwarded to bound prompt size
HISTORY_LIMIT = 6

MAX_TOKENS = 3000
TEMPERATURE = 0.4


def build_transcript(conversation: Sequence[ConversationMessage]) -> str:
    lines = []
    for entry in list(conversation)[-HISTORY_LIMIT:]:
        speaker = SPEAKER_LABELS.get(entry.role, "System")
        lines.append(f"{speaker}: {entry.content}")
    return "\n".join(lines)


def build_user_message(prompt: str, conversation: Sequence[ConversationMessage] = ()) -> str:
    history = build_transcript(conversation)
    blocks = [
        f"Conversation so far:\n{history}" if history else "",
        f"Latest request:\n{prompt}",
        RESPONSE_DIRECTIVE,
    ]
    return "\n\n".join(b for b in blocks if b)


def collect_text(resp: Any) -> str:
    """
    Concatenate every text segment of a chat completion. Content may be a
    plain string or a list of typed parts depending on the backend.
    """
    parts = []
    for choice in getattr(resp, "choices", None) or []:
        content = getattr(choice.message, "content", None)
        if isinstance(content, str):
            parts.append(content)
        elif isinstance(content, list):
            for part in content:
                if isinstance(part, dict):
                    kind, text = part.get("type"), part.get("text")
                else:
                    kind, text = getattr(part, "type", None), getattr(part, "text", None)
                if kind == "text" and isinstance(text, str):
                    parts.append(text)
    return "".join(parts).strip()


def generate_game(request: GenerationRequest, client: OpenAI, model: str) -> GenerationResult:
    """
    Core relay: one model call per request, returns the parsed (reply, html).
    Nothing is kept between calls; the caller re-supplies history every time.
    """
    prompt = (request.prompt or "").strip()
    if not prompt:
        raise ValidationError()

    user_message = build_user_message(prompt, request.conversation)
    logger.info(
        "Generating game with %s (%d history turns, prompt %d chars)",
        model, min(len(request.conversation), HISTORY_LIMIT), len(prompt),
    )

    try:
        resp = client.chat.completions.create(
            model=model,
            max_tokens=MAX_TOKENS,
            temperature=TEMPERATURE,
            messages=[
                {"role": "system", "content": SYSTEM_INSTRUCTIONS},
                {"role": "user", "content": user_message},
            ],
        )
    except OpenAIError as e:
        raise UpstreamError(str(e) or None) from e

    raw = collect_text(resp)
    if not raw:
        raise EmptyResponseError()

    data = parse_model_json(raw)
    reply, html = ensure_game_payload(data)

    issues = self_containment_issues(html)
    if issues:
        logger.warning("Generated game may not run offline: %s", "; ".join(issues))

    return GenerationResult(reply=reply, html=html)
