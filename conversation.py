# conversation.py
"""
Client side of the studio: session state for one player plus the HTTP
transport that talks to the relay endpoint.

    session = ConversationSession(RelayClient("http://127.0.0.1:5000"))
    session.submit("retro space shooter")
    session.preview_source  # game HTML, or the placeholder before the first game
"""
from __future__ import annotations

import enum
import logging
import threading
from typing import List, Optional, Sequence, Tuple

import requests
from pydantic import ValidationError as SchemaError

from data_class import Message
from instructions import PLACEHOLDER_HTML
from schemas import ErrorResponse, GenerateResponse

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate-game"


class RelayError(Exception):
    """Any non-success outcome of a relay call, as a displayable message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class RelayClient:
    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.url = base_url.rstrip("/") + GENERATE_PATH
        self.session = session or requests.Session()
        self.timeout = timeout

    def generate(self, prompt: str, conversation: Sequence[dict]) -> GenerateResponse:
        try:
            response = self.session.post(
                self.url,
                json={"prompt": prompt, "conversation": list(conversation)},
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise RelayError(str(e)) from e

        if not response.ok:
            raise RelayError(_error_message(response))

        try:
            return GenerateResponse.model_validate(response.json())
        except (ValueError, SchemaError) as e:
            raise RelayError("Relay returned an invalid response.") from e


def _error_message(response: requests.Response) -> str:
    try:
        return ErrorResponse.model_validate(response.json()).error
    except (ValueError, SchemaError):
        return f"Generation failed ({response.status_code})"


class SessionState(str, enum.Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    IDLE_WITH_ERROR = "idle-with-error"


class ConversationSession:
    """
    Ordered message history, the current game document and the
    submitting/error flags for a single player. At most one relay call
    is in flight at a time; submissions made meanwhile are dropped.
    """

    def __init__(self, transport: RelayClient) -> None:
        self.transport = transport
        self._messages: List[Message] = []
        self.game_html = ""
        self.is_streaming = False
        self.error: Optional[str] = None
        self._inflight = threading.Lock()

    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def state(self) -> SessionState:
        if self.is_streaming:
            return SessionState.SUBMITTING
        if self.error:
            return SessionState.IDLE_WITH_ERROR
        return SessionState.IDLE

    @property
    def preview_source(self) -> str:
        if self.game_html.strip():
            return self.game_html
        return PLACEHOLDER_HTML

    def submit(self, text: str) -> Optional[Message]:
        """
        Send one user turn. Returns the assistant message on success and
        None when the input was blank, a call was already pending, or the
        relay failed (see `error`).
        """
        content = text.strip()
        if not content:
            return None
        if not self._inflight.acquire(blocking=False):
            logger.info("Submission ignored; a generation is already pending")
            return None

        try:
            user_message = Message(role="user", content=content)
            self._messages.append(user_message)
            self.is_streaming = True
            self.error = None

            conversation = [m.to_wire() for m in self._messages]
            try:
                data = self.transport.generate(user_message.content, conversation)
            except RelayError as e:
                self.error = e.message
                return None

            assistant_message = Message(role="assistant", content=data.reply)
            self._messages.append(assistant_message)
            self.game_html = data.game
            return assistant_message
        finally:
            self.is_streaming = False
            self._inflight.release()
