# errors.py
from __future__ import annotations


class GenerationError(Exception):
    """
    Base for every failure the relay reports back to the caller.
    Carries the single-line message and the HTTP status it maps to.
    """

    status_code = 500
    default_message = "Generation failed."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


# ---------- Configuration ----------

class ConfigurationError(GenerationError):
    default_message = "Missing OPENAI_API_KEY environment variable."


# ---------- Client input ----------

class MalformedRequestError(GenerationError):
    status_code = 400
    default_message = "Invalid JSON payload."


class ValidationError(GenerationError):
    status_code = 400
    default_message = "Prompt is required."


# ---------- Upstream model output ----------

class EmptyResponseError(GenerationError):
    default_message = "Empty response from model."


class UnparsableResponseError(GenerationError):
    default_message = "Failed to parse model output."


class IncompleteResponseError(GenerationError):
    default_message = "Model response missing required fields."


class UpstreamError(GenerationError):
    default_message = "Model request failed."
