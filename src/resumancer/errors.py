"""Error taxonomy for the idea generation pipeline.

Every failure that reaches the request boundary is one of these. Each error
knows the HTTP status it maps to and how to render itself as a short JSON
payload, so no traceback or provider internals leak to the caller.
"""

from __future__ import annotations


class IdeaGenerationError(Exception):
    """Base class for all pipeline errors."""

    status_code: int = 500
    attempts: int = 0  # provider calls made before the error, when known

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict:
        return {"error": self.message}


class ClientInputError(IdeaGenerationError):
    """Required caller field missing or malformed."""

    status_code = 400


class ConfigurationError(IdeaGenerationError):
    """Deployment is missing something it needs, e.g. the provider API key."""

    status_code = 500


class TransportError(IdeaGenerationError):
    """Provider call failed after retries, or with a non-retryable status."""

    status_code = 502

    def __init__(self, message: str, upstream_status: int | None = None, body: str = ""):
        super().__init__(message)
        self.upstream_status = upstream_status
        self.body = body

    def to_payload(self) -> dict:
        payload = super().to_payload()
        payload["upstream_status"] = self.upstream_status
        return payload


class ContentShapeError(IdeaGenerationError):
    """Provider answered, but the payload is not three usable ideas.

    This one is soft: the orchestrator reports it as a "no usable ideas"
    result so the caller can retry with a fresh novelty seed.
    """

    status_code = 200

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw


class GenerationCancelled(IdeaGenerationError):
    """Caller aborted the request while it was waiting on the provider."""

    status_code = 499
