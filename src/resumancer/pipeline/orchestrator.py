"""Idea Generation Orchestrator - request handler for the whole pipeline."""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from functools import partial
from typing import Callable

from pydantic import ValidationError

from resumancer.clients.llm_client import IdeaClient
from resumancer.clients.retry_policy import RetryPolicy
from resumancer.config import AppConfig
from resumancer.errors import (
    ClientInputError,
    ContentShapeError,
    IdeaGenerationError,
    TransportError,
)
from resumancer.logging.cost_calculator import calculate_cost
from resumancer.logging.models import UsageLog
from resumancer.models.idea import GenerationResult, NoUsableIdeas
from resumancer.models.request import GenerationRequest
from resumancer.pipeline.mood_profile import compute_mood_profile
from resumancer.pipeline.prompt_composer import compose_prompt
from resumancer.pipeline.response_validator import validate_ideas

logger = logging.getLogger(__name__)

GenerationOutcome = GenerationResult | NoUsableIdeas

USAGE_FIELDS = {"attempts", "total_input_tokens", "total_output_tokens", "estimated_cost_usd"}


def _describe_validation_error(exc: ValidationError) -> str:
    """Short, caller-safe summary of a request validation error."""
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "body"
    return f"Invalid field '{location}': {first.get('msg', 'invalid value')}"


class IdeaOrchestrator:
    """Runs one generation: mood profile, prompt, model call, validation.

    ``client_factory`` builds a fresh IdeaClient per request so nothing is
    shared between concurrent requests; it raises ConfigurationError when
    the provider credential is missing.
    """

    def __init__(
        self,
        client_factory: Callable[[], IdeaClient],
        *,
        category_mode: str = "diverse",
        require_mood: bool = True,
        default_mood: int = 5,
    ):
        self.client_factory = client_factory
        self.category_mode = category_mode
        self.require_mood = require_mood
        self.default_mood = default_mood

    @classmethod
    def from_config(cls, config: AppConfig, api_key: str | None = None) -> IdeaOrchestrator:
        factory = partial(
            IdeaClient,
            api_key,
            model=config.llm.model,
            timeout=config.llm.timeout,
            max_tokens=config.llm.max_tokens,
            retry_policy=RetryPolicy(
                max_attempts=config.retry.max_attempts,
                base_delay=config.retry.base_delay,
            ),
        )
        return cls(
            factory,
            category_mode=config.pipeline.category_mode,
            require_mood=config.pipeline.require_mood,
            default_mood=config.pipeline.default_mood,
        )

    async def generate(
        self,
        request: GenerationRequest,
        *,
        cancel: asyncio.Event | None = None,
        on_phase: Callable[[str, str], None] | None = None,
    ) -> GenerationOutcome:
        """Generate three ideas for ``request``.

        Returns a GenerationResult, or NoUsableIdeas when the model answered
        with something that fails shape validation. Raises ClientInputError,
        ConfigurationError, TransportError or GenerationCancelled otherwise.

        Args:
            request: Parsed caller input.
            cancel: Optional event; setting it abandons the provider call.
            on_phase: Optional callback(phase_name, detail) for progress.
        """
        start = time.monotonic()

        def _notify(phase: str, detail: str = ""):
            logger.debug("phase=%s %s", phase, detail)
            if on_phase:
                on_phase(phase, detail)

        _notify("received")
        if request.mood is None:
            if self.require_mood:
                raise ClientInputError("Missing required field: mood (number 0-10)")
            mood = self.default_mood
        else:
            mood = request.mood

        profile = compute_mood_profile(mood)
        _notify("profile", f"mood {profile.mood} ({profile.label}), temperature {profile.temperature:.2f}")

        seed = request.novelty_seed
        if seed is None or not str(seed).strip():
            seed = uuid.uuid4().hex[:8]
        prompt = compose_prompt(
            request, profile, category_mode=self.category_mode, novelty_seed=seed
        )
        _notify("prompt", prompt.target_category or self.category_mode)

        client = self.client_factory()
        usage = UsageLog(mood=profile.mood, category_mode=self.category_mode, model=client.model)

        _notify("model_call")
        try:
            response = await client.generate(
                prompt.system,
                prompt.user,
                temperature=profile.temperature,
                output_schema=prompt.schema,
                cancel=cancel,
            )
        except IdeaGenerationError as e:
            if isinstance(e, TransportError):
                _notify("transport_failed", e.message)
            usage.attempts = e.attempts
            usage.outcome = "error"
            usage.success = False
            usage.error_message = e.message
            self._log_usage(usage, client, start)
            raise

        usage.attempts = response.attempts
        try:
            ideas = validate_ideas(
                response.text,
                category_mode=self.category_mode,
                expected_category=prompt.target_category,
            )
        except ContentShapeError as e:
            _notify("rejected", e.message)
            usage.outcome = "no_usable_ideas"
            usage.success = False
            usage.error_message = e.message
            self._log_usage(usage, client, start)
            return NoUsableIdeas(
                message=e.message,
                raw=e.raw,
                mood=profile.mood,
                temperature=profile.temperature,
            )

        _notify("validated", ", ".join(idea.title for idea in ideas))
        self._log_usage(usage, client, start)
        return GenerationResult(
            ideas=ideas,
            mood=profile.mood,
            temperature=profile.temperature,
            category_mode=self.category_mode,
            target_category=prompt.target_category,
            usage=usage.model_dump(include=USAGE_FIELDS),
        )

    async def handle(self, body, *, cancel: asyncio.Event | None = None) -> tuple[int, dict]:
        """Turn a JSON request body into an (HTTP status, JSON payload) pair.

        All errors stop here; the caller only ever sees a short message.
        """
        try:
            if not isinstance(body, dict):
                raise ClientInputError("Request body must be a JSON object")
            try:
                request = GenerationRequest.model_validate(body)
            except ValidationError as e:
                raise ClientInputError(_describe_validation_error(e)) from None
            outcome = await self.generate(request, cancel=cancel)
        except IdeaGenerationError as e:
            logger.warning("Idea generation failed (%d): %s", e.status_code, e.message)
            return e.status_code, e.to_payload()
        except Exception:
            logger.exception("Unexpected error while generating ideas")
            return 500, {"error": "Unknown server error"}
        return 200, outcome.to_payload()

    @staticmethod
    def _log_usage(usage: UsageLog, client: IdeaClient, start: float) -> None:
        tokens = client.get_token_summary()
        usage.total_input_tokens = tokens["input"]
        usage.total_output_tokens = tokens["output"]
        usage.estimated_cost_usd = calculate_cost(tokens["calls"])
        usage.elapsed_seconds = time.monotonic() - start
        logger.info(
            "Generation %s: outcome=%s mood=%s attempts=%d tokens=%d/%d cost=$%.5f elapsed=%.1fs",
            usage.id,
            usage.outcome,
            usage.mood,
            usage.attempts,
            usage.total_input_tokens,
            usage.total_output_tokens,
            usage.estimated_cost_usd,
            usage.elapsed_seconds,
        )
