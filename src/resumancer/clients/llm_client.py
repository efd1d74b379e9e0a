"""Claude API wrapper with schema-constrained output and retry logic."""

from __future__ import annotations

import asyncio
import json
import logging
import os
from dataclasses import dataclass

import anthropic
from tenacity import AsyncRetrying, RetryCallState, retry_if_exception, stop_after_attempt

from resumancer.clients.retry_policy import RetryPolicy
from resumancer.errors import ConfigurationError, GenerationCancelled, TransportError

logger = logging.getLogger(__name__)

API_KEY_ENV = "ANTHROPIC_API_KEY"
OUTPUT_TOOL_NAME = "submit_ideas"


@dataclass
class LLMResponse:
    """Response from the LLM including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int
    attempts: int = 1


def _discard_result(task: asyncio.Future) -> None:
    """Done-callback for calls the caller stopped waiting on."""
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.debug("Discarded provider call failed after cancellation: %s", exc)
    else:
        logger.debug("Discarded provider call result after cancellation")


def _error_body(exc: anthropic.APIStatusError) -> str:
    body = exc.body if exc.body is not None else exc.response.text
    if isinstance(body, (dict, list)):
        return json.dumps(body)
    return str(body)


class IdeaClient:
    """Async Claude client that asks for output matching a strict schema.

    The schema is sent as a forced tool call, so the provider shapes the
    payload before it reaches the validator. The SDK's built-in retries are
    turned off; ``retry_policy`` decides what is retried and how long to wait.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        model: str = "claude-haiku-4-5-20251001",
        timeout: float = 60.0,
        max_tokens: int = 4096,
        retry_policy: RetryPolicy | None = None,
        sleep=asyncio.sleep,
    ):
        key = api_key or os.environ.get(API_KEY_ENV)
        if not key:
            raise ConfigurationError(f"Missing {API_KEY_ENV} environment variable")
        self.client = anthropic.AsyncAnthropic(api_key=key, timeout=timeout, max_retries=0)
        self.model = model
        self.max_tokens = max_tokens
        self.retry_policy = retry_policy or RetryPolicy()
        self._sleep = sleep
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    async def _call_api(
        self,
        system: str,
        prompt: str,
        temperature: float,
        output_schema: dict | None,
    ) -> anthropic.types.Message:
        """Make a single API call."""
        kwargs: dict = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system
        if output_schema:
            kwargs["tools"] = [
                {
                    "name": OUTPUT_TOOL_NAME,
                    "description": "Return the generated ideas.",
                    "input_schema": output_schema,
                }
            ]
            kwargs["tool_choice"] = {"type": "tool", "name": OUTPUT_TOOL_NAME}
        return await self.client.messages.create(**kwargs)

    async def _until_cancelled(self, awaitable, cancel: asyncio.Event | None):
        """Await ``awaitable`` unless ``cancel`` fires first.

        On cancellation the awaitable keeps running in the background and its
        result is dropped.
        """
        if cancel is None:
            return await awaitable
        work = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(cancel.wait())
        try:
            await asyncio.wait({work, waiter}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            work.add_done_callback(_discard_result)
            raise
        finally:
            waiter.cancel()
        if work.done():
            return work.result()
        work.add_done_callback(_discard_result)
        raise GenerationCancelled("Request cancelled by caller")

    async def _backoff(self, seconds: float, cancel: asyncio.Event | None) -> None:
        try:
            await self._until_cancelled(self._sleep(seconds), cancel)
        except GenerationCancelled:
            # next attempt sees the flag and stops
            pass

    def _log_retry(self, retry_state: RetryCallState) -> None:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(
            "Provider call attempt %d failed (%s), retrying in %.1fs",
            retry_state.attempt_number,
            getattr(exc, "status_code", type(exc).__name__),
            retry_state.next_action.sleep if retry_state.next_action else 0.0,
        )

    async def generate(
        self,
        system: str,
        prompt: str,
        temperature: float = 0.7,
        output_schema: dict | None = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> LLMResponse:
        """Send one prompt and return the raw text payload with usage.

        Raises TransportError when the provider fails with a non-retryable
        status or keeps failing after the last attempt, and
        GenerationCancelled when ``cancel`` is set.
        """
        policy = self.retry_policy
        retrying = AsyncRetrying(
            stop=stop_after_attempt(policy.max_attempts),
            wait=policy.wait,
            retry=retry_if_exception(policy.is_retryable),
            sleep=lambda seconds: self._backoff(seconds, cancel),
            before_sleep=self._log_retry,
            reraise=True,
        )

        attempts = 0
        logger.debug("LLM call: model=%s temperature=%.2f", self.model, temperature)
        try:
            async for attempt in retrying:
                with attempt:
                    if cancel is not None and cancel.is_set():
                        raise GenerationCancelled("Request cancelled by caller")
                    attempts = attempt.retry_state.attempt_number
                    message = await self._until_cancelled(
                        self._call_api(system, prompt, temperature, output_schema),
                        cancel,
                    )
        except GenerationCancelled as e:
            e.attempts = attempts
            raise
        except anthropic.APIStatusError as e:
            logger.error("LLM call failed with status %s after %d attempt(s)", e.status_code, attempts)
            error = TransportError(
                f"Provider error {e.status_code}",
                upstream_status=e.status_code,
                body=_error_body(e),
            )
            error.attempts = attempts
            raise error from e
        except anthropic.APIConnectionError as e:
            logger.error("LLM call could not reach provider after %d attempt(s)", attempts)
            error = TransportError(f"Provider unreachable: {e}")
            error.attempts = attempts
            raise error from e

        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        self._token_log.append((self.model, input_tokens, output_tokens))
        return LLMResponse(
            text=self._payload_text(message),
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            attempts=attempts,
        )

    @staticmethod
    def _payload_text(message) -> str:
        """Tool input as JSON text, or the text blocks if the model replied in prose."""
        texts = []
        for block in message.content:
            if block.type == "tool_use":
                return json.dumps(block.input)
            if block.type == "text":
                texts.append(block.text)
        return "".join(texts)

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = {
            "input": sum(t[1] for t in self._token_log),
            "output": sum(t[2] for t in self._token_log),
            "calls": list(self._token_log),
        }
        self._token_log.clear()
        return summary
