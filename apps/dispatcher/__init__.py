"""Request dispatcher for ``POST /bfhl``.

The body must carry exactly one recognised operation key.  Each operation
handler validates its own input and returns a :class:`Result`; the
dispatcher turns that into an HTTP status and a :class:`ResponseEnvelope`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple

import httpx

from lib.config.service_loader import ServiceConfig
from lib.contracts.envelope import ResponseEnvelope
from lib.contracts.operations import (
    OPERATION_KEYS,
    DispatchFailure,
    FailureReason,
    Operation,
)
from lib.telemetry.logger import get_logger
from lib.utils.number_theory import fibonacci, hcf, is_prime, lcm
from lib.utils.result import Result
from lib.utils.validation import InvalidInput, as_int, as_int_list, ensure

from apps.ai_forwarder import GeminiForwarder

logger = get_logger(__name__)

EXACTLY_ONE_KEY = "Exactly one key is required"
INVALID_KEY = "Invalid key"

DispatchResult = Result[Any, DispatchFailure]


def _fibonacci(value: Any) -> Any:
    n = as_int(value, "Invalid fibonacci input")
    ensure(n >= 0, "Invalid fibonacci input")
    return fibonacci(n)


def _prime(value: Any) -> Any:
    # non-integer elements are skipped rather than rejected
    return [n for n in as_int_list(value, "Prime expects integer array") if is_prime(n)]


def _fold(name: str, fn: Callable[[list], int]) -> Callable[[Any], int]:
    def handler(value: Any) -> int:
        numbers = as_int_list(value, f"{name} expects non-empty array", non_empty=True)
        ensure(len(numbers) == len(value), f"{name} expects integer array")
        return fn(numbers)

    return handler


NUMERIC_HANDLERS: Dict[Operation, Callable[[Any], Any]] = {
    Operation.FIBONACCI: _fibonacci,
    Operation.PRIME: _prime,
    Operation.LCM: _fold("LCM", lcm),
    Operation.HCF: _fold("HCF", hcf),
}


@dataclass
class Dispatcher:
    """Route a request body to the matching operation."""

    config: ServiceConfig
    forwarder: GeminiForwarder

    def status_for(self, reason: FailureReason) -> int:
        if reason in (FailureReason.INVALID_SHAPE, FailureReason.UNKNOWN_KEY):
            return 400
        if reason is FailureReason.INVALID_INPUT:
            return self.config.validation_status
        return 500

    def validate(self, body: Any) -> Result[Tuple[Operation, Any], DispatchFailure]:
        """Check the tagged-union shape: exactly one known key."""

        if not isinstance(body, dict) or len(body) != 1:
            return Result.err(DispatchFailure(FailureReason.INVALID_SHAPE, EXACTLY_ONE_KEY))
        key, value = next(iter(body.items()))
        if key not in OPERATION_KEYS:
            return Result.err(DispatchFailure(FailureReason.UNKNOWN_KEY, INVALID_KEY))
        return Result.ok((Operation(key), value))

    async def _ask(self, value: Any) -> str:
        ensure(isinstance(value, str) and bool(value.strip()), "AI expects a string question")
        return await self.forwarder.ask(value)

    async def run(self, operation: Operation, value: Any) -> DispatchResult:
        """Execute ``operation`` and wrap the outcome in a :class:`Result`."""

        try:
            if operation is Operation.AI:
                data = await self._ask(value)
            else:
                data = NUMERIC_HANDLERS[operation](value)
        except InvalidInput as exc:
            return Result.err(DispatchFailure(FailureReason.INVALID_INPUT, str(exc)))
        except httpx.HTTPStatusError as exc:
            message = f"Request failed with status code {exc.response.status_code}"
            logger.error("Gemini request failed: %s", message)
            return Result.err(DispatchFailure(FailureReason.UPSTREAM, message))
        except httpx.HTTPError as exc:
            logger.error("Gemini request failed: %r", exc)
            return Result.err(DispatchFailure(FailureReason.UPSTREAM, str(exc) or type(exc).__name__))
        except Exception as exc:
            logger.exception("Unexpected failure while handling %s", operation.value)
            return Result.err(DispatchFailure(FailureReason.INTERNAL, str(exc)))
        return Result.ok(data)

    async def dispatch(self, body: Any) -> Tuple[int, ResponseEnvelope]:
        email = self.config.official_email
        checked = self.validate(body)
        if checked.is_ok:
            operation, value = checked.value
            outcome = await self.run(operation, value)
        else:
            outcome = checked

        if outcome.is_ok:
            return 200, ResponseEnvelope.success(email, outcome.value)

        failure = outcome.error
        status = self.status_for(failure.reason)
        if failure.reason in (FailureReason.UPSTREAM, FailureReason.INTERNAL):
            logger.warning("Failed /bfhl request (%s): %s", failure.reason.value, failure.message)
        else:
            logger.info("Rejected /bfhl request (%s): %s", failure.reason.value, failure.message)
        return status, ResponseEnvelope.failure(email, failure.message)


__all__ = ["Dispatcher", "EXACTLY_ONE_KEY", "INVALID_KEY", "NUMERIC_HANDLERS"]
