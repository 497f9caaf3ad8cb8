"""BFHL HTTP service: a health check plus the multiplexed ``/bfhl`` endpoint.

Both endpoints are thin wrappers: ``/health`` echoes the configured contact
email and ``/bfhl`` hands the JSON body to :class:`apps.dispatcher.Dispatcher`.
The runnable application lives in :mod:`apps.bfhl.main`.
"""

from __future__ import annotations

import json
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.ai_forwarder import GeminiForwarder
from apps.dispatcher import Dispatcher
from lib.config.service_loader import ServiceConfig
from lib.contracts.envelope import ResponseEnvelope
from lib.telemetry.logger import get_logger

INVALID_JSON = "Request body must be valid JSON"
RESULT_TOO_LARGE = "Result is too large to encode as JSON"

logger = get_logger(__name__)


def envelope_response(envelope: ResponseEnvelope, status: int) -> JSONResponse:
    """Render ``envelope``, falling back to a 500 envelope if it cannot be encoded.

    Integers beyond the interpreter's digit limit for ``str()`` make
    ``json.dumps`` raise ``ValueError``; the client still gets an envelope.
    """

    try:
        return JSONResponse(envelope.to_payload(), status_code=status)
    except ValueError as exc:
        logger.warning("Could not encode /bfhl response: %s", exc)
        failure = ResponseEnvelope.failure(envelope.official_email, RESULT_TOO_LARGE)
        return JSONResponse(failure.to_payload(), status_code=500)


def create_app(
    config: ServiceConfig,
    forwarder: Optional[GeminiForwarder] = None,
) -> FastAPI:
    """Build the FastAPI application around ``config``.

    A forwarder passed in by the caller is left open on shutdown; one created
    here is closed with the application lifespan.
    """

    owns_forwarder = forwarder is None
    forwarder = forwarder or GeminiForwarder(config)
    dispatcher = Dispatcher(config, forwarder)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("BFHL service ready (model=%s)", config.gemini_model)
        yield
        if owns_forwarder:
            await forwarder.aclose()

    app = FastAPI(title="bfhl", lifespan=lifespan)
    app.state.config = config
    app.state.dispatcher = dispatcher

    @app.get("/health")
    async def health():
        """Liveness probe."""

        envelope = ResponseEnvelope.success(config.official_email)
        return envelope.to_payload(include_data=False)

    @app.post("/bfhl")
    async def bfhl(request: Request):
        """Dispatch the single operation named in the body."""

        raw = await request.body()
        try:
            # an empty body counts as an empty object
            body = json.loads(raw) if raw.strip() else {}
        except (json.JSONDecodeError, UnicodeDecodeError):
            return envelope_response(ResponseEnvelope.failure(config.official_email, INVALID_JSON), 400)

        status, envelope = await dispatcher.dispatch(body)
        return envelope_response(envelope, status)

    return app


__all__ = ["create_app", "envelope_response", "INVALID_JSON", "RESULT_TOO_LARGE"]
