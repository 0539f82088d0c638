"""FastAPI application factory, Lambda handler and local runner."""

import logging
import os
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Callable

import uvicorn
from fastapi import FastAPI
from mangum import Mangum

from .config import settings
from .models.request import AlexaRequestEnvelope
from .routes import alexa, health
from .services.skill import Skill

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.debug else logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

LambdaHandler = Callable[[dict[str, Any], Any], dict[str, Any]]


def create_app(skill: Skill) -> FastAPI:
    """Build the HTTP app that feeds request bodies to ``skill``."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler for startup/shutdown events."""
        logger.info(f"Starting {settings.service_name} ({skill.name or 'skill'}) in {settings.environment} mode")
        yield
        logger.info(f"Shutting down {settings.service_name}")

    app = FastAPI(
        title=skill.name or "Alexa Skill",
        description="Alexa skill request router",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.skill = skill

    app.include_router(health.router)
    app.include_router(alexa.router)
    return app


def _is_alexa_event(event: dict[str, Any]) -> bool:
    # API Gateway and function URL events wrap the body in an HTTP envelope.
    return "request" in event and "requestContext" not in event and "httpMethod" not in event


def create_handler(skill: Skill) -> LambdaHandler:
    """
    Build the Lambda entry point for ``skill``.

    The Alexa trigger invokes the function with the raw request envelope,
    which is dispatched directly. Anything else (API Gateway, function URLs)
    goes through the FastAPI app via Mangum.
    """
    http_handler = Mangum(create_app(skill), lifespan="off")

    def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
        if _is_alexa_event(event):
            envelope = AlexaRequestEnvelope.model_validate(event)
            return skill.handle(envelope).to_wire()
        return http_handler(event, context)

    return handler


def running_in_lambda() -> bool:
    """Whether this process is a live AWS Lambda function rather than a local run."""
    # https://docs.aws.amazon.com/lambda/latest/dg/lambda-environment-variables.html
    return os.environ.get("AWS_EXECUTION_ENV", "").startswith("AWS_Lambda_")


def start(skill: Skill) -> None:
    """
    Serve ``skill`` over HTTP on ``SKILLKIT_HTTP_PORT`` (20123 by default).

    Does nothing inside Lambda, where the runtime calls the handler built by
    ``create_handler`` instead. Call this once per process.
    """
    if running_in_lambda():
        logger.info("Running in AWS Lambda; not starting the HTTP listener")
        return

    logger.info(f"Starting skill on HTTP port {settings.http_port}")
    uvicorn.run(create_app(skill), host=settings.http_host, port=settings.http_port)
