"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logfire

from forum.interface.api.routes import auth, health, posts, profile, votes
from forum.util.di.container import container_lifespan, create_container, setup_di
from forum.util.observability import instrument_fastapi


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed input (bad JSON, missing fields, non-numeric query) as 400."""
    errors = exc.errors()
    logfire.warn("Malformed request", path=request.url.path, errors=len(errors))
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Malformed request")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": f"{location}: {message}" if location else message},
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container is built
            when omitted (tests pass one with in-memory persistence)
    """
    app_instance = FastAPI(
        title="Forum API",
        description="Backend API for a forum with toggle voting and a ranked feed",
        version="0.1.0",
        lifespan=container_lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.add_exception_handler(
        RequestValidationError, request_validation_handler
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(profile.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(votes.router)

    return app_instance
