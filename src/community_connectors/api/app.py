"""FastAPI application factory."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from community_connectors import __version__
from community_connectors.api.routes import connectors_router, health_router
from community_connectors.api.schemas import ErrorDetailSchema, ErrorResponseSchema
from community_connectors.config import get_settings
from community_connectors.errors import UnknownConnectorError, UpstreamError, UserError


def _error_response(status_code: int, detail: ErrorDetailSchema) -> JSONResponse:
    body = ErrorResponseSchema(error=detail)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


async def user_error_handler(request: Request, exc: UserError) -> JSONResponse:
    """Send user errors through the host's user-error channel."""
    return _error_response(
        400,
        ErrorDetailSchema(type="user", text=exc.text, debug_text=exc.debug_text),
    )


async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    return _error_response(
        502,
        ErrorDetailSchema(type="upstream", text="The remote API request failed."),
    )


async def unknown_connector_handler(request: Request, exc: UnknownConnectorError) -> JSONResponse:
    return _error_response(404, ErrorDetailSchema(type="not_found", text=str(exc)))


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Community Connectors",
        description="GitHub and Jira connectors for reporting dashboards",
        version=__version__,
    )

    # CORS for the host UI
    origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(UpstreamError, upstream_error_handler)
    app.add_exception_handler(UnknownConnectorError, unknown_connector_handler)

    # Register routes
    app.include_router(connectors_router)
    app.include_router(health_router)

    @app.get("/")
    async def root():
        return {
            "name": "Community Connectors",
            "version": __version__,
            "docs": "/docs",
        }

    return app


# Create app instance for uvicorn
app = create_app()
