import logging
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from trustee_portal.application.api.v1.errors import error_body, map_error
from trustee_portal.application.api.v1.routes import audit, health, members, roles
from trustee_portal.application.di import create_container
from trustee_portal.config import Config, configure_logging
from trustee_portal.domain.shared.authorization.startup import validate_all_handlers
from trustee_portal.domain.shared.error import ErrorCode, PortalError
from trustee_portal.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.dishka_container.close()


def create_app(config: Config | None = None, container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application."""
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    configure_logging(config.logging)
    logger.info("Starting %s v%s", config.server.name, config.server.version)

    # Validate all handlers have authorization declarations (fail fast)
    validate_all_handlers()

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )

    if config.telemetry.enabled:
        logfire.configure(service_name=config.telemetry.service_name)
        logfire.instrument_fastapi(app_instance)

    setup_dishka(container or create_container(config), app_instance)

    app_instance.include_router(health.router, prefix="/api/v1")
    app_instance.include_router(roles.router, prefix="/api/v1")
    app_instance.include_router(members.router, prefix="/api/v1")
    app_instance.include_router(audit.router, prefix="/api/v1")

    # Domain and infrastructure errors -> {"success": false, "error": {code, message}}
    @app_instance.exception_handler(PortalError)
    async def portal_error_handler(request: Request, exc: PortalError):
        http_exc = map_error(exc)
        return JSONResponse(
            status_code=http_exc.status_code,
            content=error_body(http_exc.detail),
            headers=http_exc.headers,
        )

    # Body, path and query validation -> same envelope, field errors under details
    @app_instance.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content=error_body(
                {
                    "code": str(ErrorCode.VALIDATION_ERROR),
                    "message": "Validation failed",
                    "details": {"errors": jsonable_encoder(exc.errors())},
                }
            ),
        )

    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content=error_body({"code": "INTERNAL_ERROR", "message": "Internal server error"}),
        )

    return app_instance


# Create app instance for uvicorn
app = create_app()
