import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.applications import Starlette
from starlette.routing import Mount

from geosight.config import get_settings
from geosight.exceptions import (
    AuthenticationError,
    EmptyResponseError,
    InvalidInputError,
    MalformedResponseError,
    TransportError,
)
from geosight.logging_config import configure_logging
from geosight.mcp_server import mcp
from geosight.models.common import ErrorResponse, ServiceStatus
from geosight.routers.geolocate import router as geolocate_router


# --- FastAPI app ---

api = FastAPI(title="GeoSight", version="0.1.0")
api.include_router(geolocate_router)


@api.get("/api/status")
def api_status() -> ServiceStatus:
    settings = get_settings()
    configured = bool(settings.gemini_api_key)
    return ServiceStatus(
        model=settings.gemini_model,
        configured=configured,
        message="Ready" if configured else "Set GEMINI_API_KEY in .env",
    )


# --- Exception handlers ---

def _error_response(status_code: int, error_code: str, exc: Exception) -> JSONResponse:
    body = ErrorResponse(error_code=error_code, message=str(exc))
    return JSONResponse(status_code=status_code, content=body.model_dump())


@api.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    return _error_response(400, "invalid_input", exc)


@api.exception_handler(AuthenticationError)
async def auth_error_handler(request: Request, exc: AuthenticationError):
    return _error_response(401, "auth_error", exc)


@api.exception_handler(TransportError)
async def transport_error_handler(request: Request, exc: TransportError):
    return _error_response(502, "transport_error", exc)


@api.exception_handler(EmptyResponseError)
async def empty_response_handler(request: Request, exc: EmptyResponseError):
    return _error_response(502, "empty_response", exc)


@api.exception_handler(MalformedResponseError)
async def malformed_response_handler(request: Request, exc: MalformedResponseError):
    return _error_response(502, "malformed_response", exc)


# --- Starlette root app ---

mcp_app = mcp.http_app(path="/", stateless_http=True)

app = Starlette(
    routes=[
        Mount("/mcp", app=mcp_app),
        Mount("/", app=api),
    ],
    lifespan=mcp_app.lifespan,
)


def run():
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "geosight.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
