# products_api/main.py
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .config import get_settings
from .exceptions import (
    NotFoundError, UnsupportedApiVersionError, UnsupportedOperationError, ValidationError,
)
from .logger import logger, setup_logger
from .routes import build_router
from .versioning import SUPPORTED_VERSIONS

settings = get_settings()
setup_logger(level=settings.log_level)

app = FastAPI(title=settings.app_title)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins_list(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------
# Versioned routes
# ---------------------------
# /api/v1/products, /api/v2/products: documented per version
for api_version in SUPPORTED_VERSIONS:
    app.include_router(build_router(api_version), prefix=f"/api/v{api_version.major}")
# /api/v2.0/products, unknown versions -> resolved from the segment
app.include_router(build_router(), prefix="/api/v{version}", include_in_schema=False)
# /api/products -> default version
app.include_router(build_router(), prefix="/api", include_in_schema=False)


# ---------------------------
# Error handlers (plain-text bodies)
# ---------------------------
def _plain_error(request: Request, status_code: int, message: str, **headers) -> PlainTextResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, status_code, message)
    return PlainTextResponse(message, status_code=status_code, headers=headers or None)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return _plain_error(request, 400, exc.message)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return _plain_error(request, 404, exc.message)


@app.exception_handler(UnsupportedApiVersionError)
async def unsupported_version_handler(request: Request, exc: UnsupportedApiVersionError):
    return _plain_error(request, 400, exc.message)


@app.exception_handler(UnsupportedOperationError)
async def unsupported_operation_handler(request: Request, exc: UnsupportedOperationError):
    return _plain_error(request, 405, exc.message, Allow=", ".join(exc.allowed_methods))


def run():
    uvicorn.run("products_api.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
