"""FastAPI application entrypoint. No business logic; only wiring, error rendering and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.v1 import router as v1_router
from app.core.config import settings
from app.core.errors import AppError, Unauthenticated
from app.services.attachments import get_attachment_store

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Fabric Back Office API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthenticated) else None
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        field = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        message = f"{field}: {errors[0].get('msg')}" if field else str(errors[0].get("msg"))
    return JSONResponse(status_code=400, content={"message": message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # Only routing and static files raise HTTPException; application 404s are NotFound.
    # A known path with the wrong method is still an unmatched route.
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"message": "Route Not Found"})
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Server error"})


app.include_router(v1_router, prefix=settings.API_PREFIX)


class UploadFiles(StaticFiles):
    """Serves the attachment store, which may not exist until the first upload."""

    async def check_config(self) -> None:
        if self.directory is not None and not os.path.isdir(self.directory):
            return
        await super().check_config()


# Attachments are public: anyone holding the URL can fetch the file.
app.mount(
    settings.UPLOAD_URL_PREFIX,
    UploadFiles(directory=get_attachment_store().directory, check_dir=False),
    name="uploads",
)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Fabric Back Office API"}
