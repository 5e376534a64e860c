"""HTTP front end for the address parser."""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .logging_config import logger, setup_logging
from .routes import addresses, health

setup_logging()
settings = get_settings()
app = FastAPI(title=settings.app_name, version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger.info("app.start", ipv6_padded=settings.ipv6_padded)


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    logger.warning("value.error", path=str(request.url), reason=str(exc))
    return JSONResponse(status_code=400, content={"error_code": "VALUE_ERROR", "message": str(exc)})


app.include_router(health.router)
app.include_router(addresses.router)


@app.get("/", include_in_schema=False)
async def root() -> JSONResponse:  # pragma: no cover - simple endpoint
    return JSONResponse({"message": f"{settings.app_name} is running."})
