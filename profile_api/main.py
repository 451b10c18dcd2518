# profile_api/main.py
from __future__ import annotations
import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .database import check_connection, engine

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Unreachable store at startup is fatal: the error propagates and the server exits
    try:
        check_connection(engine)
    except Exception:
        logger.exception("Cannot reach store at startup")
        raise
    logger.info("%s started", settings.app_name)
    yield
    # let in-flight requests finish before the pool goes away
    await asyncio.sleep(settings.shutdown_grace_seconds)
    engine.dispose()
    logger.info("Store connections closed; %s shutting down", settings.app_name)


app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- error envelopes: every failure answers {"error": ...} ---
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = []
    for err in exc.errors():
        field = ".".join(str(loc) for loc in err["loc"] if loc != "body")
        details.append({"field": field or None, "issue": err["msg"]})
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request body", "details": details},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


from .routes import profile as profile_routes
from .routes import projects as projects_routes
from .routes import skills as skills_routes
from .routes import search as search_routes

app.include_router(profile_routes.router)
app.include_router(projects_routes.router)
app.include_router(skills_routes.router)
app.include_router(search_routes.router)

@app.get("/health")
def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
