import logging
import sqlite3
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jobtracker import __version__
from jobtracker.config import settings
from jobtracker.database import init_db
from jobtracker.routers import calendar, export, jobs, session, views

logger = logging.getLogger("jobtracker")


def configure_logging():
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # Startup: create or migrate the schema, then integrity-check it
    try:
        init_db()
        conn = sqlite3.connect(str(settings.db_path))
        result = conn.execute("PRAGMA integrity_check").fetchone()
        conn.close()
        if result and result[0] == "ok":
            logger.info("Database ready at %s", settings.db_path)
        else:
            logger.error("DATABASE INTEGRITY CHECK FAILED: %s", result)
    except Exception as exc:
        logger.error("Could not initialise database: %s", exc)
    yield


app = FastAPI(
    title="Job Tracker",
    description="Personal job-application tracker",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        logger.error("Malformed JSON body on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Server error"})
    detail = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in errors
    ]
    return JSONResponse(status_code=400, content={"detail": detail})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Server error"})


app.include_router(session.router, prefix=settings.api_prefix)
app.include_router(jobs.router, prefix=settings.api_prefix)
app.include_router(calendar.router, prefix=settings.api_prefix)
app.include_router(views.router, prefix=settings.api_prefix)
app.include_router(export.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "ok", "version": __version__}
