from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import IntegrityError
from contextlib import asynccontextmanager
import logging
import os

from tourops.api import routes, segments, accommodations, logistics, participants, transfers, transactions, health
from tourops.config import get_settings
from tourops.database import engine, Base
from tourops.services.errors import PlannerError
import tourops.models  # noqa: F401  registers every table on Base.metadata

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.app_name} ({settings.env})")

    if settings.database_url.startswith("sqlite"):
        logger.info("SQLite detected - creating tables if needed")
        os.makedirs("./data", exist_ok=True)
        Base.metadata.create_all(bind=engine)

    yield

    logger.info(f"Shutting down {settings.app_name}")


app = FastAPI(
    title=settings.app_name,
    description="Route planning for multi-day tours: segments, stays, logistics, transfers and payments",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


@app.exception_handler(PlannerError)
async def planner_error_handler(request: Request, exc: PlannerError):
    logger.debug(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = jsonable_encoder(exc.errors())
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    message = f"{field}: {first.get('msg')}" if field else first.get("msg", "Invalid request")
    return JSONResponse(status_code=400, content={"message": message, "errors": errors})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        message = "Method not allowed"
    else:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(status_code=exc.status_code, content={"message": message}, headers=exc.headers)


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"{request.method} {request.url.path} rejected by the database: {exc.orig}")
    return JSONResponse(status_code=400, content={"message": "Invalid reference or constraint violation"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


app.include_router(health.router, tags=["health"])
app.include_router(routes.router, prefix="/routes", tags=["routes"])
app.include_router(segments.router, prefix="/routes", tags=["segments"])
app.include_router(accommodations.router, prefix="/routes", tags=["accommodations"])
app.include_router(logistics.router, prefix="/routes", tags=["logistics"])
app.include_router(participants.router, prefix="/routes", tags=["participants"])
app.include_router(transfers.router, prefix="/routes", tags=["transfers"])
app.include_router(transactions.router, prefix="/routes", tags=["transactions"])


@app.get("/ping")
async def ping():
    """Simple ping endpoint for health checks."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
