from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from watertrack.config import Config
from watertrack.db import Base, engine
from watertrack import models  # noqa: F401  registers tables on Base
from watertrack.routers import user_router, category_router, device_router, usage_router, bill_router, metrics_router, simulation_router
from watertrack.services.storage_service import ensure_upload_dir, PUBLIC_PREFIX
from watertrack.utils.logging_utils import get_logger

logger = get_logger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting WaterTrack backend")
    try:
        ensure_upload_dir()
        Base.metadata.create_all(bind=engine)
    except Exception:
        # No database, no server
        logger.exception("Unable to initialise storage, aborting startup")
        raise
    logger.info("Database synchronized successfully")

    yield

    logger.info("Shutting down")


app = FastAPI(
    title="WaterTrack API",
    description="Household water usage, devices and bills.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials="*" not in Config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Errors
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg"),
        }
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"message": "Validation failed", "details": details})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


# Register routers
app.include_router(user_router)
app.include_router(category_router)
app.include_router(device_router)
app.include_router(usage_router)
app.include_router(bill_router)
app.include_router(metrics_router)
app.include_router(simulation_router)

# Bill photos
app.mount(PUBLIC_PREFIX, StaticFiles(directory=Config.UPLOAD_DIR, check_dir=False), name="uploads")


@app.get("/")
def root():
    return {"message": "Water Management App Backend Running!"}


@app.get("/health")
def health():
    return {"status": "healthy"}
