from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
import logging

from app import config
from app.routes import auth, store, products, public
from app.database import engine, Base
from app.errors import AppError

# Import all models to ensure they are registered with SQLAlchemy
from app.db.models import User, Store, Product

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Only create tables automatically in dev, not production
if config.ENV == "development":
    logger.info("Development mode: creating tables if they don't exist")
    Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Storefront Backend",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# Configure logging to show API requests
logging.getLogger("uvicorn.access").setLevel(logging.INFO)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[config.CLIENT_ORIGIN],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"field": ".".join(str(part) for part in error["loc"][1:]), "message": error["msg"]}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"detail": "Invalid request.", "errors": errors})

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error."})

app.include_router(auth.router)
app.include_router(store.router)
app.include_router(products.router)
app.include_router(public.router)

@app.get("/health")
def health():
    """Health check endpoint for Docker health checks"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected"}
    except Exception:
        logger.exception("Health check failed")
        return {"status": "unhealthy", "database": "disconnected"}
