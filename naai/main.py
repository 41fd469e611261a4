"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from naai.api import auth, barber, shops
from naai.api.exception_handlers import register_exception_handlers
from naai.config import get_settings
from naai.database import Database, connection_error_hints

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Check the database on startup and release its connections on shutdown."""
    database: Database = app.state.database
    try:
        database.ping()
        logger.info("Database connected successfully")
    except SQLAlchemyError as e:
        # Keep serving; requests will fail with a 500 until the database is back
        logger.error(f"Database connection error: {e}")
        for hint in connection_error_hints(e):
            logger.error(hint)
    yield
    database.dispose()
    logger.info("Database connections released")


app = FastAPI(
    title="Naai API",
    description="Barbershop marketplace: accounts, shops and services",
    version="0.1.0",
    lifespan=lifespan,
)
app.state.database = Database(settings.database_url)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Register routers
app.include_router(auth.router)
app.include_router(shops.router)
app.include_router(barber.router)


@app.get("/")
def index():
    """Describe the API."""
    return {
        "message": "Welcome to the Naai API",
        "endpoints": {
            "POST /api/auth/signup": "Create a new user account",
            "POST /api/auth/login": "Login and get a bearer token",
            "GET /api/auth/me": "Get current user info (requires authentication)",
            "GET /api/shops": "Browse active shops (?city=, ?search=)",
            "GET /api/shops/{id}": "Get a shop with its services",
            "POST /api/shops": "Create your shop (barbers only)",
            "PUT /api/shops/{id}": "Update your shop (owner only)",
            "POST /api/shops/{id}/services": "Add a service to your shop (owner only)",
            "GET /api/barber/shop": "Get your own shop (barbers only)",
            "GET /api/health": "Health check endpoint",
        },
        "example": {
            "signup": {
                "method": "POST",
                "url": "/api/auth/signup",
                "body": {
                    "email": "user@example.com",
                    "password": "password123",
                    "name": "John Doe",
                    "role": "customer",
                },
            },
            "login": {
                "method": "POST",
                "url": "/api/auth/login",
                "body": {"email": "user@example.com", "password": "password123"},
            },
        },
    }


@app.get("/api/health")
def health_check():
    """Health check endpoint."""
    return {"status": "OK", "message": "Server is running"}


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run("naai.main:app", host=settings.host, port=settings.port, reload=False)
