"""
app/main.py

Purpose: Application entry point

- Builds the FastAPI app (store -> service -> controller)
- Loads configuration and logging
- Registers API routes and exception handlers
- No business logic should be written here
- Manages application lifecycle (startup/shutdown)
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import time

from app.core.config import settings, validate_settings
from app.core.errors import add_exception_handlers
from app.core.logging import setup_logging, get_logger
from app.db.store import UserStore
from app.services.user_service import UserService
from app.api.user_controller import UserController
from app.api import users

# Initialize logging first
setup_logging()
logger = get_logger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info("🚀 Starting Users API...")

    try:
        logger.info("Validating configuration...")
        validate_settings()
        logger.info("✅ Configuration validated")

        await app.state.store.connect()

        logger.info("🎉 Users API started successfully!")
        logger.info(f"Environment: {settings.ENVIRONMENT}")
        logger.info(f"Debug Mode: {settings.DEBUG}")

    except Exception as e:
        logger.critical(f"Failed to start application: {str(e)}", exc_info=True)
        raise

    yield  # Application runs here

    logger.info("🛑 Shutting down Users API...")

    try:
        await app.state.store.disconnect()
        logger.info("👋 Users API shut down successfully")

    except Exception as e:
        logger.error(f"Error during shutdown: {str(e)}", exc_info=True)


def create_app(store: Optional[UserStore] = None) -> FastAPI:
    """
    Builds the application around the given store (a fresh seeded one by default).

    The store is connected on startup and disconnected on shutdown.
    """
    app = FastAPI(
        title="Users API",
        description="Users REST API with an in-memory store",
        version=API_VERSION,
        lifespan=lifespan,
        debug=settings.DEBUG,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    app.state.store = store if store is not None else UserStore()
    app.state.user_service = UserService(app.state.store)
    app.state.user_controller = UserController(app.state.user_service)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Add processing time header and an access log line to every response."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)

        context = {
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "process_time": process_time,
        }
        if process_time > settings.SLOW_REQUEST_SECONDS:
            logger.warning(f"Slow request detected: {request.method} {request.url.path}", extra=context)
        else:
            logger.info(f"{request.method} {request.url.path} {response.status_code}", extra=context)

        return response

    add_exception_handlers(app)

    app.include_router(users.router, prefix=settings.API_PREFIX, tags=["Users"])

    @app.get("/", tags=["Info"])
    async def root():
        """Root endpoint - basic info."""
        prefix = settings.API_PREFIX
        return {
            "success": True,
            "message": "Users REST API",
            "version": API_VERSION,
            "endpoints": {
                "health": f"GET {prefix}/health",
                "users": {
                    "getAll": f"GET {prefix}/users",
                    "getById": f"GET {prefix}/users/:id",
                    "create": f"POST {prefix}/users",
                    "update": f"PUT {prefix}/users/:id",
                    "delete": f"DELETE {prefix}/users/:id",
                    "stats": f"GET {prefix}/users/stats",
                },
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower()
    )
