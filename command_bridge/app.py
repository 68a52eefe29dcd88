from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from typing import Any, AsyncGenerator, Optional
from contextlib import asynccontextmanager
import logging

import command_bridge
from .commands.executor.command_executor import CommandExecutor
from .commands.registry.command_registry import CommandRegistry
from .config.settings import BridgeSettings
from .models.responses import HealthCheckResponse
from .routers import commands
from .startup import on_startup

# Configure logging at module level
logging.basicConfig(
    level=logging.WARNING,  # Set default to WARNING for all loggers
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)

# Keep third-party loggers at INFO or WARNING to reduce noise
logging.getLogger("uvicorn.access").setLevel(logging.INFO)
logging.getLogger("uvicorn.error").setLevel(logging.INFO)
logging.getLogger("asyncio").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


def create_app(settings: Optional[BridgeSettings] = None) -> FastAPI:
    """
    Build the FastAPI application serving the command boundary.

    The command registry is built and the startup hook runs inside the
    lifespan, so no request can reach a command before both have finished.
    A failing startup hook aborts startup.
    """
    settings = settings or BridgeSettings.from_env()

    logging.getLogger("command_bridge").setLevel(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[Any, Any]:
        registry = CommandRegistry(fs_root=settings.fs_root)
        on_startup(registry)
        app.state.executor = CommandExecutor(registry)
        yield
        logger.info(
            f"Command bridge shutting down: {app.state.executor.get_execution_metrics()}"
        )
        app.state.executor = None

    app = FastAPI(
        lifespan=lifespan,
        title="Command Bridge",
        description="Command dispatch backend for a desktop application frontend",
        version=command_bridge.__version__,
    )
    app.state.settings = settings

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(commands.router)

    @app.get("/")
    async def root() -> dict[str, Any]:
        return {
            "message": "Welcome to the Command Bridge API",
            "version": command_bridge.__version__,
            "docs_url": "/docs",
            "endpoints": {"commands": "/commands/", "health": "/healthz"},
        }

    @app.get("/healthz", response_model=HealthCheckResponse)
    async def health_check(request: Request) -> HealthCheckResponse:
        executor = getattr(request.app.state, "executor", None)
        return HealthCheckResponse(
            status="ok" if executor is not None else "starting",
            version=command_bridge.__version__,
            commands=len(executor.registry) if executor is not None else 0,
        )

    return app


app = create_app()
