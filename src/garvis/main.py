"""
Garvis HTTP API

FastAPI application exposing health, agent introspection and request execution.

    uvicorn --factory garvis.main:create_app
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from . import __version__
from .api import agents_router, health_router
from .config import Settings, load_settings
from .core.agent_manager import AgentManager
from .factory import build_agent_manager
from .logger import setup_logging


def create_app(
    settings: Optional[Settings] = None,
    agent_manager: Optional[AgentManager] = None,
) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        settings: Application settings (loaded from the environment when omitted)
        agent_manager: Pre-built manager (built by the factory when omitted)
    """
    settings = settings or load_settings()
    if agent_manager is None:
        setup_logging(settings)
        agent_manager = build_agent_manager(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize agents on startup, clean them up on shutdown."""
        await agent_manager.initialize_all_agents()
        yield
        await agent_manager.cleanup_all_agents()

    app = FastAPI(
        title="Garvis AI Assistant API",
        version=__version__,
        description="""
    Garvis AI Assistant API

    Routes text requests to the first registered agent whose keywords match:
    - **InfoRetrieval**: questions and information
    - **TaskManager**: per-user todo lists
    - **CodeHelper**: programming assistance
    """,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.agent_manager = agent_manager

    app.include_router(health_router)
    app.include_router(agents_router)

    return app
