from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dronepath import __version__
from dronepath.config import settings
from dronepath.observability.logging import configure_logging
from dronepath.api.routes_health import router as health_router
from dronepath.api.routes_routes import router as routes_router

configure_logging()
logger = logging.getLogger("dronepath")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting DronePath planner API")
    logger.info(f"   Environment: {settings.environment}")
    logger.info(
        f"   Defaults: policy={settings.default_policy} margin={settings.safety_margin_m} "
        f"max_step={settings.max_step_m} close_loop={settings.close_loop}"
    )
    yield
    logger.info("Shutting down...")


app = FastAPI(
    title="DronePath Planner API",
    version=__version__,
    lifespan=lifespan,
)


@app.get("/")
def root():
    return {
        "name": "DronePath Planner API",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
    }


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(health_router)
app.include_router(routes_router)


def run():
    import uvicorn

    uvicorn.run("dronepath.main:app", host=settings.backend_host, port=settings.backend_port)


if __name__ == "__main__":
    run()
