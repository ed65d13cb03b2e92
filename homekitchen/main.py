"""Main FastAPI application."""
from fastapi import FastAPI
from contextlib import asynccontextmanager

from homekitchen.core.config import settings
from homekitchen.core.logging import setup_logging
from homekitchen.api import health, menu, orders


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    setup_logging()
    yield


app = FastAPI(
    title=settings.app_name,
    description="Order intake for a home kitchen: parses pasted chat orders against the daily menu",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router, tags=["health"])
app.include_router(menu.router, tags=["menu"])
app.include_router(orders.router, tags=["orders"])


@app.get("/")
async def root():
    """Service info."""
    return {
        "message": f"{settings.app_name} API",
        "version": "0.1.0",
    }
