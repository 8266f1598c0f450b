"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from catalog_manager.config import settings

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
from catalog_manager.exceptions import CatalogError
from catalog_manager.models.database import SessionLocal, create_tables
from catalog_manager.services.workspace import CatalogWorkspace
from catalog_manager.api import products, categories, history, editor

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: tests may install their own workspace beforehand
    if getattr(app.state, "workspace", None) is None:
        create_tables()
        app.state.workspace = CatalogWorkspace(SessionLocal)

    yield

    # Shutdown (nothing needed, every change is already stored)


app = FastAPI(
    title="Catalog Manager",
    description="Manage WooCommerce products with auto-save and export to CSV for bulk import",
    version=VERSION,
    lifespan=lifespan,
)

# Include routers
app.include_router(products.router, prefix="/products", tags=["Products"])
app.include_router(categories.router, prefix="/categories", tags=["Categories"])
app.include_router(history.router, prefix="/history", tags=["History"])
app.include_router(editor.router, prefix="/editor", tags=["Editor"])


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    """Report a rejected action to the client."""
    logger.info(f"{request.method} {request.url.path} rejected: {exc.code}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
    )


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": VERSION}


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Catalog Manager",
        "version": VERSION,
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
