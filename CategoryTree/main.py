from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from CategoryTree import __version__
from CategoryTree.routers import categories_routes
from CategoryTree.database.db import create_db_and_tables
from CategoryTree.handlers.exception_handlers import register_exception_handlers
from CategoryTree.utils.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting up...")
    # Run the database setup
    create_db_and_tables()
    logger.info("Database tables ready")
    yield
    logger.info("Shutting down...")


app = FastAPI(
    title="CategoryTree API",
    description="Hierarchical category management for e-commerce catalogs",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(categories_routes.router, prefix="/api/v1/category", tags=["categories"])


@app.get("/")
async def root():
    return {"message": "Welcome to CategoryTree API", "version": __version__}


if __name__ == "__main__":
    logger.info(f"Application is running at: http://{settings.host}:{settings.port}")
    uvicorn.run("CategoryTree.main:app", host=settings.host, port=settings.port)
