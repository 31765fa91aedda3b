"""
FastAPI application exposing the archive-aware file tree.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from filetree.api.routers import router as api_router
from filetree.config.settings import settings

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Create FastAPI app
app = FastAPI(title="File Tree API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)
app.include_router(api_router)
