"""
HTTP entry point exposing classification, dispatch and the item list to a local UI.
"""

import logging

from fastapi import FastAPI

from quicklauncher import __version__
from quicklauncher.api.routers import router as api_router
from quicklauncher.config.settings import settings

# Create FastAPI app
app = FastAPI(title="QuickLauncher API", version=__version__)
app.include_router(api_router)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
