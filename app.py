"""FastAPI application exposing plugin configuration validation."""

import logging
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv('.env')

# Configure logging BEFORE importing any modules that use logger
from pluginfw.constants import LOG_LEVEL, PORT

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Import after logging is configured
from fastapi import FastAPI

from pluginfw import __version__
from pluginfw.routers import plugins_router

# Create FastAPI app
app = FastAPI(
    title="Plugin Config Service",
    description="Validates plugin configuration documents",
    version=__version__
)

app.include_router(plugins_router)  # /api/plugins/* endpoints


@app.get("/")
async def root():
    return {"message": "Plugin Config Service API", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host="0.0.0.0", port=PORT, reload=True)
