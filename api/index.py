import logging

from cinemax.core.config import get_settings
from cinemax.main import app

# Setup basic logging to capture errors in Vercel Logs
logging.basicConfig(level=get_settings().log_level.upper())
logger = logging.getLogger(__name__)

logger.info("Vercel api/index.py initialized")

# This is the entry point for Vercel Serverless Functions
# It exports the FastAPI app instance
