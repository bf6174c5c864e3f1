#!/usr/bin/env python3
"""
Marcella Health Website
=======================
Entry point for the web server.

Usage:
    python main.py
"""

import logging

import uvicorn

import config

# Setup logging
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, config.LOG_LEVEL),
)
logger = logging.getLogger(__name__)

# Suppress httpx logging (Supabase requests carry the API key header)
logging.getLogger("httpx").setLevel(logging.WARNING)


def main():
    """Start the web server."""
    # Validate configuration
    if not config.SUPABASE_URL:
        raise ValueError("SUPABASE_URL not set in .env file")
    if not config.SUPABASE_KEY:
        raise ValueError("SUPABASE_KEY not set in .env file")

    logger.info(f"Contact submissions go to table '{config.CONTACTS_TABLE}'")
    logger.info(f"Starting Marcella Health website on http://{config.HOST}:{config.PORT}")
    uvicorn.run("api.main:app", host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
