"""
Configuration settings for the Marcella Health website
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Base directory
BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

# Server
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "")

# Supabase settings
SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_KEY = os.getenv("SUPABASE_KEY", "")
CONTACTS_TABLE = os.getenv("CONTACTS_TABLE", "Marcella Health Website contacts")

# Contact form
CONTACT_RATE_WINDOW_SECONDS = int(os.getenv("CONTACT_RATE_WINDOW_SECONDS", "60"))
CONTACT_RATE_MAX_PER_WINDOW = int(os.getenv("CONTACT_RATE_MAX_PER_WINDOW", "5"))
FORM_SESSION_TTL_SECONDS = int(os.getenv("FORM_SESSION_TTL_SECONDS", "3600"))

# Page behaviour
SCROLL_THRESHOLD_PX = 50
HEADER_OFFSET_PX = 100  # Height of the fixed header
STAGE_INTERVAL_MS = 2000

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
