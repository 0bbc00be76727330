"""
Configuration for the printer admin web interface.

Values come from the environment (optionally via a .env file next to this
module). The printer's driver capabilities are not configured here; they
come from the printer profile (modules/printer_profiles.py) or from the
persisted state file.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file early so environment variables are available for Config class
load_dotenv(override=True)

# Base directory (where this file lives)
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Default configuration for the Flask application."""

    # Flask settings
    SECRET_KEY = os.environ.get("FLASK_SECRET_KEY", "dev-secret-key")
    SESSION_COOKIE_NAME = "printer_admin_session"
    ENVIRONMENT = os.environ.get("FLASK_ENV", "development")

    # Debug mode
    DEBUG = os.environ.get("FLASK_DEBUG", "1") == "1"

    # ==========================================================================
    # Printer
    # ==========================================================================
    # PRINTER_RESOURCE_ROOT: path prefix for every printer page, e.g.
    #   "/ipp/print/office" in multi-queue deployments. Empty = site root.
    #
    # MULTI_QUEUE: when true, page titles include the printer name and a
    #   navigation bar links the printer's pages.
    #
    # PRINTER_STATE_FILE: JSON file holding identity, defaults and ready
    #   media. Empty = keep everything in memory.
    # ==========================================================================
    PRINTER_NAME = os.environ.get("PRINTER_NAME", "Label Printer")
    PRINTER_RESOURCE_ROOT = os.environ.get("PRINTER_RESOURCE_ROOT", "").rstrip("/")
    MULTI_QUEUE = os.environ.get("PRINTER_MULTI_QUEUE", "0") == "1"
    PRINTER_STATE_FILE = os.environ.get(
        "PRINTER_STATE_FILE", str(BASE_DIR / "data" / "printer.json")
    )
    MAX_COMPLETED_JOBS = int(os.environ.get("PRINTER_MAX_COMPLETED_JOBS", "100"))
    VERSION_STRING = os.environ.get("PRINTER_VERSION_STRING", "1.0.0")


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = 3600  # 1 hour


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    TESTING = False


class TestingConfig(Config):
    """Testing configuration."""
    DEBUG = False
    TESTING = True
    SECRET_KEY = "testing-secret-key"
    PRINTER_STATE_FILE = ""
    PRINTER_RESOURCE_ROOT = ""
    MULTI_QUEUE = False
