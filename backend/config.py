"""Backend-specific configuration."""
import os
from dotenv import load_dotenv

load_dotenv()

APP_NAME = "Strategy Grader API"
APP_VERSION = "0.1.0"
ALLOWED_ORIGINS = [
    o.strip() for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",") if o.strip()
]
BACKEND_HOST = os.getenv("BACKEND_HOST", "0.0.0.0")
BACKEND_PORT = int(os.getenv("BACKEND_PORT", "8000"))
BACKEND_RELOAD = os.getenv("BACKEND_RELOAD", "false").lower() == "true"
LOG_FORMAT = os.getenv("LOG_FORMAT", "console").lower()
