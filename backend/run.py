"""Run the Strategy Grader backend server."""
import uvicorn
from backend.config import BACKEND_HOST, BACKEND_PORT, BACKEND_RELOAD, LOG_FORMAT
from grader.cli import configure_logging

if __name__ == "__main__":
    configure_logging(json_logs=LOG_FORMAT == "json")
    uvicorn.run("backend.main:app", host=BACKEND_HOST, port=BACKEND_PORT, reload=BACKEND_RELOAD, log_config=None)
