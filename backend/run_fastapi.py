"""
Main entry point for the messaging API.

Usage:
    python run_fastapi.py

Host, port, reload and log level come from the settings profile selected by
ENVIRONMENT (messaging.config.settings.get_config).

Or with uvicorn directly:
    uvicorn messaging.fastapi_app:create_app --factory --host 0.0.0.0 --port 8000
"""

import io
import os
import sys

# Set UTF-8 encoding for stdout/stderr to handle Unicode characters on Windows
if sys.platform == "win32":
    sys.stdout = io.TextIOWrapper(
        sys.stdout.buffer, encoding="utf-8", errors="replace", line_buffering=True
    )
    sys.stderr = io.TextIOWrapper(
        sys.stderr.buffer, encoding="utf-8", errors="replace", line_buffering=True
    )

os.environ["PYTHONIOENCODING"] = "utf-8"

import uvicorn

from messaging.config.settings import get_config

APP_FACTORY = "messaging.fastapi_app:create_app"


def main(env=None):
    config = get_config(env)

    print(f"Starting messaging API in {config.ENVIRONMENT} mode...")
    print(f"Server running on http://{config.HOST}:{config.PORT}")
    print(f"API docs available at http://{config.HOST}:{config.PORT}/docs")

    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=config.HOST,
        port=config.PORT,
        reload=config.DEBUG,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
