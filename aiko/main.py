"""Main application entry point.

Runs FastAPI with the NiceGUI chat page mounted, on a single port.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Application entry point.

    Validates the completion configuration up front so a missing API key
    fails at startup rather than on the first page load.
    """
    import uvicorn
    from nicegui import ui

    from aiko.api.app import create_app
    from aiko.completion.client import get_completion_client
    from aiko.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    client = get_completion_client()
    logger.info(f"Using model {client.config.model_name} at {client.config.base_url}")

    app = create_app()
    ui.run_with(app, title="Aiko AI Chatbot", favicon="💋")

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Chat UI available at http://localhost:{port}/")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
