"""
Mindfresh Main Application

Runs the video search relay, the only server-side piece of Mindfresh. The
recommendation core itself is embedded in the client and has no entry point.
"""

import uvicorn
from dotenv import load_dotenv

from .api.relay import create_relay_app
from .config import MindfreshConfig
from .utils.logging_config import get_logger, setup_logging


def main() -> None:
    """Load .env, configure logging and serve the relay."""
    load_dotenv()
    config = MindfreshConfig.from_env()

    setup_logging(log_dir=config.log_dir, log_level=config.log_level)
    logger = get_logger(__name__)

    if not config.youtube_api_key:
        logger.warning("YOUTUBE_API_KEY is not set; video searches will fail with 500")

    logger.info("Starting video relay", host=config.relay_host, port=config.relay_port)
    uvicorn.run(
        create_relay_app(config),
        host=config.relay_host,
        port=config.relay_port,
        log_config=None
    )


if __name__ == "__main__":
    main()
