import logging

from flask.cli import load_dotenv

from pwguard.app import create_app
from pwguard.config.app_config import AppConfig

load_dotenv()
logger = logging.getLogger(__name__)


if __name__ == "__main__":
    config = AppConfig.from_env()

    try:
        app = create_app(config)
        logger.info(
            f"Starting Pwguard server on {config.host}:{config.port} with debug={config.debug}"
        )
        app.run(host=config.host, port=config.port, debug=config.debug)

    except KeyboardInterrupt:
        logger.error("Received keyboard interrupt, shutting down...")

    except Exception as e:
        logger.error(f"An unexpected error occurred: {e}", exc_info=True)
        raise
