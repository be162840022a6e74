"""Command-line entry point serving the leaderboard over uvicorn."""

import logging
import uvicorn

from leaderboard_api.config import Config
from leaderboard_api.app import create_app

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


def main():
    """Serve the leaderboard API using settings from the environment."""
    config = Config.from_env()
    logger.info(
        f"Serving leaderboard from {config.csv_path} on {config.host}:{config.port} "
        f"(progress out of {config.max_courses} courses)"
    )
    
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
    )


if __name__ == "__main__":
    main()
