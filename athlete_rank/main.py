"""Application entry point."""

import logging
import uvicorn

from athlete_rank.config import Config
from athlete_rank.app import create_app

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


def main():
    """Run the ranking API with configuration from the environment."""
    config = Config.from_env()
    logger.info(
        f"Serving on {config.host}:{config.port}, document API "
        f"{config.document_api_url} (data source {config.document_data_source}, "
        f"database {config.document_database})"
    )
    if not config.document_api_key:
        logger.warning("DOCUMENT_API_KEY is not set; requests to the document API are unauthenticated")
    
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
    )


if __name__ == "__main__":
    main()
