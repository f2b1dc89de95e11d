from __future__ import annotations
import logging
import sys
import uvicorn
from pydantic import ValidationError
from repo_files.domain.exceptions import ConfigurationError
from repo_files.domain.value_objects import RepositoryReference
from repo_files.infrastructure.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Start the uvicorn ASGI server; exit early on unusable configuration."""
    try:
        settings = get_settings()
        RepositoryReference.from_string(settings.github_repository)
    except (ValidationError, ConfigurationError) as exc:
        logging.basicConfig(level=logging.ERROR)
        logger.error("Configuration error: %s", exc)
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    uvicorn.run(
        "repo_files.interface.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
