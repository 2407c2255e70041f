"""Run the API with uvicorn: ``python -m projectboard``."""
import uvicorn

from projectboard.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "projectboard.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
