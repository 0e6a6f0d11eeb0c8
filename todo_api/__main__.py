import uvicorn

from todo_api.config import get_settings
from todo_api.core.logging import setup_logging
from todo_api.main import create_app


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
