"""Run the CampusConnect backend with uvicorn."""

import uvicorn

from campusconnect.api.app import create_app
from campusconnect.config import Settings
from campusconnect.logging import setup_logging


def main() -> None:
    setup_logging()
    settings = Settings.from_env()
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
