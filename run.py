"""Entry point for serving the Dining Review API.

Host, port and the database location are read from the environment
(``HOST``, ``PORT``, ``DATABASE_URL``).  See ``core/config.py`` for the
full list.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from dining_review_api.app.core.config import settings
from dining_review_api.app.main import app


async def main() -> None:
    """Serve the API with Uvicorn until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
