"""Entry point for serving the DocStore API.

Host, port and TLS options come from the application settings, which
are read from environment variables and from the dotenv files in the
``environments`` directory (see ``docstore_api.app.core.config``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from docstore_api.app.core.config import get_settings
from docstore_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn."""
    settings = get_settings()
    options = {}
    if settings.enable_https:
        options = {"ssl_certfile": settings.cert_file, "ssl_keyfile": settings.key_file}
    config = Config(
        app=app,
        host=settings.server_host,
        port=settings.server_port,
        reload=False,
        access_log=False,
        log_level=settings.log_level.lower(),
        **options,
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    try:
        await run_api()
    except Exception:
        logging.exception("DocStore API stopped with an error")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
