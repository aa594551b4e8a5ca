"""Entry point for the Rental Registry API server.

Configuration such as the database path and log level is read from
environment variables (see ``rental_registry_api.app.core.config``).
Host and port are read from ``API_HOST`` and ``API_PORT``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from rental_registry_api.app.main import app


async def run_api() -> None:
    """Serve the API using Uvicorn.

    Defaults are ``0.0.0.0`` and ``8000``.
    """
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


async def main() -> None:
    try:
        await run_api()
    except Exception:
        logging.exception("Rental Registry API stopped with an error")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
