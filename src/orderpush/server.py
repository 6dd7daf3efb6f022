"""Process entry point for the push server.

Usage:
    orderpush-server                 # host/port from HOST / PORT (default 0.0.0.0:3000)
    orderpush-server --port 8080
"""

import argparse

import uvicorn

from orderpush.app import create_app
from orderpush.config import Settings


def main(argv=None):
    settings = Settings()

    parser = argparse.ArgumentParser(description="Order push notification server")
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Listening port (default: {settings.port})")
    args = parser.parse_args(argv)

    settings = settings.model_copy(update={"host": args.host, "port": args.port})
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
