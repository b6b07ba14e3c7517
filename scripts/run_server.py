# run_server.py

import argparse

import uvicorn

from busroute.api import create_app
from busroute.api.dependencies import get_settings


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the bus route optimizer API.")
    parser.add_argument("--host", type=str, default="0.0.0.0", help="Host interface to bind.")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    uvicorn.run(create_app(get_settings()), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
