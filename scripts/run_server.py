"""Entrypoint for launching the reference Polar Conversion Service."""
from __future__ import annotations

import argparse
import logging

import uvicorn


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the reference Polar Conversion Service.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=3000)
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO)
    uvicorn.run("polarlab.server.app:app", host=args.host, port=args.port, reload=False)


if __name__ == "__main__":
    main()
