"""A small greeting service with hello and goodbye routes."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from flask import Flask, Response

MAX_AGE = 255


def _text(body: str) -> Response:
    return Response(body, mimetype="text/plain")


def create_app() -> Flask:
    """Build the greeting service; ages outside 0 to 255 match no route."""
    app = Flask(__name__)

    @app.get("/")
    def index() -> Response:
        return _text("Hello, world!")

    @app.get(f"/hello/<name>/<int(max={MAX_AGE}):age>")
    def hello(name: str, age: int) -> Response:
        return _text(f"Hello, {age} year old named {name}")

    @app.get(f"/bye/<name>/<int(max={MAX_AGE}):age>")
    def bye(name: str, age: int) -> Response:
        return _text(f"Goodbye, {age} year old named {name}")

    return app


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Serve the greeting service."""
    parser = argparse.ArgumentParser(prog="taskboard-greeting", description="Serve greetings.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())