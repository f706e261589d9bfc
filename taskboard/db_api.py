"""HTTP service for tasks stored in a database, with the page and auth views."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from flask import Blueprint, Flask, Response, g, jsonify, request

from taskboard.config import Config
from taskboard.content import DEFAULT_TEMPLATES_DIR, PathLike, render_items_page
from taskboard.database import Database, DatabaseUnavailable
from taskboard.items import TaskItem, TaskItems
from taskboard.status import TaskStatus
from taskboard.tasks import to_do_factory


@dataclass(frozen=True)
class JwToken:
    """The token a client sends in the "token" header."""

    message: str

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> JwToken:
        """Take the token header, or a placeholder message when it is absent."""
        value = headers.get("token")
        return cls(value if value is not None else "nothing found")


def _text(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype="text/plain")


def _current_items(database: Database) -> Response:
    tasks = [
        to_do_factory(item.title, TaskStatus.from_string(item.status))
        for item in database.load_items()
    ]
    return jsonify(TaskItems.from_items(tasks).to_dict())


def _auth_blueprint() -> Blueprint:
    auth = Blueprint("auth", __name__, url_prefix="/v1/auth")

    @auth.get("/login")
    def login() -> Response:
        return _text("Login view")

    @auth.get("/logout")
    def logout() -> Response:
        return _text("Logout view")

    return auth


def _item_blueprint(database: Database) -> Blueprint:
    items = Blueprint("items", __name__, url_prefix="/v1/item")

    @items.get("/get")
    def get() -> Response:
        return _current_items(database)

    @items.post("/create/<title>")
    def create(title: str) -> Response:
        database.create(title)
        return _current_items(database)

    @items.post("/edit")
    def edit():
        try:
            body = TaskItem.from_json(request.get_json(silent=True))
        except ValueError as error:
            return jsonify(str(error)), 400
        g.token = JwToken.from_headers(request.headers)
        database.mark_done(body.title)
        return _current_items(database)

    @items.post("/delete")
    def delete():
        try:
            body = TaskItem.from_json(request.get_json(silent=True))
        except ValueError as error:
            return jsonify(str(error)), 400
        g.token = JwToken.from_headers(request.headers)
        try:
            database.delete(body.title)
        except KeyError:
            return jsonify(f"{body.title} not found"), 404
        return _current_items(database)

    return items


def _page_blueprint(templates_dir: PathLike) -> Blueprint:
    page = Blueprint("page", __name__)

    @page.get("/")
    def items() -> Response:
        return Response(
            render_items_page(templates_dir),
            content_type="text/html; charset=utf-8",
        )

    return page


def create_app(database: Database, templates_dir: PathLike = DEFAULT_TEMPLATES_DIR) -> Flask:
    """Build the service over the given database, allowing requests from any origin."""
    app = Flask(__name__)
    app.register_blueprint(_auth_blueprint())
    app.register_blueprint(_item_blueprint(database))
    app.register_blueprint(_page_blueprint(templates_dir))

    @app.before_request
    def _record_request() -> None:
        g.request_line = f"{request.method} {request.full_path}"
        print(g.request_line)

    @app.after_request
    def _allow_any_origin(response: Response) -> Response:
        origin = request.headers.get("Origin")
        if origin:
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Vary"] = "Origin"
            method = request.headers.get("Access-Control-Request-Method")
            if method:
                response.headers["Access-Control-Allow-Methods"] = method
            wanted = request.headers.get("Access-Control-Request-Headers")
            if wanted:
                response.headers["Access-Control-Allow-Headers"] = wanted
        return response

    @app.errorhandler(DatabaseUnavailable)
    def _unavailable(error: DatabaseUnavailable) -> Response:
        return _text(str(error), 503)

    return app


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Serve the database-backed task service configured by a YAML file."""
    parser = argparse.ArgumentParser(prog="taskboard-db", description="Serve the task service.")
    parser.add_argument("config", help="path of the YAML configuration file")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--templates", default=DEFAULT_TEMPLATES_DIR)
    args = parser.parse_args(argv)
    try:
        database = Database.from_config(Config.from_file(args.config))
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    create_app(database, args.templates).run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())