"""HTTP service for tasks kept in a JSON state file, and the auth views."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from flask import Blueprint, Flask, Response, current_app, jsonify, request

from taskboard.items import TaskItem, TaskItems
from taskboard.processes import process_input
from taskboard.state import DEFAULT_STATE_PATH, PathLike, read_file
from taskboard.status import TaskStatus
from taskboard.tasks import to_do_factory

_STATE_KEY = "TASKBOARD_STATE_PATH"


def _text(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype="text/plain")


def _state_path() -> PathLike:
    return current_app.config[_STATE_KEY]


def _current_items() -> Response:
    return jsonify(TaskItems.from_state(read_file(_state_path())).to_dict())


def _task_blueprint() -> Blueprint:
    tasks = Blueprint("tasks", __name__, url_prefix="/v1/item")

    @tasks.post("/create/<title>")
    def create(title: str) -> Response:
        state = read_file(_state_path())
        item = to_do_factory(title, TaskStatus.PENDING)
        process_input(item, "create", state, _state_path())
        return _text(f"{title} created")

    @tasks.post("/edit")
    def edit():
        try:
            body = TaskItem.from_json(request.get_json(silent=True))
        except ValueError as error:
            return jsonify(str(error)), 400
        state = read_file(_state_path())
        if body.title not in state:
            return jsonify(f"{body.title} not in state"), 404
        stored = TaskStatus.from_string(state[body.title])
        try:
            requested = TaskStatus.from_string(body.status)
        except ValueError as error:
            return jsonify(str(error)), 400
        if stored is not requested:
            existing = to_do_factory(body.title, stored)
            process_input(existing, "edit", state, _state_path())
        return _current_items()

    @tasks.get("/get")
    def get() -> Response:
        return _current_items()

    return tasks


def _auth_blueprint() -> Blueprint:
    auth = Blueprint("auth", __name__, url_prefix="/v1/auth")

    @auth.get("/login")
    def login() -> Response:
        return _text("Login view")

    @auth.get("/logout")
    def logout() -> Response:
        return _text("Logout view")

    return auth


def create_app(state_path: PathLike = DEFAULT_STATE_PATH) -> Flask:
    """Build the task service backed by the given state file."""
    app = Flask(__name__)
    app.config[_STATE_KEY] = state_path
    app.register_blueprint(_task_blueprint())
    return app


def create_auth_app() -> Flask:
    """Build the service that serves only the login and logout views."""
    app = Flask(__name__)
    app.register_blueprint(_auth_blueprint())
    return app


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Serve the task service, or the auth views with --auth."""
    parser = argparse.ArgumentParser(prog="taskboard-api", description="Serve the task API.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--state", default=DEFAULT_STATE_PATH, help="path of the JSON state file")
    parser.add_argument("--auth", action="store_true", help="serve only the auth views")
    args = parser.parse_args(argv)
    app = create_auth_app() if args.auth else create_app(args.state)
    app.run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())