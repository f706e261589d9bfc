# taskboard

A small to-do tracker. Tasks have a title and a status, either `PENDING` or
`DONE`. The package offers three ways to work with them:

- a command line that keeps tasks in a JSON state file;
- a JSON web API over the same kind of state file;
- a JSON web API backed by a SQL database, with an HTML front page.

A few small companion programs ship alongside: a greeting web service, a
booking command, and two demonstrations of the factory-method pattern.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The command line

`taskboard` takes a command and a task title. It reads the state file
(`./state.json` unless `--state PATH` is given), which must exist and hold a
JSON object mapping titles to statuses (start with `{}`).

```
taskboard create washing
taskboard get washing
taskboard edit washing      # pending -> done, or done -> pending
taskboard delete washing    # only for tasks that are done
taskboard --state tasks.json get washing
```

When the title is already in the state, its stored status is printed first. A
title missing from the state is treated as pending. Pending tasks accept
`get`, `create` and `edit`; done tasks accept `get`, `delete` and `edit`. Any
other command is reported as not supported. The command exits with status 1 if
the state file cannot be read or holds an unknown status.

The state is written back as compact JSON with its keys sorted.

From Python the same pieces are available:

```python
from taskboard.state import read_file
from taskboard.status import TaskStatus
from taskboard.tasks import to_do_factory
from taskboard.processes import process_input

state = read_file("state.json")
item = to_do_factory("washing", TaskStatus.PENDING)
new_state = process_input(item, "create", state, "state.json")
```

`process_input` works on a copy of the state and returns that copy.
`TaskStatus.from_string` raises `ValueError` for anything but `DONE` or
`PENDING`.

## The JSON-file web API

```
taskboard-api [--host 127.0.0.1] [--port 8080] [--state ./state.json]
```

serves:

- `POST /v1/item/create/<title>` adds a pending task and answers with the
  text `<title> created`;
- `POST /v1/item/edit` with a body `{"title": ..., "status": ...}` toggles the
  task's status when it differs from the requested one, then returns the
  current items; it answers 404 for an unknown title and 400 for a malformed
  body or unknown status;
- `GET /v1/item/get` returns `pending_items`, `done_items`,
  `pending_item_count` and `done_item_count`, tasks in title order.

`taskboard-api --auth` instead serves only placeholder `GET /v1/auth/login`
and `GET /v1/auth/logout` views; from Python, `taskboard.api.create_app(path)`
and `taskboard.api.create_auth_app()` build the two Flask apps.

## The database web API

```
taskboard-db-api config.yml [--host 127.0.0.1] [--port 8080] [--templates ./templates]
```

`config.yml` is a YAML mapping whose `DB_URL` key holds a SQLAlchemy database
URL, for example:

```yaml
DB_URL: sqlite:///tasks.db
```

The app keeps tasks in a `to_do` table (`id`, `title`, `status`, `date`) and
serves:

- `GET /v1/item/get` — all tasks in order of creation, split as above;
- `POST /v1/item/create/<title>` — adds a pending task unless one with that
  title exists, then returns the current items;
- `POST /v1/item/edit` with `{"title": ..., "status": ...}` — sets every task
  with that title to `DONE`;
- `POST /v1/item/delete` with the same body — removes the oldest task with
  that title, or answers 404;
- `GET /v1/auth/login`, `GET /v1/auth/logout` — placeholder views;
- `GET /` — an HTML page assembled from the templates directory: `main.html`
  with `{{JAVASCRIPT}}`, `{{BASE_CSS}}` and `{{CSS}}` replaced by `main.js`,
  `css/base.css` and `css/main.css`, and `HEADER_HTML`/`HEADER_CSS` replaced
  by `components/header.html` and `components/header.css`.

Each request line is printed. Responses carry CORS headers echoing the
request's `Origin`, method and headers. When no database connection can be
made the app answers 503.

From Python, `taskboard.database.Database` offers `load_items`, `create`,
`mark_done` and `delete`, and `taskboard.db_api.create_app(database)` builds
the Flask app.

## What it does not do

- The database API does not create the `to_do` table; it must already exist.
- The `token` header read on edit and delete (`JwToken`, message
  `nothing found` when absent) is not checked, and the login and logout views
  only return placeholder text: there is no authentication.

## Companion programs

```
taskboard-greeting [--port 8000]        # GET /, /hello/<name>/<age>, /bye/<name>/<age>; age 0-255
taskboard-booking --f Ann --l Lee --a 30
taskboard-dialog [--platform win32]     # renders a button through a dialog factory
taskboard-maze                          # plays an ordinary maze, then a magic maze
```

`taskboard-booking` requires all three options, accepts ages from -128 to 127,
and prints the first name, last name and age. `taskboard-dialog` picks the
Windows dialog on `win32` (by default the running platform) and the HTML
dialog otherwise.