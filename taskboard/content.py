"""Assembling the front-end page from template files."""

from __future__ import annotations

from pathlib import Path
from typing import Union

DEFAULT_TEMPLATES_DIR = "./templates"

PathLike = Union[str, Path]


def read_file(file_path: PathLike) -> str:
    """Return the text of a file."""
    return Path(file_path).read_text(encoding="utf-8")


def add_component(
    component_tag: str, html_data: str, templates_dir: PathLike = DEFAULT_TEMPLATES_DIR
) -> str:
    """Fill the <TAG>_HTML and then <TAG>_CSS placeholders with the component's files."""
    components = Path(templates_dir) / "components"
    name = component_tag.lower()
    tag = component_tag.upper()
    css_loaded = read_file(components / f"{name}.css")
    html_loaded = read_file(components / f"{name}.html")
    html_data = html_data.replace(f"{tag}_HTML", html_loaded)
    return html_data.replace(f"{tag}_CSS", css_loaded)


def render_items_page(templates_dir: PathLike = DEFAULT_TEMPLATES_DIR) -> str:
    """Build the main page with its script, styles and header component inlined."""
    root = Path(templates_dir)
    html_data = read_file(root / "main.html")
    js_data = read_file(root / "main.js")
    css_base_data = read_file(root / "css" / "base.css")
    css_data = read_file(root / "css" / "main.css")

    html_data = html_data.replace("{{JAVASCRIPT}}", js_data)
    html_data = html_data.replace("{{BASE_CSS}}", css_base_data)
    html_data = html_data.replace("{{CSS}}", css_data)
    return add_component("header", html_data, root)