"""Shared fixtures for the view layer tests."""

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import pytest
from jinja2 import Environment

from larajinja.jinja import ChainLoader, JinjaRenderer, JinjaResolver, JinjaStrategy, StackLoader
from larajinja.view import RendererInterface, RenderingStrategyInterface, View, ViewModel

TEMPLATES = {
    "layout/layout.j2": "<main>{{ content }}</main>",
    "app/index.j2": "Hello {{ name }}",
    "app/card.j2": "[{{ title }}]",
    "app/helpers.j2": "{{ escape_html(text) }}|{{ helper('escape_html', text) }}",
    "app/partial.j2": "<div>{{ partial('app/index', {'name': name}) }}</div>",
}


class LegacyRenderer(RendererInterface):
    """Stand-in for a non-Jinja renderer: outputs are fixed strings or callables of the variables."""

    def __init__(self, outputs: Dict[str, Union[str, Callable[[Dict[str, Any]], str]]]) -> None:
        self.outputs = outputs
        self.rendered: List[str] = []

    def get_engine(self) -> "LegacyRenderer":
        return self

    def set_resolver(self, resolver) -> "LegacyRenderer":
        return self

    def render(self, name_or_model, values: Optional[Dict[str, Any]] = None) -> str:
        if isinstance(name_or_model, ViewModel):
            name = name_or_model.get_template()
            values = name_or_model.get_variables()
        else:
            name = name_or_model

        self.rendered.append(name)
        output = self.outputs[name]
        return output(dict(values or {})) if callable(output) else output


class LegacyStrategy(RenderingStrategyInterface):
    """Selects the legacy renderer for the templates it knows."""

    def __init__(self, renderer: LegacyRenderer) -> None:
        self.renderer = renderer

    def select_renderer(self, model: ViewModel):
        if model.get_template() in self.renderer.outputs:
            return self.renderer
        return None

    def inject_response(self, renderer, result, status=200):
        return None


@pytest.fixture
def views_dir(tmp_path: Path) -> Path:
    """Write the sample Jinja templates to a temporary directory."""
    root = tmp_path / "views"
    for name, source in TEMPLATES.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
    return root


@pytest.fixture
def environment(views_dir: Path) -> Environment:
    """Jinja environment over a loader chain with a single stack loader."""
    return Environment(loader=ChainLoader([StackLoader([str(views_dir)])]))


@pytest.fixture
def view() -> View:
    return View()


@pytest.fixture
def renderer(view: View, environment: Environment) -> JinjaRenderer:
    """Jinja renderer attached to the view with its strategy."""
    renderer = JinjaRenderer(view, environment, JinjaResolver(environment))
    JinjaStrategy(renderer).attach(view)
    return renderer


@pytest.fixture
def legacy_renderer(view: View) -> LegacyRenderer:
    """Legacy renderer attached to the view below the Jinja strategy."""
    legacy = LegacyRenderer({
        "legacy/header.phtml": "<header/>",
        "legacy/footer.phtml": "<footer/>",
        "legacy/layout.phtml": lambda values: f"[{values.get('content', '')}|{values.get('sidebar', '')}]",
    })
    view.add_strategy(LegacyStrategy(legacy), priority=1)
    return legacy
