"""
Jinja Rendering Strategy
Selects the Jinja renderer for templates it knows and turns its output into Sanic responses
"""
from typing import Optional

from sanic.response import HTTPResponse, html

from larajinja.defaults import DEFAULT_STRATEGY_PRIORITY
from larajinja.jinja.renderer import JinjaRenderer
from larajinja.view.contracts import RendererInterface, RenderingStrategyInterface
from larajinja.view.model import ViewModel


class JinjaStrategy(RenderingStrategyInterface):
    """
    View strategy for the Jinja renderer

    Example:
        JinjaStrategy(renderer).attach(view, priority=100)
    """

    def __init__(self, renderer: JinjaRenderer):
        self.renderer = renderer

    def attach(self, view, priority: int = DEFAULT_STRATEGY_PRIORITY) -> 'JinjaStrategy':
        view.add_strategy(self, priority)
        return self

    def select_renderer(self, model: ViewModel) -> Optional[JinjaRenderer]:
        if self.renderer.can_render(model.get_template()):
            return self.renderer
        return None

    def inject_response(self, renderer: RendererInterface, result: Optional[str],
                        status: int = 200) -> Optional[HTTPResponse]:
        if renderer is not self.renderer:
            return None
        return html(result or '', status=status)
