"""
View
Generic rendering entry point: picks a renderer per view model through the attached strategies
"""
from typing import List, Optional, Tuple

from larajinja.exceptions import DomainException, RuntimeException
from larajinja.logging import getLogger
from larajinja.view.contracts import RendererInterface, RenderingStrategyInterface, TreeRendererInterface
from larajinja.view.model import ViewModel

logger = getLogger(__name__)


class View:
    """
    Unified view rendering entry point

    Usage:
        view = View()
        JinjaStrategy(renderer).attach(view)

        html = view.render(layout)          # rendered text
        response = view.respond(layout)     # Sanic HTTPResponse
    """

    def __init__(self):
        self._strategies: List[Tuple[int, int, RenderingStrategyInterface]] = []

    def add_strategy(self, strategy: RenderingStrategyInterface, priority: int = 1) -> 'View':
        """Attach a strategy; higher priorities are asked first, ties keep attach order"""
        self._strategies.append((priority, len(self._strategies), strategy))
        self._strategies.sort(key=lambda entry: (-entry[0], entry[1]))
        return self

    def get_strategies(self) -> List[RenderingStrategyInterface]:
        return [strategy for _, _, strategy in self._strategies]

    def select_renderer(self, model: ViewModel) -> Tuple[RenderingStrategyInterface, RendererInterface]:
        """
        Ask each strategy for a renderer

        Raises:
            RuntimeException: If no strategy accepts the model
        """
        for strategy in self.get_strategies():
            renderer = strategy.select_renderer(model)
            if renderer is not None:
                return strategy, renderer

        raise RuntimeException(
            f"{type(self).__name__}: unable to find a renderer for template '{model.get_template()}'"
        )

    def render(self, model: ViewModel) -> Optional[str]:
        """
        Render a view model

        Children are rendered here first when the selected renderer cannot
        render trees itself.
        """
        strategy, renderer = self.select_renderer(model)
        logger.debug("Rendering '%s' with %s", model.get_template(), type(renderer).__name__)

        can_render_trees = isinstance(renderer, TreeRendererInterface) and renderer.can_render_trees()
        if model.has_children() and not can_render_trees:
            self.render_children(model)

        return renderer.render(model)

    def respond(self, model: ViewModel, status: int = 200):
        """
        Render a view model and turn the result into an HTTP response

        Raises:
            RuntimeException: If the selecting strategy does not produce a response
        """
        strategy, renderer = self.select_renderer(model)
        result = self.render(model)

        response = strategy.inject_response(renderer, result, status)
        if response is None:
            raise RuntimeException(
                f"{type(strategy).__name__} did not produce a response for '{model.get_template()}'"
            )
        return response

    def render_children(self, model: ViewModel):
        """Render every child and capture its output into the parent's variables"""
        for child in model:
            if child.terminal:
                raise DomainException('Inconsistent state; child view model is marked as terminal')

            child.set_option('has_parent', True)
            result = self.render(child) or ''
            child.set_option('has_parent', None)

            capture = child.capture_to
            if not capture:
                continue

            if child.append:
                model.set_variable(capture, (model.get_variable(capture) or '') + result)
            else:
                model.set_variable(capture, result)
