"""
Renderer Factories
Build the resolver, the renderer and the view strategy
"""
from typing import Any, Dict, Optional

from larajinja.container import FactoryInterface
from larajinja.defaults import (
    SERVICE_ENVIRONMENT,
    SERVICE_HELPER_MANAGER,
    SERVICE_RENDERER,
    SERVICE_RESOLVER,
    SERVICE_VIEW,
    SERVICE_VIEW_HELPER_MANAGER,
)
from larajinja.jinja.renderer import JinjaRenderer
from larajinja.jinja.resolver import JinjaResolver
from larajinja.jinja.strategy import JinjaStrategy


class ResolverFactory(FactoryInterface):
    def __call__(self, container, requested_name: Optional[str] = None,
                 options: Optional[Dict[str, Any]] = None) -> JinjaResolver:
        return JinjaResolver(container.make(SERVICE_ENVIRONMENT))


class RendererFactory(FactoryInterface):
    """
    Jinja renderer wired to the view, the environment, the resolver and both helper registries

    The framework helper registry is bound to this renderer unless another
    renderer already owns it.
    """

    def __call__(self, container, requested_name: Optional[str] = None,
                 options: Optional[Dict[str, Any]] = None) -> JinjaRenderer:
        renderer = JinjaRenderer(
            container.make(SERVICE_VIEW),
            container.make(SERVICE_ENVIRONMENT),
            container.make(SERVICE_RESOLVER),
        )

        renderer.set_jinja_helpers(container.make(SERVICE_HELPER_MANAGER))

        if container.has(SERVICE_VIEW_HELPER_MANAGER):
            framework_helpers = container.make(SERVICE_VIEW_HELPER_MANAGER)
            if framework_helpers.get_renderer() is None:
                framework_helpers.set_renderer(renderer)
            renderer.set_framework_helpers(framework_helpers)

        return renderer


class StrategyFactory(FactoryInterface):
    def __call__(self, container, requested_name: Optional[str] = None,
                 options: Optional[Dict[str, Any]] = None) -> JinjaStrategy:
        return JinjaStrategy(container.make(SERVICE_RENDERER))
