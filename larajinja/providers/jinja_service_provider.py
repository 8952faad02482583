"""
Jinja Service Provider
"""
from larajinja.defaults import (
    DEFAULT_STRATEGY_PRIORITY,
    SERVICE_ENVIRONMENT,
    SERVICE_HELPER_MANAGER,
    SERVICE_LOADER_CHAIN,
    SERVICE_MAP_LOADER,
    SERVICE_RENDERER,
    SERVICE_RESOLVER,
    SERVICE_STACK_LOADER,
    SERVICE_STRATEGY,
    SERVICE_VIEW,
    SERVICE_VIEW_HELPER_MANAGER,
)
from larajinja.jinja.globals import register_helper_globals
from larajinja.logging import getLogger
from larajinja.module import Module
from larajinja.service import (
    EnvironmentFactory,
    HelperPluginManagerFactory,
    JinjaHelperPluginManagerFactory,
    LoaderChainFactory,
    MapLoaderFactory,
    RendererFactory,
    ResolverFactory,
    StackLoaderFactory,
    StrategyFactory,
)
from larajinja.service_provider import ServiceProvider
from larajinja.view.view import View

logger = getLogger(__name__)


class JinjaServiceProvider(ServiceProvider):
    """Service provider for the Jinja renderer and its collaborators"""

    def register(self):
        """Merge module defaults and register every Jinja view service in the container"""
        for name, section in Module.get_config().items():
            self.register_config(name, section)

        # Host view services, unless the application brings its own
        if not self.app.has(SERVICE_VIEW):
            self.app.singleton(SERVICE_VIEW, lambda app: View())
        if not self.app.has(SERVICE_VIEW_HELPER_MANAGER):
            self.app.singleton(SERVICE_VIEW_HELPER_MANAGER, HelperPluginManagerFactory())

        self.app.singleton(SERVICE_MAP_LOADER, MapLoaderFactory())
        self.app.singleton(SERVICE_STACK_LOADER, StackLoaderFactory())
        self.app.singleton(SERVICE_LOADER_CHAIN, LoaderChainFactory())
        self.app.singleton(SERVICE_ENVIRONMENT, EnvironmentFactory())
        self.app.singleton(SERVICE_RESOLVER, ResolverFactory())
        self.app.singleton(SERVICE_HELPER_MANAGER, JinjaHelperPluginManagerFactory())
        self.app.singleton(SERVICE_RENDERER, RendererFactory())
        self.app.singleton(SERVICE_STRATEGY, StrategyFactory())

    def boot(self):
        """Attach the strategy to the view and expose helpers to templates"""
        options = Module.options(self.app)

        strategy = self.app.make(SERVICE_STRATEGY)
        strategy.attach(
            self.app.make(SERVICE_VIEW),
            options.get('strategy_priority', DEFAULT_STRATEGY_PRIORITY)
        )

        renderer = self.app.make(SERVICE_RENDERER)
        names = register_helper_globals(
            self.app.make(SERVICE_ENVIRONMENT),
            renderer,
            include_framework_helpers=bool(options.get('invoke_framework_helpers', True))
        )
        logger.debug("Jinja view services booted with helper globals: %s", ', '.join(names))
