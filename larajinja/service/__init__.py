"""
Service Factories
Container factories building every Jinja view service
"""
from larajinja.service.environment_factory import EnvironmentFactory
from larajinja.service.helper_manager_factory import HelperPluginManagerFactory, JinjaHelperPluginManagerFactory
from larajinja.service.loader_factory import LoaderChainFactory, MapLoaderFactory, StackLoaderFactory
from larajinja.service.renderer_factory import RendererFactory, ResolverFactory, StrategyFactory

__all__ = [
    'EnvironmentFactory',
    'HelperPluginManagerFactory',
    'JinjaHelperPluginManagerFactory',
    'LoaderChainFactory',
    'MapLoaderFactory',
    'RendererFactory',
    'ResolverFactory',
    'StackLoaderFactory',
    'StrategyFactory',
]
