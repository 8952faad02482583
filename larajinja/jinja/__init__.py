"""
Jinja Integration
Renderer, loaders, resolver, helper registry and view strategy backed by Jinja2
"""
from larajinja.jinja.globals import HelperProxy, register_helper_globals
from larajinja.jinja.helpers import JinjaHelperPluginManager
from larajinja.jinja.loader import ChainLoader, MapLoader, StackLoader
from larajinja.jinja.renderer import JinjaRenderer, RendererOptions
from larajinja.jinja.resolver import JinjaResolver
from larajinja.jinja.strategy import JinjaStrategy

__all__ = [
    'ChainLoader',
    'HelperProxy',
    'JinjaHelperPluginManager',
    'JinjaRenderer',
    'JinjaResolver',
    'JinjaStrategy',
    'MapLoader',
    'RendererOptions',
    'StackLoader',
    'register_helper_globals',
]
