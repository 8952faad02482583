"""
larajinja
Jinja2 templates for a Laravel-style view layer

Usage:
    from larajinja import Container, JinjaServiceProvider, ViewModel

    app = Container({'view_manager': {'template_path_stack': ['views']}})
    app.register_provider(JinjaServiceProvider)
    app.boot()

    html = app.make('view').render(ViewModel({'title': 'Home'}, template='app/index'))
"""
from larajinja.container import Container, FactoryInterface
from larajinja.jinja import JinjaRenderer, JinjaStrategy
from larajinja.module import Module
from larajinja.providers import JinjaServiceProvider, LoggingServiceProvider
from larajinja.service_provider import ServiceProvider
from larajinja.view import View, ViewModel

__version__ = '1.0.0'

__all__ = [
    'Container',
    'FactoryInterface',
    'JinjaRenderer',
    'JinjaServiceProvider',
    'JinjaStrategy',
    'LoggingServiceProvider',
    'Module',
    'ServiceProvider',
    'View',
    'ViewModel',
]
