"""
Service Providers
"""
from larajinja.providers.jinja_service_provider import JinjaServiceProvider
from larajinja.providers.logging_service_provider import LoggingServiceProvider

__all__ = [
    'JinjaServiceProvider',
    'LoggingServiceProvider',
]
