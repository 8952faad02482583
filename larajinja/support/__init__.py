"""
Support Classes
"""

from larajinja.support.config import Config, merge_config
from larajinja.support.class_loader import ClassLoader
from larajinja.support.service_config import ServiceConfig, ServiceConfigInterface

__all__ = [
    'Config',
    'merge_config',
    'ClassLoader',
    'ServiceConfig',
    'ServiceConfigInterface',
]
