"""
Module Configuration
Default configuration of the Jinja view module and access to its config section
"""
import copy
from typing import Any, Dict

from larajinja.defaults import (
    DEFAULT_STRATEGY_PRIORITY,
    DEFAULT_TEMPLATE_SUFFIX,
    MODULE_NAME,
    SERVICE_CONFIG,
    SERVICE_MAP_LOADER,
    SERVICE_STACK_LOADER,
)


class Module:
    """Jinja view module: its config section name and defaults"""

    MODULE_NAME = MODULE_NAME

    DEFAULT_CONFIG: Dict[str, Any] = {
        MODULE_NAME: {
            'suffix': DEFAULT_TEMPLATE_SUFFIX,
            'invoke_framework_helpers': True,
            'environment': {},
            'extensions': [],
            'loader_chain': [SERVICE_MAP_LOADER, SERVICE_STACK_LOADER],
            'helpers': {
                'configs': [],
            },
            'strategy_priority': DEFAULT_STRATEGY_PRIORITY,
        },
        'view_manager': {
            'template_map': {},
            'template_path_stack': [],
        },
    }

    @classmethod
    def get_config(cls) -> Dict[str, Any]:
        """Get a copy of the default configuration"""
        return copy.deepcopy(cls.DEFAULT_CONFIG)

    @classmethod
    def options(cls, container) -> Dict[str, Any]:
        """Get this module's config section from the container configuration (empty when missing)"""
        return cls.section(container, cls.MODULE_NAME)

    @staticmethod
    def section(container, name: str) -> Dict[str, Any]:
        config = container.make(SERVICE_CONFIG)
        return config.get(name) or {}
