"""
Environment Factory
Build the Jinja2 environment from the module configuration
"""
from typing import Any, Dict, Optional

from jinja2 import Environment, StrictUndefined, select_autoescape

from larajinja.container import FactoryInterface
from larajinja.defaults import SERVICE_LOADER_CHAIN
from larajinja.logging import getLogger
from larajinja.module import Module

logger = getLogger(__name__)

# Environment keyword arguments accepted from configuration
ENVIRONMENT_OPTIONS = frozenset([
    'autoescape',
    'trim_blocks',
    'lstrip_blocks',
    'keep_trailing_newline',
    'auto_reload',
    'cache_size',
    'optimized',
    'newline_sequence',
])


class EnvironmentFactory(FactoryInterface):
    """
    Jinja2 environment over the loader chain

    Example config:
        'larajinja': {
            'environment': {
                'autoescape': ['html', 'xml'],
                'trim_blocks': True,
                'strict_undefined': True,
            },
            'extensions': ['jinja2.ext.do'],
        }
    """

    def __call__(self, container, requested_name: Optional[str] = None,
                 options: Optional[Dict[str, Any]] = None) -> Environment:
        module_options = Module.options(container)
        env_options = self.build_options(module_options.get('environment') or {})

        environment = Environment(loader=container.make(SERVICE_LOADER_CHAIN), **env_options)

        for extension in module_options.get('extensions') or []:
            environment.add_extension(extension)

        return environment

    def build_options(self, configured: Dict[str, Any]) -> Dict[str, Any]:
        """Translate configured options into Environment keyword arguments"""
        env_options: Dict[str, Any] = {}

        for key, value in configured.items():
            if key == 'strict_undefined':
                if value:
                    env_options['undefined'] = StrictUndefined
            elif key == 'autoescape' and isinstance(value, (list, tuple)):
                env_options['autoescape'] = select_autoescape(list(value))
            elif key in ENVIRONMENT_OPTIONS:
                env_options[key] = value
            else:
                logger.warning("Ignoring unsupported Jinja environment option '%s'", key)

        return env_options
