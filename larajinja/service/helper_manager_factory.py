"""
Helper Manager Factories
Build the framework and the Jinja helper registries from configuration
"""
from collections.abc import Mapping
from typing import Any, Dict, Optional

from larajinja.container import FactoryInterface
from larajinja.exceptions import RuntimeException
from larajinja.jinja.helpers import JinjaHelperPluginManager
from larajinja.logging import getLogger
from larajinja.module import Module
from larajinja.support.class_loader import ClassLoader
from larajinja.support.service_config import ServiceConfig, ServiceConfigInterface
from larajinja.view.helpers import HelperPluginManager

logger = getLogger(__name__)


class HelperPluginManagerFactory(FactoryInterface):
    """
    Framework helper registry, configured from the ``view_helpers`` config section

    Example config:
        'view_helpers': {
            'invokables': {'money': 'app.view.helpers.Money'},
        }
    """

    def __call__(self, container, requested_name: Optional[str] = None,
                 options: Optional[Dict[str, Any]] = None) -> HelperPluginManager:
        config = Module.section(container, 'view_helpers')
        return HelperPluginManager(container, config)


class JinjaHelperPluginManagerFactory(FactoryInterface):
    """
    Jinja helper registry, populated from ``larajinja.helpers.configs``

    Each entry may be:
    - the dotted path of a ServiceConfigInterface class,
    - the name of a container service returning a ServiceConfigInterface,
    - a configuration mapping (wrapped in ServiceConfig).

    Entries are applied in order; later registrations of a helper name win.

    Example config:
        'larajinja': {
            'helpers': {
                'configs': [
                    'app.view.JinjaHelpers',
                    'app.view.helper_config',
                    {'invokables': {'money': 'app.view.helpers.Money'}},
                ],
            },
        }
    """

    def __call__(self, container, requested_name: Optional[str] = None,
                 options: Optional[Dict[str, Any]] = None) -> JinjaHelperPluginManager:
        module_options = Module.options(container)
        helpers = module_options.get('helpers') or {}
        configs = list(helpers.get('configs') or [])

        view_helpers = JinjaHelperPluginManager(container, config_sources=configs)

        for config_definition in configs:
            config = self.resolve_config(container, config_definition)
            config.configure_service_manager(view_helpers)
            logger.debug("Applied helper configuration %r", config_definition)

        return view_helpers

    def resolve_config(self, container, config_definition: Any) -> ServiceConfigInterface:
        """
        Turn one ``helpers.configs`` entry into a configuration applier

        Raises:
            RuntimeException: If the entry names a class that is not a
                ServiceConfigInterface, or cannot be resolved at all
        """
        config = None

        config_class = ClassLoader.find_class(config_definition)
        if config_class is not None:
            config = config_class()

            if not isinstance(config, ServiceConfigInterface):
                raise RuntimeException(
                    f'Invalid helper configuration class provided; received "{config_definition}", '
                    f'expected class implementing {ServiceConfigInterface.__name__}'
                )
        elif isinstance(config_definition, str) and container.has(config_definition):
            config = container.make(config_definition)
        elif isinstance(config_definition, Mapping):
            config = ServiceConfig(config_definition)

        if not isinstance(config, ServiceConfigInterface):
            raise RuntimeException(
                f'Unable to resolve provided configuration to valid instance of {ServiceConfigInterface.__name__}'
            )

        return config
