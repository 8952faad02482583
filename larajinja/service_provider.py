"""
Service Provider Base Class
Laravel-style service providers for registering services and bootstrapping packages
"""
from abc import ABC
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from larajinja.container import Container


class ServiceProvider(ABC):
    """
    Base Service Provider class

    Service providers are the central place for bootstrapping. They handle:
    - Registering services in the container
    - Merging package default configuration
    - Wiring services together once everything is registered
    """

    def __init__(self, app: 'Container'):
        self.app = app

    def register(self):
        """
        Register services in the container
        Called when the provider is registered (before booting)

        Example:
            self.app.singleton('larajinja.renderer', RendererFactory())
            self.app.bind('view_model', lambda app: ViewModel())
        """
        pass

    def boot(self):
        """
        Bootstrap services (after all providers are registered)

        Example:
            strategy = self.app.make('larajinja.strategy')
            strategy.attach(self.app.make('view'))
        """
        pass

    def register_config(self, config_name: str, config_dict: dict):
        """
        Merge package defaults underneath the application configuration

        Values the application already set win over ``config_dict``.

        Args:
            config_name: The config key (e.g., 'larajinja', 'view_manager')
            config_dict: The default configuration dictionary
        """
        self.app.config.merge_defaults({config_name: config_dict})
