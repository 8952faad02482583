"""
Service Configuration Appliers
Objects that know how to populate a helper registry
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from larajinja.view.helpers import HelperPluginManager


class ServiceConfigInterface(ABC):
    """
    Interface for configuration appliers

    Implement this to ship a reusable set of helper registrations:

    Example:
        class AppHelpers(ServiceConfigInterface):
            def configure_service_manager(self, manager):
                manager.set_invokable('money', 'app.view.helpers.Money')
    """

    @abstractmethod
    def configure_service_manager(self, manager: 'HelperPluginManager') -> 'HelperPluginManager':
        """
        Apply registrations to the manager

        Returns:
            The configured manager
        """
        pass


class ServiceConfig(ServiceConfigInterface):
    """
    Generic applier wrapping a plain configuration mapping

    Recognised keys: services, invokables, factories, aliases, shared

    Example:
        ServiceConfig({
            'invokables': {'money': 'app.view.helpers.Money'},
            'aliases': {'currency': 'money'},
        }).configure_service_manager(manager)
    """

    def __init__(self, config: Optional[Mapping[str, Any]] = None):
        self.config: Dict[str, Any] = dict(config or {})

    def configure_service_manager(self, manager: 'HelperPluginManager') -> 'HelperPluginManager':
        manager.configure(self.config)
        return manager

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.config)
