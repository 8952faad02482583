"""
Service Container
Laravel-style container holding the view services and their configuration
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Mapping, Optional, Union
import inspect

from larajinja.support.config import Config

_UNRESOLVED = object()


class FactoryInterface(ABC):
    """
    Interface for service factories

    Factories implementing this interface receive the container and the key
    they were registered under, so one factory class can build several services.

    Example:
        class MailerFactory(FactoryInterface):
            def __call__(self, container, requested_name=None, options=None):
                return Mailer(container.make('config').get('mail'))
    """

    @abstractmethod
    def __call__(self, container: 'Container', requested_name: Optional[str] = None,
                 options: Optional[Dict[str, Any]] = None) -> Any:
        pass


class Binding:
    """One container entry: a factory, and the cached instance for shared entries"""

    def __init__(self, factory: Optional[Callable] = None, shared: bool = True, instance: Any = _UNRESOLVED):
        self.factory = factory
        self.shared = shared
        self.instance = instance

    @property
    def resolved(self) -> bool:
        return self.instance is not _UNRESOLVED


class Container:
    """
    Service container - holds the configuration, the bindings and the service providers

    Usage:
        app = Container({'view_manager': {'template_path_stack': ['views']}})
        app.singleton('larajinja.renderer', RendererFactory())
        app.bind('request_id', lambda app: uuid4().hex)

        renderer = app.make('larajinja.renderer')
    """

    def __init__(self, config: Union[Config, Mapping, None] = None):
        if not isinstance(config, Config):
            config = Config(config)

        self.config = config
        self.providers: List[Any] = []
        self.booted = False
        self.bindings: Dict[str, Binding] = {}

        self.singleton('container', self)
        self.singleton('config', self.config)

    @staticmethod
    def _is_factory(value) -> bool:
        return inspect.isfunction(value) or inspect.ismethod(value) or isinstance(value, FactoryInterface)

    def singleton(self, key: str, factory_or_instance):
        """
        Register a shared service

        Functions and FactoryInterface instances are called on the first
        make() and their result cached; anything else is the service itself.
        """
        if self._is_factory(factory_or_instance):
            self.bindings[key] = Binding(factory_or_instance)
        else:
            self.bindings[key] = Binding(instance=factory_or_instance)

    def bind(self, key: str, factory):
        """Register a factory called on every make()"""
        if not self._is_factory(factory):
            raise TypeError(f"Binding '{key}' needs a factory function or FactoryInterface")
        self.bindings[key] = Binding(factory, shared=False)

    def make(self, key: str) -> Any:
        """
        Resolve a service

        Raises:
            KeyError: If nothing is bound under the key
        """
        binding = self.bindings.get(key)
        if binding is None:
            raise KeyError(f"Binding '{key}' not found in container")

        if binding.shared and binding.resolved:
            return binding.instance

        factory = binding.factory
        # FactoryInterface factories also get the key they are bound to
        service = factory(self, key) if isinstance(factory, FactoryInterface) else factory(self)

        if binding.shared:
            binding.instance = service
        return service

    def has(self, key: str) -> bool:
        return key in self.bindings

    def get_bindings(self) -> Dict[str, Dict[str, Any]]:
        """Describe every binding: its type and, for singletons, whether it was resolved"""
        return {
            key: {
                'type': 'singleton' if binding.shared else 'factory',
                'instantiated': binding.resolved if binding.shared else None,
            }
            for key, binding in self.bindings.items()
        }

    def list_bindings(self) -> str:
        """
        Readable table of the bindings, sorted by key

        Example output:
            config                          singleton  resolved
            larajinja.renderer              singleton  lazy
            request_id                      factory    new instance each call
        """
        lines = []
        for key, info in sorted(self.get_bindings().items()):
            if info['type'] == 'singleton':
                state = 'resolved' if info['instantiated'] else 'lazy'
            else:
                state = 'new instance each call'
            lines.append(f"{key:<30}  {info['type']:<9}  {state}")
        return "\n".join(lines)

    def register_provider(self, provider_class):
        """
        Register a service provider

        Providers whose register() returns False are dropped. When the
        container already booted, the provider is booted right away.
        """
        provider = provider_class(self)
        if provider.register() is not False:
            self.providers.append(provider)
            if self.booted:
                provider.boot()
        return provider

    def boot(self):
        """Boot every registered provider, once"""
        if self.booted:
            return

        for provider in self.providers:
            provider.boot()

        self.booted = True
