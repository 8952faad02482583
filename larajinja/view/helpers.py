"""
View Helpers
Framework helper base class, built-in helpers and the helper registry
"""
from typing import Any, Callable, Dict, List, Mapping, Optional, TYPE_CHECKING, Union

from markupsafe import Markup, escape

from larajinja.exceptions import InvalidHelperException, ServiceNotFoundException
from larajinja.logging import getLogger
from larajinja.support.class_loader import ClassLoader
from larajinja.view.model import ViewModel

if TYPE_CHECKING:
    from larajinja.view.contracts import RendererInterface

logger = getLogger(__name__)


class AbstractHelper:
    """
    Base class for view helpers

    The registry injects the renderer that asked for the helper, so helpers
    can call back into it through get_view().
    """

    view: Optional['RendererInterface'] = None

    def set_view(self, view: 'RendererInterface') -> 'AbstractHelper':
        self.view = view
        return self

    def get_view(self) -> Optional['RendererInterface']:
        return self.view


class ViewModelHelper(AbstractHelper):
    """Gives helpers access to the view model currently being rendered and to the root model"""

    def __init__(self):
        self.current: Optional[ViewModel] = None
        self.root: Optional[ViewModel] = None

    def set_current(self, model: ViewModel) -> 'ViewModelHelper':
        self.current = model
        return self

    def get_current(self) -> Optional[ViewModel]:
        return self.current

    def has_current(self) -> bool:
        return self.current is not None

    def set_root(self, model: ViewModel) -> 'ViewModelHelper':
        self.root = model
        return self

    def get_root(self) -> Optional[ViewModel]:
        return self.root

    def has_root(self) -> bool:
        return self.root is not None


class Partial(AbstractHelper):
    """Render another template (or view model) through the bound renderer"""

    def __call__(self, name_or_model: Union[str, ViewModel, None] = None,
                 values: Optional[Mapping[str, Any]] = None):
        if name_or_model is None:
            return self

        if isinstance(name_or_model, ViewModel):
            result = self.get_view().render(name_or_model)
        else:
            result = self.get_view().render(name_or_model, dict(values or {}))

        # Rendered HTML must not be escaped again by autoescaping templates
        return Markup(result) if result is not None else None


class EscapeHtml(AbstractHelper):
    """Escape a value for safe inclusion in HTML"""

    def __call__(self, value: Any = '') -> Markup:
        return escape(value)


class HelperPluginManager:
    """
    Registry of view helpers

    Helpers are registered as ready instances (services), as classes to
    instantiate (invokables) or as factories called with
    ``(container, name, options)``. Classes and factories may be given as
    dotted paths. Registering a name again replaces the earlier registration.

    Usage:
        helpers = HelperPluginManager(container)
        helpers.configure({
            'invokables': {'money': 'app.view.helpers.Money'},
            'aliases': {'currency': 'money'},
        })
        helpers.get('currency')(12.5)
    """

    default_invokables: Dict[str, Any] = {
        'view_model': ViewModelHelper,
        'partial': Partial,
        'escape_html': EscapeHtml,
    }

    default_aliases: Dict[str, str] = {
        'viewmodel': 'view_model',
        'viewModel': 'view_model',
        'escapeHtml': 'escape_html',
    }

    def __init__(self, container=None, config: Optional[Mapping[str, Any]] = None):
        self.container = container
        self._renderer: Optional['RendererInterface'] = None
        self._services: Dict[str, Any] = {}
        self._invokables: Dict[str, Any] = dict(self.default_invokables)
        self._factories: Dict[str, Any] = {}
        self._aliases: Dict[str, str] = dict(self.default_aliases)
        self._shared: Dict[str, bool] = {}
        self._instances: Dict[str, Any] = {}

        if config:
            self.configure(config)

    def configure(self, config: Mapping[str, Any]) -> 'HelperPluginManager':
        """
        Apply a configuration mapping

        Recognised keys: services, invokables, factories, aliases, shared
        """
        for name, helper in (config.get('services') or {}).items():
            self.set_service(name, helper)
        for name, invokable in (config.get('invokables') or {}).items():
            self.set_invokable(name, invokable)
        for name, factory in (config.get('factories') or {}).items():
            self.set_factory(name, factory)
        for alias, target in (config.get('aliases') or {}).items():
            self.set_alias(alias, target)
        for name, flag in (config.get('shared') or {}).items():
            self.set_shared(name, flag)
        return self

    def _forget(self, name: str):
        self._services.pop(name, None)
        self._invokables.pop(name, None)
        self._factories.pop(name, None)
        self._aliases.pop(name, None)
        self._instances.pop(name, None)

    def set_service(self, name: str, helper: Any) -> 'HelperPluginManager':
        """Register a ready helper instance"""
        self._forget(name)
        self._services[name] = helper
        return self

    def set_invokable(self, name: str, invokable: Union[str, type]) -> 'HelperPluginManager':
        """Register a helper class (or its dotted path)"""
        self._forget(name)
        self._invokables[name] = invokable
        return self

    def set_factory(self, name: str, factory: Union[str, Callable]) -> 'HelperPluginManager':
        """Register a factory callable (or the dotted path of a factory class)"""
        self._forget(name)
        self._factories[name] = factory
        return self

    def set_alias(self, alias: str, target: str) -> 'HelperPluginManager':
        self._forget(alias)
        self._aliases[alias] = target
        return self

    def set_shared(self, name: str, flag: bool) -> 'HelperPluginManager':
        self._shared[name] = bool(flag)
        self._instances.pop(name, None)
        return self

    def set_renderer(self, renderer: 'RendererInterface') -> 'HelperPluginManager':
        """Set the renderer injected into every helper created from now on"""
        self._renderer = renderer
        for helper in self._instances.values():
            self._inject_renderer(helper)
        return self

    def get_renderer(self) -> Optional['RendererInterface']:
        return self._renderer

    def resolve_alias(self, name: str) -> str:
        seen = []
        while name in self._aliases:
            if name in seen:
                raise InvalidHelperException(f"Circular helper alias: {' -> '.join(seen + [name])}")
            seen.append(name)
            name = self._aliases[name]
        return name

    def has(self, name: str) -> bool:
        name = self.resolve_alias(name)
        return name in self._services or name in self._invokables or name in self._factories

    def get(self, name: str, options: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Retrieve a helper

        Args:
            name: Helper name or alias
            options: Constructor options; a fresh, uncached instance is built when given

        Raises:
            ServiceNotFoundException: If nothing is registered under the name
            InvalidHelperException: If the registration produced something that is not a helper
        """
        resolved = self.resolve_alias(name)

        if resolved in self._services:
            helper = self._services[resolved]
            self.validate(helper)
            self._inject_renderer(helper)
            return helper

        if not self.has(resolved):
            raise ServiceNotFoundException(
                f"{type(self).__name__} was unable to fetch or create an instance for '{name}'"
            )

        shared = self._shared.get(resolved, True)
        if options is None and shared and resolved in self._instances:
            return self._instances[resolved]

        helper = self._create(resolved, options)
        self.validate(helper)
        self._inject_renderer(helper)

        if options is None and shared:
            self._instances[resolved] = helper

        return helper

    def get_registered_services(self) -> List[str]:
        """Get every helper name, aliases included"""
        names = set(self._services) | set(self._invokables) | set(self._factories) | set(self._aliases)
        return sorted(names)

    def validate(self, helper: Any):
        if isinstance(helper, AbstractHelper) or callable(helper):
            return
        raise InvalidHelperException(
            f'Helper of type "{type(helper).__name__}" is invalid; '
            f'must be an AbstractHelper or a callable'
        )

    def _create(self, name: str, options: Optional[Mapping[str, Any]]) -> Any:
        if name in self._factories:
            factory = self._factories[name]
            if isinstance(factory, str):
                factory = ClassLoader.load(factory)
            if isinstance(factory, type):
                factory = factory()
            logger.debug("Creating helper '%s' through factory %r", name, factory)
            return factory(self.container, name, dict(options) if options is not None else None)

        invokable = self._invokables[name]
        if isinstance(invokable, str):
            invokable = ClassLoader.load(invokable)
        logger.debug("Creating helper '%s' from %r", name, invokable)
        return invokable(**options) if options else invokable()

    def _inject_renderer(self, helper: Any):
        if self._renderer is not None and isinstance(helper, AbstractHelper):
            helper.set_view(self._renderer)
