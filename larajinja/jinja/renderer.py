"""
Jinja Renderer
Plugs a Jinja2 environment into the view layer's renderer contracts
"""
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Mapping, Optional, Union

from jinja2 import Environment

from larajinja.exceptions import DomainException, InvalidArgumentException, ServiceNotFoundException
from larajinja.jinja.helpers import JinjaHelperPluginManager
from larajinja.jinja.loader import ChainLoader
from larajinja.logging import getLogger
from larajinja.view.contracts import RendererInterface, ResolverInterface, TreeRendererInterface
from larajinja.view.helpers import HelperPluginManager
from larajinja.view.model import ViewModel

logger = getLogger(__name__)


def _type_name(value: Any) -> str:
    return type(value).__name__ if value is not None else 'None'


@dataclass(frozen=True)
class RendererOptions:
    """
    Options a view model may set on the renderer

    Keys are matched without regard to case or underscores, so both
    ``can_render_trees`` and ``canRenderTrees`` are recognised.
    """

    can_render_trees: bool = True

    def merged(self, options: Mapping[str, Any]) -> 'RendererOptions':
        """Return a copy with the recognised options applied; other keys are ignored"""
        changes: Dict[str, Any] = {}
        for setting, value in options.items():
            key = str(setting).replace('_', '').lower()
            if key == 'canrendertrees':
                changes['can_render_trees'] = bool(value)
            else:
                logger.debug("Ignoring unrecognised renderer option '%s'", setting)
        return replace(self, **changes) if changes else self


class JinjaRenderer(RendererInterface, TreeRendererInterface):
    """
    Renderer delegating template lookup to a loader chain and execution to Jinja

    Usage:
        renderer = JinjaRenderer(view, environment, JinjaResolver(environment))
        html = renderer.render('app/index', {'title': 'Home'})
        html = renderer.render(ViewModel({'title': 'Home'}, template='app/index'))
    """

    def __init__(
        self,
        view=None,
        environment: Optional[Environment] = None,
        resolver: Optional[ResolverInterface] = None
    ):
        self.options = RendererOptions()
        self._jinja_helpers: Optional[HelperPluginManager] = None
        self._framework_helpers: Optional[HelperPluginManager] = None

        self.set_view(view)
        self.set_environment(environment)
        self.set_loader(environment.loader if environment is not None else None)
        self.set_resolver(resolver)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def helper_sources(self) -> List[HelperPluginManager]:
        """Helper registries in lookup order: Jinja helpers first, framework helpers last"""
        sources = []
        if self._jinja_helpers is not None:
            sources.append(self._jinja_helpers)
        sources.append(self.get_framework_helpers())
        return sources

    def plugin(self, name: str, options: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Get a helper instance from the first registry that knows the name

        Args:
            name: Helper name
            options: Constructor options passed to the registry

        Raises:
            ServiceNotFoundException: If no registry knows the name
        """
        for helpers in self.helper_sources():
            if helpers.has(name):
                return helpers.get(name, options)

        raise ServiceNotFoundException(f"Unable to find a view helper named '{name}'")

    def call_helper(self, name: str, *args, **kwargs) -> Any:
        """
        Resolve a helper and invoke it

        Callable helpers are called with the given arguments and their
        result returned; anything else is returned as-is.
        """
        helper = self.plugin(name)

        if callable(helper):
            return helper(*args, **kwargs)

        return helper

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def get_engine(self) -> 'JinjaRenderer':
        return self

    def apply_options(self, options: Mapping[str, Any]) -> 'JinjaRenderer':
        self.options = self.options.merged(options)
        return self

    def render(self, name_or_model: Union[str, ViewModel], values: Optional[Mapping[str, Any]] = None) -> Optional[str]:
        """
        Render a template name or a view model

        Args:
            name_or_model: Template name or ViewModel
            values: Template variables (a view model brings its own)

        Returns:
            The rendered text, or None when no loader knows the template

        Raises:
            DomainException: If a view model has no template
        """
        model = name_or_model
        if isinstance(model, ViewModel):
            name = model.get_template()

            if not name:
                raise DomainException(
                    f'{type(self).__name__}.render: received View Model argument, but template is empty'
                )

            self.apply_options(model.get_options() or {})

            # Give view model awareness via the view_model helper
            self.plugin('view_model').set_current(model)

            values = model.get_variables()
        else:
            name = name_or_model

        if not self.can_render(name):
            logger.debug("Template '%s' not found by the loader chain", name)
            return None

        if isinstance(model, ViewModel) and model.has_children() and self.can_render_trees():
            values = dict(values or {})
            values.setdefault('content', '')

            for child in model:
                if self.can_render(child.get_template()):
                    # The first child Jinja can render directly replaces the whole tree
                    template = self.get_resolver().resolve(child.get_template(), self)
                    return template.render(dict(child.get_variables() or {}))

                child.set_option('has_parent', True)
                values['content'] += self.get_view().render(child) or ''

        template = self.get_resolver().resolve(name, self)

        return template.render(dict(values or {}))

    def can_render(self, name: Optional[str]) -> bool:
        """
        Check whether the loader chain knows the template

        Raises:
            InvalidArgumentException: If the loader is not a ChainLoader
        """
        return self.get_loader().exists(name, self.environment)

    def can_render_trees(self) -> bool:
        return self.options.can_render_trees

    def set_can_render_trees(self, can_render_trees: bool) -> 'JinjaRenderer':
        self.options = replace(self.options, can_render_trees=bool(can_render_trees))
        return self

    # ------------------------------------------------------------------
    # Collaborators
    # ------------------------------------------------------------------

    def get_view(self):
        return self.view

    def set_view(self, view) -> 'JinjaRenderer':
        self.view = view
        return self

    def get_environment(self) -> Optional[Environment]:
        return self.environment

    def set_environment(self, environment: Optional[Environment]) -> 'JinjaRenderer':
        self.environment = environment
        return self

    def get_loader(self) -> ChainLoader:
        """
        Raises:
            InvalidArgumentException: If the loader is not a ChainLoader
        """
        if not isinstance(self.loader, ChainLoader):
            raise InvalidArgumentException(
                f'Jinja loader must be a ChainLoader; got type "{_type_name(self.loader)}" instead'
            )
        return self.loader

    def set_loader(self, loader) -> 'JinjaRenderer':
        self.loader = loader
        return self

    def get_resolver(self) -> ResolverInterface:
        """
        Raises:
            InvalidArgumentException: If the resolver does not implement ResolverInterface
        """
        if not isinstance(self.resolver, ResolverInterface):
            raise InvalidArgumentException(
                f'Jinja resolver must implement ResolverInterface; got type "{_type_name(self.resolver)}" instead'
            )
        return self.resolver

    def set_resolver(self, resolver: Optional[ResolverInterface]) -> 'JinjaRenderer':
        self.resolver = resolver
        return self

    def get_jinja_helpers(self) -> Optional[HelperPluginManager]:
        return self._jinja_helpers

    def set_jinja_helpers(self, helpers: Optional[JinjaHelperPluginManager]) -> 'JinjaRenderer':
        """Attach the Jinja helper registry and bind it to this renderer"""
        if helpers is not None:
            helpers.set_renderer(self)
        self._jinja_helpers = helpers
        return self

    def get_framework_helpers(self) -> HelperPluginManager:
        """Framework helper registry; a default one bound to this renderer is created when none was set"""
        if self._framework_helpers is None:
            self._framework_helpers = HelperPluginManager().set_renderer(self)
        return self._framework_helpers

    def set_framework_helpers(self, helpers: Optional[HelperPluginManager]) -> 'JinjaRenderer':
        self._framework_helpers = helpers
        return self
