"""
View Contracts
Interfaces a renderer, a resolver and a rendering strategy must implement
"""
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from larajinja.view.model import ViewModel


class ResolverInterface(ABC):
    """Maps a template name to something the renderer can execute"""

    @abstractmethod
    def resolve(self, name: str, renderer: Optional['RendererInterface'] = None) -> Any:
        """
        Resolve a template name

        Args:
            name: Template name
            renderer: Renderer asking for the template
        """
        pass


class RendererInterface(ABC):
    """Turns a template name or a view model into output text"""

    @abstractmethod
    def get_engine(self) -> Any:
        """Return the template engine object"""
        pass

    @abstractmethod
    def set_resolver(self, resolver: ResolverInterface) -> 'RendererInterface':
        pass

    @abstractmethod
    def render(self, name_or_model, values: Optional[Mapping[str, Any]] = None) -> Optional[str]:
        """
        Process a template and return the output

        Args:
            name_or_model: Template name or a ViewModel
            values: Variables for the template (ignored for view models)
        """
        pass


class TreeRendererInterface(ABC):
    """Renderers able to render a view model together with its children"""

    @abstractmethod
    def can_render_trees(self) -> bool:
        pass


class RenderingStrategyInterface(ABC):
    """Picks a renderer for a view model and turns its output into a response"""

    @abstractmethod
    def select_renderer(self, model: 'ViewModel') -> Optional[RendererInterface]:
        """Return a renderer for the model, or None to let the next strategy decide"""
        pass

    @abstractmethod
    def inject_response(self, renderer: RendererInterface, result: Optional[str], status: int = 200):
        """Return a response for the rendered result, or None when the renderer is not ours"""
        pass
