"""
Loader Factories
Build the Jinja loaders from the view manager configuration
"""
from typing import Any, Dict, Optional

from jinja2 import BaseLoader

from larajinja.container import FactoryInterface
from larajinja.defaults import DEFAULT_TEMPLATE_SUFFIX
from larajinja.exceptions import InvalidArgumentException
from larajinja.jinja.loader import ChainLoader, MapLoader, StackLoader
from larajinja.logging import getLogger
from larajinja.module import Module

logger = getLogger(__name__)


def _suffix(container) -> str:
    return (Module.options(container).get('suffix') or DEFAULT_TEMPLATE_SUFFIX).lstrip('.')


class MapLoaderFactory(FactoryInterface):
    """
    Map loader over ``view_manager.template_map``

    Only entries whose file carries the Jinja suffix are loaded, so templates
    mapped for other renderers stay with them.
    """

    def __call__(self, container, requested_name: Optional[str] = None,
                 options: Optional[Dict[str, Any]] = None) -> MapLoader:
        suffix = _suffix(container)
        template_map = Module.section(container, 'view_manager').get('template_map') or {}

        loader = MapLoader()
        for name, path in template_map.items():
            if str(path).endswith(f'.{suffix}'):
                loader.add(name, path)

        logger.debug("Map loader holds %d of %d mapped templates", len(loader.template_map), len(template_map))
        return loader


class StackLoaderFactory(FactoryInterface):
    """Stack loader over ``view_manager.template_path_stack``"""

    def __call__(self, container, requested_name: Optional[str] = None,
                 options: Optional[Dict[str, Any]] = None) -> StackLoader:
        paths = Module.section(container, 'view_manager').get('template_path_stack') or []
        return StackLoader(list(paths), suffix=_suffix(container))


class LoaderChainFactory(FactoryInterface):
    """
    Loader chain built from the container services named in ``larajinja.loader_chain``

    Raises:
        InvalidArgumentException: If a named service is not a Jinja loader
    """

    def __call__(self, container, requested_name: Optional[str] = None,
                 options: Optional[Dict[str, Any]] = None) -> ChainLoader:
        chain = ChainLoader()

        for loader_name in Module.options(container).get('loader_chain') or []:
            loader = container.make(loader_name)

            if not isinstance(loader, BaseLoader):
                raise InvalidArgumentException(
                    f'Loader "{loader_name}" must be a jinja2 BaseLoader; got type "{type(loader).__name__}" instead'
                )

            chain.add_loader(loader)

        return chain
