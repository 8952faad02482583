"""
Jinja Helper Registry
Helpers that only exist for the Jinja renderer; looked up before the framework helpers
"""
from typing import Any, Dict, List, Mapping, Optional

from larajinja.view.helpers import HelperPluginManager


class JinjaHelperPluginManager(HelperPluginManager):
    """
    Helper registry without any built-in helpers

    Names it does not know fall through to the framework registry, so it only
    holds what the application registers for Jinja templates.
    """

    default_invokables: Dict[str, Any] = {}
    default_aliases: Dict[str, str] = {}

    def __init__(self, container=None, config: Optional[Mapping[str, Any]] = None,
                 config_sources: Optional[List[Any]] = None):
        super().__init__(container, config)
        self.config_sources: List[Any] = list(config_sources or [])
