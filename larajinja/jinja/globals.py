"""
Helper Globals
Expose view helpers to Jinja templates as global functions
"""
from typing import Any, List

from jinja2 import Environment

from larajinja.logging import getLogger

logger = getLogger(__name__)


class HelperProxy:
    """Template-callable stand-in for a helper, resolved through the renderer on every call"""

    def __init__(self, renderer, name: str):
        self.renderer = renderer
        self.name = name

    def __call__(self, *args, **kwargs) -> Any:
        return self.renderer.call_helper(self.name, *args, **kwargs)

    def __repr__(self):
        return f'HelperProxy({self.name!r})'


def register_helper_globals(environment: Environment, renderer, include_framework_helpers: bool = True) -> List[str]:
    """
    Register helpers as Jinja globals

    Adds ``helper(name, *args)`` for any helper plus one global per
    registered helper name. Existing globals are never replaced.

    Example:
        {{ escape_html(user.bio) }}
        {{ partial('app/_card', {'item': item}) }}
        {{ helper('money', order.total) }}

    Returns:
        The helper names that became globals
    """
    environment.globals.setdefault('helper', renderer.call_helper)

    names = []
    jinja_helpers = renderer.get_jinja_helpers()
    if jinja_helpers is not None:
        names.extend(jinja_helpers.get_registered_services())
    if include_framework_helpers:
        names.extend(renderer.get_framework_helpers().get_registered_services())

    registered = []
    for name in names:
        if name in environment.globals:
            continue
        environment.globals[name] = HelperProxy(renderer, name)
        registered.append(name)

    logger.debug("Registered %d helper globals", len(registered))
    return registered
