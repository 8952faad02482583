"""
View Package
View models, renderer contracts, helpers and the generic rendering entry point
"""
from larajinja.view.contracts import (
    RendererInterface,
    RenderingStrategyInterface,
    ResolverInterface,
    TreeRendererInterface,
)
from larajinja.view.helpers import (
    AbstractHelper,
    EscapeHtml,
    HelperPluginManager,
    Partial,
    ViewModelHelper,
)
from larajinja.view.model import ViewModel
from larajinja.view.view import View

__all__ = [
    # Contracts
    'RendererInterface',
    'RenderingStrategyInterface',
    'ResolverInterface',
    'TreeRendererInterface',

    # Helpers
    'AbstractHelper',
    'EscapeHtml',
    'HelperPluginManager',
    'Partial',
    'ViewModelHelper',

    # Core
    'ViewModel',
    'View',
]
