"""
Class Loader
Dynamic class loading utility for importing classes and functions from dotted paths
"""
import importlib
import inspect
from typing import Any, Optional, Type


class ClassLoader:
    """
    Utility for dynamically loading classes and functions from string paths

    Example:
        # Load a class
        cls = ClassLoader.load('larajinja.view.helpers.Partial')

        # Load it only if the path names a class
        cls = ClassLoader.find_class('app.views.HelperConfig')
        if cls is not None:
            config = cls()
    """

    @staticmethod
    def load(class_path: str) -> Any:
        """
        Load an attribute from a dotted path string

        Args:
            class_path: Full dotted path (e.g., 'larajinja.view.helpers.Partial')

        Returns:
            The loaded object (not instantiated)

        Raises:
            ValueError: If the path has no module part
            ImportError: If module cannot be imported
            AttributeError: If the attribute doesn't exist in module
        """
        if '.' not in class_path:
            raise ValueError(f"'{class_path}' is not a dotted path")

        module_path, attribute = class_path.rsplit('.', 1)
        module = __import__(module_path, fromlist=[attribute])
        return getattr(module, attribute)

    @staticmethod
    def find_class(class_path: Any) -> Optional[Type]:
        """
        Return the class named by a dotted path, or None when the path does not name a class

        A path whose module does not exist is "not a class", so callers can
        fall back to other interpretations of the same string. Errors raised
        while importing a module that does exist propagate.

        Raises:
            ImportError: If the named module exists but fails to import
        """
        if not isinstance(class_path, str) or '.' not in class_path:
            return None

        module_path, attribute = class_path.rsplit('.', 1)
        try:
            module = importlib.import_module(module_path)
        except ModuleNotFoundError as e:
            missing = e.name or ''
            if missing and (module_path == missing or module_path.startswith(f'{missing}.')):
                return None
            raise

        loaded = getattr(module, attribute, None)
        return loaded if inspect.isclass(loaded) else None
