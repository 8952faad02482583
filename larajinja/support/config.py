"""
Config Manager - Laravel-style configuration access
Access nested configuration using dot notation
"""

import importlib
import threading
from typing import Any, Dict, Mapping, Optional

_MISSING = object()


def copy_structure(value: Any) -> Any:
    """Copy nested dicts and lists; every other value is shared, not copied"""
    if isinstance(value, Mapping):
        return {key: copy_structure(item) for key, item in value.items()}
    if isinstance(value, list):
        return [copy_structure(item) for item in value]
    return value


def merge_config(base: Mapping, override: Mapping) -> Dict[str, Any]:
    """
    Recursively merge two configuration mappings

    Nested dicts are merged key by key, lists are concatenated (items already
    present in the base list are not repeated) and any other value in
    ``override`` replaces the one in ``base``. Neither argument is modified;
    values other than dicts and lists are shared with the result.

    Example:
        merge_config(
            {'helpers': {'configs': ['a']}, 'suffix': 'j2'},
            {'helpers': {'configs': ['b']}, 'suffix': 'html'}
        )
        # {'helpers': {'configs': ['a', 'b']}, 'suffix': 'html'}
    """
    merged = copy_structure(base)

    for key, value in override.items():
        current = merged.get(key, _MISSING)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config(current, value)
        elif isinstance(current, list) and isinstance(value, (list, tuple)):
            merged[key] = current + [copy_structure(item) for item in value if item not in current]
        else:
            merged[key] = copy_structure(value)

    return merged


class Config:
    """
    Configuration store with dot notation access

    Usage:
        config = Config({'larajinja': {'suffix': 'j2'}})

        # Get config value
        suffix = config.get('larajinja.suffix')

        # With default
        stack = config.get('view_manager.template_path_stack', [])

        # Set runtime value
        config.set('larajinja.environment.autoescape', True)

        # Check existence
        if config.has('view_manager.template_map'):
            ...
    """

    def __init__(self, data: Optional[Mapping] = None):
        self._lock = threading.Lock()
        self._data: Dict[str, Any] = copy_structure(data or {})

    @classmethod
    def from_module(cls, module_path: str) -> 'Config':
        """
        Build a Config from a Python config module

        Every upper-case module attribute becomes a lower-case top-level key,
        so ``VIEW_MANAGER = {...}`` in ``config/view.py`` is read as
        ``config.get('view_manager')``.

        Args:
            module_path: Dotted module path (e.g., 'config.view')
        """
        module = importlib.import_module(module_path)
        data = {
            name.lower(): getattr(module, name)
            for name in dir(module)
            if name.isupper()
        }
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation

        Args:
            key: Config key in dot notation (e.g., 'view_manager.template_map')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value: Any = self._data
        for part in key.split('.'):
            if not isinstance(value, Mapping) or part not in value:
                return default
            value = value[part]
        return value

    def __getitem__(self, key: str) -> Any:
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def set(self, key: str, value: Any):
        """
        Set configuration value at runtime

        Intermediate sections are created as needed.
        """
        parts = key.split('.')
        with self._lock:
            section = self._data
            for part in parts[:-1]:
                if not isinstance(section.get(part), dict):
                    section[part] = {}
                section = section[part]
            section[parts[-1]] = value

    def has(self, key: str) -> bool:
        """Check if configuration key exists"""
        return self.get(key, _MISSING) is not _MISSING

    def merge(self, data: Mapping):
        """Merge ``data`` on top of the current configuration (``data`` wins)"""
        with self._lock:
            self._data = merge_config(self._data, data)

    def merge_defaults(self, defaults: Mapping):
        """Merge ``defaults`` underneath the current configuration (current values win)"""
        with self._lock:
            self._data = merge_config(defaults, self._data)

    def all(self) -> Dict[str, Any]:
        """Get a copy of the whole configuration (dicts and lists copied, values shared)"""
        return copy_structure(self._data)

    def __repr__(self):
        return f'Config({self._data!r})'
