"""
View Model
Tree of templates, variables and rendering options
"""
from typing import Any, Dict, Iterator, List, Mapping, Optional


class ViewModel:
    """
    A template name, its variables, its options and its child models

    Usage:
        layout = ViewModel(template='layout/layout')
        page = ViewModel({'title': 'Home'}, template='app/index')
        layout.add_child(page)           # captured to "content"

        sidebar = ViewModel(template='app/sidebar')
        layout.add_child(sidebar, capture_to='sidebar')
    """

    def __init__(
        self,
        variables: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
        template: str = '',
        capture_to: Optional[str] = 'content',
        terminal: bool = False,
        append: bool = False
    ):
        self.template = template
        self.variables: Dict[str, Any] = dict(variables or {})
        self.options: Dict[str, Any] = dict(options or {})
        self.children: List['ViewModel'] = []
        self.capture_to = capture_to
        self.terminal = terminal
        self.append = append

    def get_template(self) -> str:
        return self.template

    def set_template(self, template: str) -> 'ViewModel':
        self.template = template
        return self

    def get_variables(self) -> Dict[str, Any]:
        return self.variables

    def get_variable(self, name: str, default: Any = None) -> Any:
        return self.variables.get(name, default)

    def set_variable(self, name: str, value: Any) -> 'ViewModel':
        self.variables[name] = value
        return self

    def set_variables(self, variables: Mapping[str, Any], overwrite: bool = False) -> 'ViewModel':
        """Merge variables into the model, or replace them all when overwrite is set"""
        if overwrite:
            self.variables = dict(variables)
        else:
            self.variables.update(variables)
        return self

    def get_options(self) -> Dict[str, Any]:
        return self.options

    def get_option(self, name: str, default: Any = None) -> Any:
        return self.options.get(name, default)

    def set_option(self, name: str, value: Any) -> 'ViewModel':
        self.options[name] = value
        return self

    def has_parent(self) -> bool:
        return bool(self.options.get('has_parent'))

    def add_child(self, child: 'ViewModel', capture_to: Optional[str] = None,
                  append: Optional[bool] = None) -> 'ViewModel':
        """
        Add a child model

        Args:
            child: Child view model
            capture_to: Parent variable receiving the child's output (keeps the child's own when None)
            append: Append to the capture variable instead of replacing it
        """
        if capture_to is not None:
            child.capture_to = capture_to
        if append is not None:
            child.append = append
        self.children.append(child)
        return self

    def get_children(self) -> List['ViewModel']:
        return list(self.children)

    def has_children(self) -> bool:
        return bool(self.children)

    def clear_children(self) -> 'ViewModel':
        self.children = []
        return self

    def __iter__(self) -> Iterator['ViewModel']:
        return iter(list(self.children))

    def count(self) -> int:
        return len(self.children)

    def __repr__(self):
        return f'ViewModel(template={self.template!r}, children={len(self.children)})'
