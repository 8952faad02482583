"""
Jinja Loaders
Template loaders that can answer "does this template exist?" without compiling it
"""
import os
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, TemplateNotFound

from larajinja.defaults import DEFAULT_TEMPLATE_SUFFIX


class MapLoader(BaseLoader):
    """
    Loads templates from an explicit name -> file path map

    Example:
        loader = MapLoader({'layout/layout': '/srv/app/views/layout.j2'})
        loader.exists('layout/layout')  # True when the file is there
    """

    def __init__(self, template_map: Optional[Mapping[str, Union[str, Path]]] = None):
        self.template_map: Dict[str, str] = {}
        for name, path in (template_map or {}).items():
            self.add(name, path)

    def add(self, name: str, path: Union[str, Path]) -> 'MapLoader':
        self.template_map[name] = str(path)
        return self

    def exists(self, name: str) -> bool:
        path = self.template_map.get(name)
        return path is not None and os.path.isfile(path)

    def get_source(self, environment: Optional[Environment], template: str) -> Tuple[str, str, Callable[[], bool]]:
        if not self.exists(template):
            raise TemplateNotFound(template)

        filename = self.template_map[template]
        with open(filename, encoding='utf-8') as f:
            source = f.read()

        mtime = os.path.getmtime(filename)

        def uptodate() -> bool:
            try:
                return os.path.getmtime(filename) == mtime
            except OSError:
                return False

        return source, filename, uptodate

    def list_templates(self) -> List[str]:
        return sorted(self.template_map)


class StackLoader(FileSystemLoader):
    """
    Filesystem loader searching a stack of directories, adding a default suffix

    Template names without the suffix get it appended, so 'app/index'
    loads 'app/index.j2' from the first directory that has it.
    """

    def __init__(
        self,
        searchpath: Union[str, Path, Iterable[Union[str, Path]]] = (),
        suffix: str = DEFAULT_TEMPLATE_SUFFIX,
        encoding: str = 'utf-8',
        followlinks: bool = False
    ):
        super().__init__(searchpath, encoding=encoding, followlinks=followlinks)
        self.suffix = suffix.lstrip('.')

    def add_path(self, path: Union[str, Path]) -> 'StackLoader':
        """Add a directory searched before the existing ones"""
        self.searchpath.insert(0, os.fspath(path))
        return self

    def normalize_name(self, template: str) -> str:
        if self.suffix and not template.endswith(f'.{self.suffix}'):
            return f'{template}.{self.suffix}'
        return template

    def exists(self, name: str) -> bool:
        try:
            self.get_source(None, name)
        except TemplateNotFound:
            return False
        return True

    def get_source(self, environment: Optional[Environment], template: str):
        return super().get_source(environment, self.normalize_name(template))


class ChainLoader(ChoiceLoader):
    """
    Loader chain asked in order; the first loader knowing a template wins

    Example:
        chain = ChainLoader([MapLoader(template_map), StackLoader(paths)])
        chain.exists('app/index')
    """

    def __init__(self, loaders: Iterable[BaseLoader] = ()):
        super().__init__(list(loaders))

    def add_loader(self, loader: BaseLoader) -> 'ChainLoader':
        self.loaders.append(loader)
        return self

    def exists(self, name: Optional[str], environment: Optional[Environment] = None) -> bool:
        if not name:
            return False

        for loader in self.loaders:
            if hasattr(loader, 'exists'):
                if loader.exists(name):
                    return True
                continue

            try:
                loader.get_source(environment, name)
            except TemplateNotFound:
                continue
            return True

        return False
