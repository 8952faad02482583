"""
Jinja Resolver
Maps template names to compiled Jinja templates
"""
from typing import Optional

from jinja2 import Environment, Template

from larajinja.view.contracts import RendererInterface, ResolverInterface


class JinjaResolver(ResolverInterface):
    """Resolve template names through the Jinja environment (and its template cache)"""

    def __init__(self, environment: Environment):
        self.environment = environment

    def resolve(self, name: str, renderer: Optional[RendererInterface] = None) -> Template:
        """
        Load and compile a template

        Raises:
            jinja2.TemplateNotFound: If no loader knows the template
            jinja2.TemplateSyntaxError: If the template does not compile
        """
        return self.environment.get_template(name)
