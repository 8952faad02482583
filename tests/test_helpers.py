"""Unit tests for the helper registry and the built-in helpers."""

import pytest
from jinja2 import Environment
from markupsafe import Markup

from larajinja.exceptions import InvalidArgumentException, InvalidHelperException, ServiceNotFoundException
from larajinja.jinja import ChainLoader, JinjaRenderer, JinjaResolver, StackLoader, register_helper_globals
from larajinja.view import AbstractHelper, EscapeHtml, HelperPluginManager, Partial, ViewModel, ViewModelHelper


class Counter(AbstractHelper):
    def __init__(self, start: int = 0) -> None:
        self.value = start

    def __call__(self) -> int:
        self.value += 1
        return self.value


class CounterFactory:
    def __call__(self, container, name, options=None):
        return Counter(**(options or {"start": 10}))


def counter_factory(container, name, options=None):
    return Counter(100)


class TestHelperPluginManager:
    """Registration and retrieval."""

    def test_default_helpers(self) -> None:
        helpers = HelperPluginManager()

        assert isinstance(helpers.get("view_model"), ViewModelHelper)
        assert isinstance(helpers.get("partial"), Partial)
        assert isinstance(helpers.get("escape_html"), EscapeHtml)

    def test_default_aliases(self) -> None:
        helpers = HelperPluginManager()

        assert helpers.get("viewModel") is helpers.get("view_model")
        assert helpers.has("escapeHtml")

    def test_unknown_helper(self) -> None:
        helpers = HelperPluginManager()

        assert helpers.has("nope") is False
        with pytest.raises(ServiceNotFoundException, match="'nope'"):
            helpers.get("nope")

    def test_instances_are_shared(self) -> None:
        helpers = HelperPluginManager()
        helpers.set_invokable("counter", Counter)

        assert helpers.get("counter") is helpers.get("counter")

    def test_unshared_helper_builds_new_instances(self) -> None:
        helpers = HelperPluginManager(config={"invokables": {"counter": Counter}, "shared": {"counter": False}})

        assert helpers.get("counter") is not helpers.get("counter")

    def test_options_build_a_fresh_instance(self) -> None:
        helpers = HelperPluginManager()
        helpers.set_invokable("counter", Counter)
        shared = helpers.get("counter")

        configured = helpers.get("counter", {"start": 5})

        assert configured is not shared
        assert configured() == 6
        assert helpers.get("counter") is shared

    def test_invokable_by_dotted_path(self) -> None:
        helpers = HelperPluginManager()
        helpers.set_invokable("counter", f"{__name__}.Counter")

        assert isinstance(helpers.get("counter"), Counter)

    def test_factory_class_path(self) -> None:
        helpers = HelperPluginManager(container="container")
        helpers.set_factory("counter", f"{__name__}.CounterFactory")

        assert helpers.get("counter")() == 11

    def test_factory_function(self) -> None:
        helpers = HelperPluginManager()
        helpers.set_factory("counter", counter_factory)

        assert helpers.get("counter")() == 101

    def test_later_registration_replaces_earlier(self) -> None:
        helpers = HelperPluginManager()
        helpers.set_factory("escape_html", counter_factory)

        assert isinstance(helpers.get("escape_html"), Counter)

        helpers.set_invokable("escape_html", EscapeHtml)

        assert isinstance(helpers.get("escape_html"), EscapeHtml)

    def test_registration_replaces_alias(self) -> None:
        helpers = HelperPluginManager()
        helpers.set_service("viewModel", Counter())

        assert isinstance(helpers.get("viewModel"), Counter)
        assert isinstance(helpers.get("view_model"), ViewModelHelper)

    def test_circular_alias(self) -> None:
        helpers = HelperPluginManager(config={"aliases": {"a": "b", "b": "a"}})

        with pytest.raises(InvalidHelperException, match="Circular"):
            helpers.has("a")

    def test_invalid_helper_is_rejected(self) -> None:
        helpers = HelperPluginManager()
        helpers.set_service("broken", "not a helper")

        with pytest.raises(InvalidHelperException):
            helpers.get("broken")

        assert issubclass(InvalidHelperException, InvalidArgumentException)

    def test_plain_callable_is_a_valid_helper(self) -> None:
        helpers = HelperPluginManager()
        helpers.set_service("upper", str.upper)

        assert helpers.get("upper")("a") == "A"

    def test_renderer_is_injected(self) -> None:
        helpers = HelperPluginManager()
        cached = helpers.get("partial")
        renderer = object()

        helpers.set_renderer(renderer)

        assert cached.get_view() is renderer
        assert helpers.get("escape_html").get_view() is renderer

    def test_registered_services(self) -> None:
        helpers = HelperPluginManager(config={"invokables": {"counter": Counter}})

        assert helpers.get_registered_services() == sorted([
            "counter", "escapeHtml", "escape_html", "partial", "viewModel", "view_model", "viewmodel",
        ])


class TestBuiltinHelpers:
    """The helpers every registry starts with."""

    def test_escape_html(self) -> None:
        assert EscapeHtml()('<a href="x">&</a>') == "&lt;a href=&#34;x&#34;&gt;&amp;&lt;/a&gt;"

    def test_escape_html_non_string(self) -> None:
        assert EscapeHtml()(42) == "42"

    def test_partial_without_arguments_returns_itself(self) -> None:
        partial = Partial()

        assert partial() is partial

    def test_partial_renders_names_and_models(self, renderer) -> None:
        partial = Partial().set_view(renderer)

        assert partial("app/card", {"title": "T"}) == "[T]"
        assert partial(ViewModel({"title": "M"}, template="app/card")) == "[M]"

    def test_view_model_helper(self) -> None:
        helper = ViewModelHelper()
        root = ViewModel(template="layout/layout")

        assert not helper.has_current()
        helper.set_root(root).set_current(root)

        assert helper.has_root()
        assert helper.get_current() is root


class TestAutoescapedTemplates:
    """Helper output is safe markup and is not escaped twice."""

    def test_escape_html_returns_markup(self) -> None:
        assert isinstance(EscapeHtml()("<b>"), Markup)

    def test_escape_html_escapes_once(self) -> None:
        environment = Environment(autoescape=True)
        template = environment.from_string("{{ escape_html(x) }}")

        assert template.render(escape_html=EscapeHtml(), x="<b>") == "&lt;b&gt;"

    def test_partial_output_is_not_escaped(self, view, views_dir) -> None:
        environment = Environment(loader=ChainLoader([StackLoader([str(views_dir)])]), autoescape=True)
        renderer = JinjaRenderer(view, environment, JinjaResolver(environment))
        register_helper_globals(environment, renderer)

        assert renderer.render("app/partial", {"name": "<Zed>"}) == "<div>Hello &lt;Zed&gt;</div>"

    def test_partial_for_unknown_template(self, renderer) -> None:
        assert Partial().set_view(renderer)("missing/template") is None
