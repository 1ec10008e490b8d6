from dataclasses import dataclass, field
from typing import Literal, NewType

import pytest

from namedargs.bindings import Accessor
from namedargs.converters import (
    ConverterRegistry,
    converter,
    dataclass_converter,
    default_registry,
    resolve_converter,
)
from namedargs.errors import MissingArgumentError, TypeMismatchError
from namedargs.parser import parse_args


@dataclass
class Server:
    host: str
    port: int = 8080
    tags: list = field(default_factory=list)
    label: str = field(default="", init=False)


class Window:
    def __init__(self, width: int = 0, title: str = ""):
        self.width = width
        self.title = title


def test_registry_register_get_and_contains():
    registry = ConverterRegistry()

    def convert(accessor: Accessor) -> Window:
        return Window()

    registry.register(Window, convert)

    assert Window in registry
    assert registry.get(Window) is convert
    registry.unregister(Window)
    assert Window not in registry
    with pytest.raises(KeyError):
        registry.get(Window)


def test_parse_args_dispatches_to_registered_converter():
    registry = ConverterRegistry()

    @converter(Window, registry=registry)
    def convert(accessor: Accessor) -> Window:
        window = Window()
        accessor.assign_or(window, "width", 640)
        accessor.assign_or(window, "title", "untitled")
        return window

    window = parse_args("title = 'main', width = 1024", Window, registry=registry)

    assert (window.width, window.title) == (1024, "main")
    assert Window not in default_registry


def test_converter_decorator_uses_default_registry():
    @converter(Window)
    def convert(accessor: Accessor) -> Window:
        return Window(width=accessor.value_or("width", 1))

    try:
        assert parse_args("width = 3", Window).width == 3
    finally:
        default_registry.unregister(Window)


def test_registered_converter_takes_precedence_over_dataclass_fields():
    registry = ConverterRegistry()
    registry.register(Server, lambda accessor: Server(host="fixed"))

    assert parse_args("host = 'ignored'", Server, registry=registry).host == "fixed"


def test_dataclass_converter_uses_fields_and_defaults():
    server = parse_args("host = 'example.org'", Server)

    assert server.host == "example.org"
    assert server.port == 8080
    assert server.tags == []
    assert server.label == ""


def test_dataclass_converter_checks_field_types():
    with pytest.raises(TypeMismatchError):
        parse_args("host = 'h', port = '80'", Server)


def test_dataclass_converter_requires_fields_without_defaults():
    with pytest.raises(MissingArgumentError) as excinfo:
        parse_args("port = 1", Server)

    assert excinfo.value.key == "host"


def test_dataclass_converter_rejects_non_dataclasses():
    with pytest.raises(TypeError):
        dataclass_converter(Window)


def test_resolve_converter_accepts_plain_callables():
    def routine(accessor: Accessor) -> int:
        return len(accessor.keys())

    assert resolve_converter(routine) is routine
    assert parse_args("a = 1, b = 2", routine) == 2


def test_resolve_converter_rejects_unknown_targets():
    with pytest.raises(TypeError):
        resolve_converter(Window, ConverterRegistry())
    with pytest.raises(TypeError):
        resolve_converter(42)


Port = NewType("Port", int)


@dataclass
class Listener:
    mode: Literal["fast", "slow"] = "fast"
    port: Port = Port(80)


def test_dataclass_converter_handles_literal_and_new_type_fields():
    listener = parse_args("mode = 'slow', port = 8080", Listener)

    assert listener == Listener(mode="slow", port=Port(8080))
    assert parse_args("", Listener) == Listener()


def test_dataclass_converter_rejects_values_outside_literal_or_new_type():
    with pytest.raises(TypeMismatchError) as excinfo:
        parse_args("mode = 'medium'", Listener)
    assert excinfo.value.key == "mode"

    with pytest.raises(TypeMismatchError) as excinfo:
        parse_args("port = 'http'", Listener)
    assert excinfo.value.key == "port"
