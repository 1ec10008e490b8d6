import dataclasses
import logging
from collections.abc import Callable
from threading import RLock
from typing import Any, TypeVar

from namedargs.bindings import Accessor, type_hints
from namedargs.errors import MissingArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Converter = Callable[[Accessor], Any]


class ConverterRegistry:
    def __init__(self):
        self._lock = RLock()
        self._converters: dict[type, Converter] = {}

    def register(self, target_type: type, converter: Converter) -> None:
        with self._lock:
            self._converters[target_type] = converter

    def unregister(self, target_type: type) -> None:
        with self._lock:
            self._converters.pop(target_type, None)

    def get(self, target_type: type) -> Converter:
        with self._lock:
            if target_type not in self._converters:
                raise KeyError(f"No converter registered for {target_type.__qualname__}")
            return self._converters[target_type]

    def __contains__(self, target_type: object) -> bool:
        with self._lock:
            return target_type in self._converters


default_registry = ConverterRegistry()


def converter(
    target_type: type[T], registry: ConverterRegistry | None = None
) -> Callable[[Callable[[Accessor], T]], Callable[[Accessor], T]]:
    def decorate(fn: Callable[[Accessor], T]) -> Callable[[Accessor], T]:
        (registry or default_registry).register(target_type, fn)
        return fn

    return decorate


def dataclass_converter(cls: type[T]) -> Callable[[Accessor], T]:
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise TypeError(f"{cls!r} is not a dataclass type")

    def convert(accessor: Accessor) -> T:
        hints = type_hints(cls)
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            if not field.init:
                continue
            if field.default is not dataclasses.MISSING:
                default = field.default
            elif field.default_factory is not dataclasses.MISSING:
                default = field.default_factory()
            elif field.name in accessor:
                default = None
            else:
                raise MissingArgumentError(
                    f"missing required argument: {field.name!r}", key=field.name
                )
            kwargs[field.name] = accessor.value_or(field.name, default, hints.get(field.name))
        return cls(**kwargs)

    return convert


def resolve_converter(target: Any, registry: ConverterRegistry | None = None) -> Converter:
    registry = registry or default_registry
    if isinstance(target, type):
        if target in registry:
            logger.debug("using registered converter for %s", target.__qualname__)
            return registry.get(target)
        if dataclasses.is_dataclass(target):
            logger.debug("using dataclass converter for %s", target.__qualname__)
            return dataclass_converter(target)
        raise TypeError(
            f"No converter registered for {target.__qualname__} and it is not a dataclass"
        )
    if callable(target):
        return target
    raise TypeError(f"Expected a conversion routine or a target type, got {target!r}")
