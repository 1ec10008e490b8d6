"""Parsed key/value bindings and the typed accessor handed to converters."""

from __future__ import annotations

import types
import typing
from bisect import bisect_left
from collections.abc import Iterator, MutableMapping
from dataclasses import dataclass
from typing import Annotated, Any, Literal, Union

from namedargs.errors import DuplicateKeyError, TypeMismatchError

Value = Union[int, str]


@dataclass(slots=True, frozen=True)
class Binding:
    """A single ``key = value`` pair taken from the input."""

    key: str
    value: Value


class BindingStore:
    """Bindings of one parse, sorted by key once parsing completes.

    Keys are unique: ``add`` rejects a key seen earlier in the same parse.
    After ``finalize`` the store is read-only and lookups use binary search.
    """

    def __init__(self) -> None:
        self._bindings: list[Binding] = []
        self._keys: list[str] = []
        self._seen: set[str] = set()
        self._finalized = False

    @property
    def finalized(self) -> bool:
        return self._finalized

    def ensure_new(self, key: str, *, position: int | None = None) -> None:
        if key in self._seen:
            raise DuplicateKeyError(
                f"argument already exists: {key!r}", key=key, position=position
            )

    def add(self, key: str, value: Value, *, position: int | None = None) -> Binding:
        if self._finalized:
            raise RuntimeError("cannot add bindings to a finalized store")
        self.ensure_new(key, position=position)
        binding = Binding(key, value)
        self._seen.add(key)
        self._bindings.append(binding)
        return binding

    def finalize(self) -> BindingStore:
        if not self._finalized:
            self._bindings.sort(key=lambda binding: binding.key)
            self._keys = [binding.key for binding in self._bindings]
            self._finalized = True
        return self

    def find(self, key: str) -> Binding | None:
        if not self._finalized:
            for binding in self._bindings:
                if binding.key == key:
                    return binding
            return None

        index = bisect_left(self._keys, key)
        if index < len(self._keys) and self._keys[index] == key:
            return self._bindings[index]
        return None

    def keys(self) -> list[str]:
        return [binding.key for binding in self._bindings]

    def to_dict(self) -> dict[str, Value]:
        return {binding.key: binding.value for binding in self._bindings}

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[Binding]:
        return iter(self._bindings)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.find(key) is not None

    def __repr__(self) -> str:
        return f"BindingStore({self.to_dict()!r})"


class Accessor:
    """Read-only, type-checked view over a finalized BindingStore."""

    def __init__(self, store: BindingStore):
        self._store = store.finalize()

    @property
    def store(self) -> BindingStore:
        return self._store

    def keys(self) -> list[str]:
        return self._store.keys()

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def value_or(self, key: str, default: Any, as_type: Any = None) -> Any:
        """Return the value bound to ``key``, or ``default`` when absent.

        The stored value must be assignable to ``as_type`` (or to the type of
        ``default`` when ``as_type`` is omitted); otherwise
        ``TypeMismatchError`` is raised.
        """
        binding = self._store.find(key)
        if binding is None:
            return default
        target = as_type if as_type is not None else _type_of_default(default)
        return _coerce(key, binding.value, target)

    def assign_or(
        self,
        target: Any,
        attr: str,
        default: Any,
        *,
        key: str | None = None,
        as_type: Any = None,
    ) -> Any:
        """Set ``target.attr`` (or ``target[attr]``) from the binding ``key``.

        ``key`` defaults to ``attr``. When the key is absent the slot receives
        ``default``. The accepted type comes from ``as_type``, then from the
        annotation of ``attr`` on the target's class, then from ``default``.
        Returns the value that was assigned.
        """
        if as_type is None and not isinstance(target, MutableMapping):
            as_type = _annotation_for(type(target), attr)
        value = self.value_or(attr if key is None else key, default, as_type)
        if isinstance(target, MutableMapping):
            target[attr] = value
        else:
            setattr(target, attr, value)
        return value


def _type_of_default(default: Any) -> Any:
    return None if default is None else type(default)


def type_hints(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError):
        # unresolvable forward references; callers fall back to the default's type
        return {}


def _annotation_for(cls: type, attr: str) -> Any:
    return type_hints(cls).get(attr)


_NO_MATCH = object()


def _convert(value: Value, target: Any, widen: bool = True) -> Any:
    """Return ``value`` as stored in a ``target`` slot, or ``_NO_MATCH``."""
    if target is None or target is Any or target is object:
        return value

    supertype = getattr(target, "__supertype__", None)
    if supertype is not None:
        # typing.NewType
        return _convert(value, supertype, widen)

    origin = typing.get_origin(target)
    if origin is Literal:
        for allowed in typing.get_args(target):
            if type(allowed) is type(value) and allowed == value:
                return value
        return _NO_MATCH
    if origin is Annotated:
        return _convert(value, typing.get_args(target)[0], widen)
    if origin is Union or isinstance(target, types.UnionType):
        members = [arg for arg in typing.get_args(target) if arg is not type(None)]
        if not members:
            return value
        # exact matches win over int -> float widening
        for allow_widening in (False, True) if widen else (False,):
            for member in members:
                converted = _convert(value, member, allow_widening)
                if converted is not _NO_MATCH:
                    return converted
        return _NO_MATCH
    if origin is not None:
        target = origin

    if not isinstance(target, type):
        return _NO_MATCH
    try:
        if isinstance(value, target):
            return value
    except TypeError:
        # protocols without runtime_checkable
        return _NO_MATCH
    if widen and target is float and isinstance(value, int):
        return float(value)
    return _NO_MATCH


def _describe(target: Any) -> str:
    if isinstance(target, type):
        return target.__name__
    return repr(target)


def _coerce(key: str, value: Value, target: Any) -> Any:
    converted = _convert(value, target)
    if converted is _NO_MATCH:
        raise TypeMismatchError(
            f"value is not assignable: {key!r} holds {type(value).__name__}, "
            f"expected {_describe(target)}",
            key=key,
            expected=target,
            actual=type(value),
        )
    return converted
