"""Render environment — typed slots scoped to a render subtree.

An :class:`EnvironmentValues` is an immutable mapping of
:class:`EnvironmentKey` slots to values.  Descending into a subtree that
overrides a slot produces a *copy* with that slot replaced, so the parent
mapping is never touched.

Rich's render protocol has no room for extra arguments, so the mapping in
effect for the current render is also bound to a ContextVar.
:func:`use_environment` binds it and restores the previous binding with
the ContextVar token on exit.  :class:`EnvironmentScope` is the renderable
form: it wraps a child renderable and binds an updated environment while
the child renders.
"""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from rich.console import Console, ConsoleOptions, RenderableType, RenderResult
    from rich.measure import Measurement

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EnvironmentKey(Generic[T]):
    """A named environment slot with a default value.

    Keys compare by identity: two keys with the same name are different
    slots.
    """

    __slots__ = ("default", "name")

    def __init__(self, name: str, default: T) -> None:
        self.name = name
        self.default = default

    def __repr__(self) -> str:
        return f"EnvironmentKey({self.name!r})"


class EnvironmentValues(Mapping[EnvironmentKey[Any], Any]):
    """Immutable mapping of environment slots.

    Reading a slot that was never set returns the key's default, so lookups
    are total.  Iteration and ``len`` cover explicitly set slots only.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[EnvironmentKey[Any], Any] | None = None) -> None:
        self._values: dict[EnvironmentKey[Any], Any] = dict(values or {})

    def __getitem__(self, key: EnvironmentKey[T]) -> T:
        if key in self._values:
            return self._values[key]  # type: ignore[no-any-return]
        return key.default

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[EnvironmentKey[Any]]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k.name}={v!r}" for k, v in self._values.items())
        return f"EnvironmentValues({inner})"

    def updating(self, key: EnvironmentKey[T], value: T) -> EnvironmentValues:
        """Return a copy with *key* set to *value*."""
        return EnvironmentValues({**self._values, key: value})


# ── Ambient binding ──────────────────────────────────────────────────

_EMPTY = EnvironmentValues()
_current_environment: ContextVar[EnvironmentValues] = ContextVar(
    "_current_environment", default=_EMPTY
)


def current_environment() -> EnvironmentValues:
    """Return the environment bound for the render in progress."""
    return _current_environment.get()


@contextmanager
def use_environment(values: EnvironmentValues) -> Generator[EnvironmentValues]:
    """Bind *values* as the current environment for the ``with`` body."""
    token = _current_environment.set(values)
    try:
        yield values
    finally:
        _current_environment.reset(token)


@contextmanager
def environment_override(key: EnvironmentKey[T], value: T) -> Generator[EnvironmentValues]:
    """Bind a copy of the current environment with *key* replaced."""
    logger.debug("Environment override: %s=%r", key.name, value)
    with use_environment(current_environment().updating(key, value)) as values:
        yield values


# ── Renderable modifier ──────────────────────────────────────────────


class EnvironmentScope:
    """Renderable that applies an environment override to its child.

    The child is rendered to completion inside the scope and the segments
    are yielded afterwards, so the override is never visible to sibling
    renderables while this generator is suspended.
    """

    def __init__(self, renderable: RenderableType, key: EnvironmentKey[Any], value: Any) -> None:
        self.renderable = renderable
        self.key = key
        self.value = value

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        with environment_override(self.key, self.value):
            segments = list(console.render(self.renderable, options))
        yield from segments

    def __rich_measure__(self, console: Console, options: ConsoleOptions) -> Measurement:
        from rich.measure import Measurement

        with environment_override(self.key, self.value):
            return Measurement.get(console, options, self.renderable)


# ── Host metrics ─────────────────────────────────────────────────────

TEXT_SCALE: EnvironmentKey[float] = EnvironmentKey("text_scale", 1.0)


def text_scale(renderable: RenderableType, factor: float) -> EnvironmentScope:
    """Scale reserved metrics (bullet columns) by *factor* for *renderable*."""
    return EnvironmentScope(renderable, TEXT_SCALE, factor)
