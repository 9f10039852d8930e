"""Shared pytest fixtures and test strategies for stratagem tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from stratagem.domain.context import StrategyContext
from stratagem.domain.types import ExtensionPoint
from stratagem.strategy.base import GraphStrategy


@pytest.fixture
def ctx() -> StrategyContext[Any]:
    """A context whose identity tests can check for."""
    return StrategyContext(current=object(), graph=object())


# ---------------------------------------------------------------------------
# Test strategies
# ---------------------------------------------------------------------------


class _InterceptAll(GraphStrategy):
    """Routes every extension point through ``_transformer(point, ctx)``.

    Records each extraction as ``(point, ctx)`` in ``self.extractions``.
    """

    def __init__(self) -> None:
        self.extractions: list[tuple[ExtensionPoint, StrategyContext[Any]]] = []

    def _transformer(
        self, point: ExtensionPoint, ctx: StrategyContext[Any]
    ) -> Callable[[Any], Any]:
        raise NotImplementedError


def _intercept(point: ExtensionPoint) -> Callable[..., Any]:
    def method(self: _InterceptAll, ctx: StrategyContext[Any]) -> Callable[[Any], Any]:
        self.extractions.append((point, ctx))
        return self._transformer(point, ctx)

    method.__name__ = point.method_name
    return method


for _point in ExtensionPoint:
    setattr(_InterceptAll, _point.method_name, _intercept(_point))


class AppendStrategy(_InterceptAll):
    """Appends *suffix* to whatever the wrapped operation returns."""

    def __init__(self, suffix: str) -> None:
        super().__init__()
        self.suffix = suffix

    def _transformer(
        self, point: ExtensionPoint, ctx: StrategyContext[Any]
    ) -> Callable[[Any], Any]:
        def transform(op: Callable[..., Any]) -> Callable[..., Any]:
            def wrapped(*args: Any) -> Any:
                return op(*args) + self.suffix

            return wrapped

        return transform

    def __repr__(self) -> str:
        return f"AppendStrategy({self.suffix!r})"


class TraceStrategy(_InterceptAll):
    """Records ``label`` in a shared trace before and after the wrapped call."""

    def __init__(self, label: str, trace: list[str]) -> None:
        super().__init__()
        self.label = label
        self.trace = trace

    def _transformer(
        self, point: ExtensionPoint, ctx: StrategyContext[Any]
    ) -> Callable[[Any], Any]:
        def transform(op: Callable[..., Any]) -> Callable[..., Any]:
            def wrapped(*args: Any) -> Any:
                self.trace.append(f"{self.label}>")
                result = op(*args)
                self.trace.append(f"<{self.label}")
                return result

            return wrapped

        return transform


class FixedStrategy(_InterceptAll):
    """Returns the same transformer object from every extraction."""

    def __init__(self, transformer: Callable[[Any], Any]) -> None:
        super().__init__()
        self.transformer = transformer

    def _transformer(
        self, point: ExtensionPoint, ctx: StrategyContext[Any]
    ) -> Callable[[Any], Any]:
        return self.transformer


class FailingStrategy(_InterceptAll):
    """Raises from every extraction."""

    def __init__(self, exc: Exception) -> None:
        super().__init__()
        self.exc = exc

    def _transformer(
        self, point: ExtensionPoint, ctx: StrategyContext[Any]
    ) -> Callable[[Any], Any]:
        raise self.exc


def extract(strategy: GraphStrategy, point: ExtensionPoint, ctx: StrategyContext[Any]) -> Any:
    """Call the ``*_strategy`` method of *strategy* for *point*."""
    return getattr(strategy, point.method_name)(ctx)
