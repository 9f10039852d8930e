"""Pluggy hook specifications for contributing graph strategies."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from stratagem.strategy.base import GraphStrategy

PROJECT_NAME = "stratagem"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class StratagemHookSpec:
    """Hook specifications for the stratagem plugin system."""

    @hookspec
    def register_graph_strategies(self) -> Sequence[GraphStrategy] | None:
        """Return strategies to chain, outermost first."""
