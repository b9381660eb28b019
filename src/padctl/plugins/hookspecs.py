"""Pluggy hook specifications for padctl label events.

Hooks fire synchronously after the owning transaction has committed, so
a plugin always observes persisted state.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("padctl")
hookimpl = pluggy.HookimplMarker("padctl")


class PadctlHookSpec:
    """Hook specifications for the padctl plugin system."""

    @hookspec
    def post_reconcile(
        self,
        profile_id: int | None,
        saved: int,
        deleted: int,
    ) -> None:
        """Called after a bulk macro-label edit commits.

        *profile_id* is None for the Generic scope.
        """

    @hookspec
    def post_layer_reconcile(
        self,
        profile_id: int | None,
        saved: int,
        deleted: int,
    ) -> None:
        """Called after a bulk layer-label edit commits."""

    @hookspec
    def post_seed(self, profile_id: int | None, applied: int) -> None:
        """Called after a seed catalog is applied."""
