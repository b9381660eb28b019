"""Translation scopes — Generic or bound to one profile.

A tagged variant rather than a nullable id: the store turns ``Generic``
into an ``IS NULL`` predicate, which a plain ``profile_id = NULL``
comparison would never match.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GenericScope:
    """Applies to every profile."""

    @property
    def profile_id(self) -> None:
        return None

    def __str__(self) -> str:
        return "generic"


@dataclass(frozen=True)
class ProfileScope:
    """Applies only to the profile with this id."""

    profile_id: int

    def __str__(self) -> str:
        return f"profile:{self.profile_id}"


Scope = GenericScope | ProfileScope

GENERIC = GenericScope()


def scope_for(profile_id: int | None) -> Scope:
    """Scope for an optional profile id (None means Generic)."""
    if profile_id is None:
        return GENERIC
    return ProfileScope(profile_id=profile_id)


def scope_name(scope: Scope) -> str:
    """``"generic"`` or ``"profile"`` — the tag only."""
    return "generic" if isinstance(scope, GenericScope) else "profile"
