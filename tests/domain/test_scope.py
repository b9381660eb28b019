"""Tests for translation scopes."""

from padctl.domain.scope import GENERIC, GenericScope, ProfileScope, scope_for, scope_name


class TestScopeFor:
    def test_none_is_generic(self) -> None:
        assert scope_for(None) is GENERIC

    def test_id_is_profile(self) -> None:
        assert scope_for(5) == ProfileScope(profile_id=5)


class TestScopeValues:
    def test_generic_has_no_profile_id(self) -> None:
        assert GENERIC.profile_id is None
        assert GenericScope() == GENERIC

    def test_profile_scopes_compare_by_id(self) -> None:
        assert ProfileScope(1) == ProfileScope(1)
        assert ProfileScope(1) != ProfileScope(2)

    def test_str(self) -> None:
        assert str(GENERIC) == "generic"
        assert str(ProfileScope(7)) == "profile:7"

    def test_scope_name(self) -> None:
        assert scope_name(GENERIC) == "generic"
        assert scope_name(ProfileScope(7)) == "profile"
