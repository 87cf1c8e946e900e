"""Unit tests for the delegation guard.

Tests cover:
- Self-modification rejected before anything else
- Unknown names rejected even for wildcard holders
- Malformed requests (None, scalar string, mapping, non-string members)
- Wildcard holders granting anything, including '*'
- Non-holders granting '*'
- First unheld permission named, in sorted order
- Empty request revokes everything
- Randomized ordering properties (fixed seed)
"""

import random

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.authorization import can_delegate
from src.domain.enums.permission import WILDCARD_PERMISSION, PermissionName
from src.domain.errors import DelegationError

GRANTER = 1
TARGET = 2

NAMES = [m.value for m in PermissionName if m is not PermissionName.WILDCARD]


def _error(result) -> DelegationError:
    assert isinstance(result, Failure)
    return result.error


@pytest.mark.unit
class TestSelfModification:
    """Test the self-modification check."""

    def test_same_id_is_rejected(self, vocabulary):
        result = can_delegate(GRANTER, {"*"}, GRANTER, ["view_users"], vocabulary)

        assert _error(result).code == ErrorCode.SELF_MODIFICATION

    @pytest.mark.parametrize(
        "requested",
        [None, "view_users", {"a": 1}, ["not_a_permission"], [], ["*"], [1, 2]],
    )
    def test_self_check_precedes_every_other_check(self, vocabulary, requested):
        result = can_delegate(7, set(), 7, requested, vocabulary)

        assert _error(result).code == ErrorCode.SELF_MODIFICATION

    def test_self_modification_for_random_inputs(self, vocabulary):
        rng = random.Random(42)
        for _ in range(200):
            granter_id = rng.randint(1, 1000)
            held = {n for n in NAMES if rng.random() < 0.5}
            requested = [n for n in NAMES + ["bogus"] if rng.random() < 0.3]
            result = can_delegate(granter_id, held, granter_id, requested, vocabulary)
            assert _error(result).code == ErrorCode.SELF_MODIFICATION


@pytest.mark.unit
class TestUnknownPermission:
    """Test vocabulary validation."""

    def test_unknown_names_are_reported_sorted(self, vocabulary):
        result = can_delegate(
            GRANTER, {"view_users"}, TARGET, ["zap", "view_users", "fly"], vocabulary
        )

        error = _error(result)
        assert error.code == ErrorCode.UNKNOWN_PERMISSION
        assert error.permissions == ("fly", "zap")

    def test_wildcard_holder_cannot_grant_unknown_names(self, vocabulary):
        result = can_delegate(GRANTER, {"*"}, TARGET, ["manage_printers"], vocabulary)

        assert _error(result).code == ErrorCode.UNKNOWN_PERMISSION

    def test_unknown_names_reported_before_shape_problems(self, vocabulary):
        result = can_delegate(GRANTER, {"*"}, TARGET, ["fly", 3], vocabulary)

        error = _error(result)
        assert error.code == ErrorCode.UNKNOWN_PERMISSION
        assert error.permissions == ("fly",)


@pytest.mark.unit
class TestMalformedInput:
    """Test request shape validation."""

    @pytest.mark.parametrize(
        "requested",
        [
            None,
            "view_users",
            b"view_users",
            {"view_users": True},
            42,
            ["view_users", 5],
            ["view_users", None],
            [["view_users"]],
        ],
    )
    def test_malformed_requests_are_rejected(self, vocabulary, requested):
        result = can_delegate(GRANTER, {"*"}, TARGET, requested, vocabulary)

        error = _error(result)
        assert error.code == ErrorCode.MALFORMED_INPUT
        assert error.permissions == ()

    @pytest.mark.parametrize(
        "requested",
        [["view_users"], ("view_users",), {"view_users"}, frozenset({"view_users"})],
    )
    def test_any_string_collection_is_accepted(self, vocabulary, requested):
        result = can_delegate(GRANTER, {"view_users"}, TARGET, requested, vocabulary)

        assert result == Success(value=frozenset({"view_users"}))


@pytest.mark.unit
class TestWildcard:
    """Test wildcard grants."""

    def test_wildcard_holder_may_grant_wildcard(self, vocabulary):
        result = can_delegate(GRANTER, {"*"}, TARGET, ["*"], vocabulary)

        assert result == Success(value=frozenset({WILDCARD_PERMISSION}))

    def test_non_holder_cannot_grant_wildcard(self, vocabulary):
        result = can_delegate(GRANTER, {"view_users"}, TARGET, ["*"], vocabulary)

        error = _error(result)
        assert error.code == ErrorCode.WILDCARD_NOT_DELEGABLE
        assert error.permissions == ("*",)

    def test_wildcard_check_precedes_unheld_names(self, vocabulary):
        result = can_delegate(
            GRANTER, set(), TARGET, ["delete_users", "*"], vocabulary
        )

        assert _error(result).code == ErrorCode.WILDCARD_NOT_DELEGABLE

    def test_wildcard_holder_may_grant_any_known_name(self, vocabulary):
        result = can_delegate(GRANTER, {"*"}, TARGET, NAMES, vocabulary)

        assert result == Success(value=frozenset(NAMES))


@pytest.mark.unit
class TestDelegationRights:
    """Test the 'only grant what you hold' rule."""

    def test_subset_of_held_succeeds_with_exact_set(self, vocabulary):
        result = can_delegate(
            GRANTER, {"view_users", "edit_users"}, TARGET, ["view_users"], vocabulary
        )

        assert result == Success(value=frozenset({"view_users"}))

    def test_first_unheld_permission_is_named(self, vocabulary):
        result = can_delegate(
            GRANTER,
            {"edit_systems"},
            TARGET,
            ["edit_systems", "delete_systems"],
            vocabulary,
        )

        error = _error(result)
        assert error.code == ErrorCode.INSUFFICIENT_DELEGATION_RIGHTS
        assert error.permissions == ("delete_systems",)
        assert "delete_systems" in error.message

    def test_unheld_permissions_reported_in_sorted_order(self, vocabulary):
        result = can_delegate(
            GRANTER, set(), TARGET, ["view_users", "assign_technician"], vocabulary
        )

        assert _error(result).permissions == ("assign_technician",)

    def test_empty_request_revokes_everything(self, vocabulary):
        result = can_delegate(GRANTER, {"view_users"}, TARGET, [], vocabulary)

        assert result == Success(value=frozenset())

    def test_empty_request_succeeds_for_holder_of_nothing(self, vocabulary):
        result = can_delegate(GRANTER, None, TARGET, [], vocabulary)

        assert result == Success(value=frozenset())

    def test_duplicates_collapse(self, vocabulary):
        result = can_delegate(
            GRANTER, {"view_users"}, TARGET, ["view_users", "view_users"], vocabulary
        )

        assert result == Success(value=frozenset({"view_users"}))

    def test_randomized_grants_match_subset_rule(self, vocabulary):
        rng = random.Random(31337)
        for _ in range(300):
            held = {n for n in NAMES if rng.random() < 0.5}
            requested = {n for n in NAMES if rng.random() < 0.3}
            result = can_delegate(GRANTER, held, TARGET, list(requested), vocabulary)
            if requested <= held:
                assert result == Success(value=frozenset(requested))
            else:
                error = _error(result)
                assert error.code == ErrorCode.INSUFFICIENT_DELEGATION_RIGHTS
                assert error.permissions == (min(requested - held),)
