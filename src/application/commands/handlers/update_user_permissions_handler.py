"""Update user permissions handler (delegation).

Flow:
1. Re-fetch the granter from the store (the token snapshot is never trusted
   for permission mutation, so a revoked granter cannot keep delegating)
2. Reject self-modification by identifier, before looking the target up
3. Find the target by identifier
4. Load the permission vocabulary
5. Run the delegation guard with the granter's stored permissions
6. Replace the target's permission set with a single keyed update
7. Return Success(PermissionUpdateResult)

Concurrent updates to the same target are last-write-wins.
"""

from dataclasses import dataclass

from src.application.commands.user_commands import UpdateUserPermissions
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.authorization import can_delegate
from src.domain.errors import DelegationError
from src.domain.protocols import (
    LoggerProtocol,
    PermissionRepository,
    UserRepository,
)


@dataclass(frozen=True, kw_only=True)
class PermissionUpdateResult:
    """Outcome of a successful delegation.

    Attributes:
        target_id: Id of the changed user.
        target_identifier: Mobile number of the changed user.
        permissions: The target's complete new permission set.
    """

    target_id: int
    target_identifier: str
    permissions: frozenset[str]


class UpdateUserPermissionsHandler:
    """Handler for the permission delegation command.

    Dependencies (injected via constructor):
        - UserRepository: granter/target lookup and the permission write
        - PermissionRepository: vocabulary source
        - LoggerProtocol: outcome logging
    """

    def __init__(
        self,
        user_repo: UserRepository,
        permission_repo: PermissionRepository,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            user_repo: User repository.
            permission_repo: Permission vocabulary repository.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._permission_repo = permission_repo
        self._logger = logger

    async def handle(
        self, cmd: UpdateUserPermissions
    ) -> Result[PermissionUpdateResult, DelegationError]:
        """Handle the delegation command.

        Returns:
            Success(PermissionUpdateResult) after the target's set is replaced.
            Failure(DelegationError) when refused; the target is unchanged.
        """
        log = self._logger.bind(granter_id=cmd.granter_id)

        # Step 1: Current granter state from the store
        granter = await self._user_repo.find_by_id(cmd.granter_id)
        if granter is None or granter.id is None:
            log.warning("delegation_denied", code=ErrorCode.TARGET_NOT_FOUND.value)
            return Failure(
                error=DelegationError(
                    code=ErrorCode.TARGET_NOT_FOUND,
                    message="Granting user no longer exists",
                )
            )

        # Step 2: Self-modification check by identifier
        if granter.is_same_identity(cmd.target_identifier):
            log.warning("delegation_denied", code=ErrorCode.SELF_MODIFICATION.value)
            return Failure(
                error=DelegationError(
                    code=ErrorCode.SELF_MODIFICATION,
                    message="You cannot change your own permissions",
                )
            )

        # Step 3: Target lookup
        target = await self._user_repo.find_by_identifier(cmd.target_identifier)
        if target is None or target.id is None:
            log.warning("delegation_denied", code=ErrorCode.TARGET_NOT_FOUND.value)
            return Failure(
                error=DelegationError(
                    code=ErrorCode.TARGET_NOT_FOUND,
                    message="Target user not found",
                )
            )

        # Step 4-5: Guard
        vocabulary = await self._permission_repo.load_vocabulary()
        decision = can_delegate(
            granter.id,
            granter.permissions,
            target.id,
            cmd.permissions,
            vocabulary,
        )

        if isinstance(decision, Failure):
            log.warning(
                "delegation_denied",
                code=decision.error.code.value,
                target_id=target.id,
                permissions=list(decision.error.permissions),
            )
            return decision
        granted = decision.value

        # Step 6: Full replace
        updated = await self._user_repo.update_permissions(target.id, granted)
        if not updated:
            log.warning(
                "delegation_denied",
                code=ErrorCode.TARGET_NOT_FOUND.value,
                target_id=target.id,
            )
            return Failure(
                error=DelegationError(
                    code=ErrorCode.TARGET_NOT_FOUND,
                    message="Target user not found",
                )
            )

        log.info(
            "permissions_updated",
            target_id=target.id,
            permissions=sorted(granted),
        )

        return Success(
            value=PermissionUpdateResult(
                target_id=target.id,
                target_identifier=target.mobile_no,
                permissions=granted,
            )
        )
