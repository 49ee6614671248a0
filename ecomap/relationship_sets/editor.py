"""Whitelist and blacklist mutations of stored relationship sets."""

from datetime import datetime, timezone
from typing import Callable, Literal

from loguru import logger

from ecomap.domain.relationships import (
    MutationResult,
    RelationshipSet,
    RelationshipSetNotFoundError,
)
from ecomap.stores.base import EcosystemStore

SET_NOT_FOUND_MESSAGE = "Relationship set not found"

MembershipList = Literal["whitelist", "blacklist"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RelationshipSetEditor:
    """Adds and removes relationship IDs on one relationship set at a time.

    Every mutation is idempotent: adding a present ID or removing an absent one
    leaves the membership unchanged.
    """

    def __init__(
        self, store: EcosystemStore, clock: Callable[[], datetime] = _utcnow
    ) -> None:
        self.store = store
        self.clock = clock

    def add_to_whitelist(self, set_id: int, relationship_id: int) -> MutationResult:
        return self._mutate(set_id, "whitelist", relationship_id, add=True)

    def remove_from_whitelist(self, set_id: int, relationship_id: int) -> MutationResult:
        return self._mutate(set_id, "whitelist", relationship_id, add=False)

    def add_to_blacklist(self, set_id: int, relationship_id: int) -> MutationResult:
        return self._mutate(set_id, "blacklist", relationship_id, add=True)

    def remove_from_blacklist(self, set_id: int, relationship_id: int) -> MutationResult:
        return self._mutate(set_id, "blacklist", relationship_id, add=False)

    def _mutate(
        self, set_id: int, list_name: MembershipList, relationship_id: int, *, add: bool
    ) -> MutationResult:
        """Apply one membership change and persist the set.

        Args:
            set_id: ID of the relationship set to change
            list_name: Which membership list to change
            relationship_id: Relationship ID to add or remove
            add: True to add the ID, False to remove it

        Returns:
            MutationResult, with an error message when the set is missing or
            could not be saved
        """
        try:
            current = self.store.get_relationship_set(set_id)
        except RelationshipSetNotFoundError:
            logger.warning(f"Cannot update {list_name} of missing relationship set {set_id}")
            return MutationResult(success=False, error=SET_NOT_FOUND_MESSAGE)

        members = list(getattr(current, list_name))
        if add:
            if relationship_id not in members:
                members.append(relationship_id)
        else:
            members = [member for member in members if member != relationship_id]

        updated: RelationshipSet = current.model_copy(
            update={list_name: members, "updated_at": self.clock()}
        )

        self.store.update_relationship_set(updated)
        try:
            self.store.save()
        except (OSError, ValueError) as e:
            logger.error(f"Error saving relationship set {set_id}: {e}")
            self.store.update_relationship_set(current)
            return MutationResult(success=False, error=str(e))

        return MutationResult(success=True)
