"""Tests for whitelist and blacklist mutations."""

from datetime import datetime, timezone

import pytest

from ecomap.domain.relationships import RelationshipSet
from ecomap.relationship_sets import RelationshipSetEditor
from tests.fakes import FailingSaveEcosystemStore, FakeEcosystemStore

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def editor(fake_store: FakeEcosystemStore) -> RelationshipSetEditor:
    return RelationshipSetEditor(fake_store, clock=lambda: NOW)


def test_add_to_whitelist(editor: RelationshipSetEditor, fake_store: FakeEcosystemStore) -> None:
    result = editor.add_to_whitelist(1, 10)

    updated = fake_store.get_relationship_set(1)
    assert result.success
    assert result.error is None
    assert updated.whitelist == [12, 10]
    assert updated.updated_at == NOW
    assert fake_store.save_count == 1


def test_add_to_whitelist_is_idempotent(
    editor: RelationshipSetEditor, fake_store: FakeEcosystemStore
) -> None:
    editor.add_to_whitelist(1, 10)
    once = list(fake_store.get_relationship_set(1).whitelist)
    editor.add_to_whitelist(1, 10)

    assert fake_store.get_relationship_set(1).whitelist == once


def test_remove_from_whitelist(
    editor: RelationshipSetEditor, fake_store: FakeEcosystemStore
) -> None:
    assert editor.remove_from_whitelist(1, 12).success
    assert fake_store.get_relationship_set(1).whitelist == []


def test_remove_absent_id_is_noop(
    editor: RelationshipSetEditor, fake_store: FakeEcosystemStore
) -> None:
    result = editor.remove_from_whitelist(1, 999)

    assert result.success
    assert fake_store.get_relationship_set(1).whitelist == [12]


def test_blacklist_mutations(editor: RelationshipSetEditor, fake_store: FakeEcosystemStore) -> None:
    assert editor.add_to_blacklist(2, 14).success
    assert editor.add_to_blacklist(2, 14).success
    assert fake_store.get_relationship_set(2).blacklist == [13, 14]

    assert editor.remove_from_blacklist(2, 13).success
    assert fake_store.get_relationship_set(2).blacklist == [14]


def test_mutations_only_touch_one_list_and_one_set(
    editor: RelationshipSetEditor, fake_store: FakeEcosystemStore
) -> None:
    before = fake_store.get_relationship_set(2)

    editor.add_to_whitelist(1, 13)

    changed = fake_store.get_relationship_set(1)
    assert changed.blacklist == []
    assert fake_store.get_relationship_set(2) == before


def test_missing_set_reports_failure(
    editor: RelationshipSetEditor, fake_store: FakeEcosystemStore
) -> None:
    for mutation in (
        editor.add_to_whitelist,
        editor.remove_from_whitelist,
        editor.add_to_blacklist,
        editor.remove_from_blacklist,
    ):
        result = mutation(42, 10)
        assert not result.success
        assert result.error == "Relationship set not found"

    assert fake_store.save_count == 0
    assert [s.id for s in fake_store.get_relationship_sets()] == [1, 2]


def test_failed_save_rolls_back(relationship_sets: list[RelationshipSet]) -> None:
    store = FailingSaveEcosystemStore(relationship_sets=relationship_sets)
    editor = RelationshipSetEditor(store, clock=lambda: NOW)

    result = editor.add_to_whitelist(1, 10)

    assert not result.success
    assert result.error == "Disk full"
    assert store.get_relationship_set(1).whitelist == [12]
    assert store.get_relationship_set(1).updated_at != NOW


def test_default_clock_sets_aware_timestamp(fake_store: FakeEcosystemStore) -> None:
    RelationshipSetEditor(fake_store).add_to_blacklist(2, 10)
    assert fake_store.get_relationship_set(2).updated_at.tzinfo is not None
