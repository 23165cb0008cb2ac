"""
NoteKeeper Backend — Note Service Unit Tests
===============================================

What:  Tests for NoteService business logic against a real in-memory store.
How:   No HTTP involved; "now" is patched where timestamps matter.

What we test:
    ✅ Create defaults, id uniqueness, caller-supplied timestamps
    ✅ Partial update rules and unconditional updated_at
    ✅ Single delete and both bulk-delete forms
    ✅ Dashboard split ordering
    ✅ Audit log lines for mutations
"""

import logging
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from notekeeper.exceptions import NotFoundError, ValidationError
from notekeeper.models.note import Note
from notekeeper.schemas.note import BulkDeleteRequest, NoteCreate, NoteUpdate
from notekeeper.services.note_service import NoteService
from notekeeper.store import NoteStore

T0 = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def create(service, store, **fields):
    return service.create_note(store, NoteCreate.model_validate(fields))


class TestNoteServiceCreate:
    def setup_method(self):
        self.service = NoteService()
        self.store = NoteStore()

    def test_create_with_no_fields_uses_defaults(self):
        note = create(self.service, self.store)
        assert note.title == "Untitled"
        assert note.content == ""
        assert note.tags == []
        assert note.color == "default"
        assert note.pinned is False
        assert note.id in self.store

    def test_create_sets_both_timestamps_to_now(self):
        with patch("notekeeper.services.note_service.utc_now", return_value=T0):
            note = create(self.service, self.store, title="x")
        assert note.created_at == T0
        assert note.updated_at == T0

    def test_create_honours_caller_timestamps(self):
        note = create(
            self.service,
            self.store,
            createdAt="2023-10-15T00:00:00Z",
            updatedAt="2023-10-16T00:00:00Z",
        )
        assert note.created_at == datetime(2023, 10, 15, tzinfo=timezone.utc)
        assert note.updated_at == datetime(2023, 10, 16, tzinfo=timezone.utc)

    def test_create_normalizes_tag_string(self):
        note = create(self.service, self.store, tags="a, b ,c")
        assert note.tags == ["a", "b", "c"]

    def test_created_ids_are_unique(self):
        ids = {create(self.service, self.store).id for _ in range(50)}
        assert len(ids) == 50
        assert len(self.store) == 50

    def test_create_appends_in_storage_order(self):
        first = create(self.service, self.store, title="first")
        second = create(self.service, self.store, title="second")
        assert [n.id for n in self.service.list_notes(self.store)] == [first.id, second.id]

    def test_create_logs_audit_line(self, caplog):
        with caplog.at_level(logging.INFO, logger="notekeeper.services.note_service"):
            note = create(self.service, self.store, title="Audit me", pinned=True)
        assert f"Created note: id={note.id} title='Audit me' pinned=True" in caplog.text
        assert "Total notes: 1" in caplog.text


class TestNoteServiceGetUpdate:
    def setup_method(self):
        self.service = NoteService()
        self.store = NoteStore()
        with patch("notekeeper.services.note_service.utc_now", return_value=T0):
            self.note = create(
                self.service, self.store, title="Original", content="Body", tags=["a"], color="blue"
            )

    def test_get_existing(self):
        assert self.service.get_note(self.store, self.note.id) is self.note

    def test_get_missing_raises(self):
        with pytest.raises(NotFoundError) as exc_info:
            self.service.get_note(self.store, "missing")
        assert exc_info.value.message == "Note not found"

    def test_update_missing_raises(self):
        with pytest.raises(NotFoundError):
            self.service.update_note(self.store, "missing", NoteUpdate(title="x"))

    def test_update_empty_title_keeps_prior(self):
        updated = self.service.update_note(
            self.store, self.note.id, NoteUpdate.model_validate({"title": ""})
        )
        assert updated.title == "Original"

    def test_update_non_empty_title_replaces(self):
        updated = self.service.update_note(
            self.store, self.note.id, NoteUpdate.model_validate({"title": "Renamed"})
        )
        assert updated.title == "Renamed"
        assert updated.content == "Body"
        assert updated.tags == ["a"]
        assert updated.color == "blue"

    def test_update_always_advances_updated_at(self):
        later = T0 + timedelta(minutes=5)
        with patch("notekeeper.services.note_service.utc_now", return_value=later):
            updated = self.service.update_note(
                self.store, self.note.id, NoteUpdate.model_validate({})
            )
        assert updated.updated_at == later
        assert updated.created_at == T0

    def test_update_pinned_false_overrides(self):
        self.note.pinned = True
        updated = self.service.update_note(
            self.store, self.note.id, NoteUpdate.model_validate({"pinned": "false"})
        )
        assert updated.pinned is False

    def test_update_absent_pinned_keeps_prior(self):
        self.note.pinned = True
        updated = self.service.update_note(
            self.store, self.note.id, NoteUpdate.model_validate({"title": "x"})
        )
        assert updated.pinned is True

    def test_update_tags_string_and_empty_list(self):
        updated = self.service.update_note(
            self.store, self.note.id, NoteUpdate.model_validate({"tags": "x, y"})
        )
        assert updated.tags == ["x", "y"]
        updated = self.service.update_note(
            self.store, self.note.id, NoteUpdate.model_validate({"tags": []})
        )
        assert updated.tags == []

    def test_update_keeps_storage_position(self):
        other = create(self.service, self.store, title="Other")
        self.service.update_note(self.store, self.note.id, NoteUpdate(title="Moved?"))
        assert [n.id for n in self.store.all()] == [self.note.id, other.id]


class TestNoteServiceDelete:
    def setup_method(self):
        self.service = NoteService()
        self.store = NoteStore()
        self.notes = [create(self.service, self.store, title=f"n{i}") for i in range(4)]

    def test_delete_existing_removes_only_that_note(self):
        target = self.notes[1]
        assert self.service.delete_note(self.store, target.id) == 1
        remaining = [n.id for n in self.store.all()]
        assert remaining == [self.notes[0].id, self.notes[2].id, self.notes[3].id]

    def test_delete_missing_returns_zero(self):
        assert self.service.delete_note(self.store, "nope") == 0
        assert len(self.store) == 4

    def test_deleted_id_is_not_reused(self):
        gone = self.notes[0].id
        self.service.delete_note(self.store, gone)
        new_ids = {create(self.service, self.store).id for _ in range(20)}
        assert gone not in new_ids

    def test_bulk_delete_all_ignores_ids(self):
        request = BulkDeleteRequest.model_validate({"all": True, "ids": [self.notes[0].id]})
        assert self.service.bulk_delete(self.store, request) == 4
        assert len(self.store) == 0

    def test_bulk_delete_partial_miss(self):
        request = BulkDeleteRequest.model_validate({"ids": [self.notes[0].id, "y"]})
        assert self.service.bulk_delete(self.store, request) == 1
        assert self.notes[0].id not in self.store
        assert len(self.store) == 3

    def test_bulk_delete_duplicate_ids_counted_once(self):
        request = BulkDeleteRequest.model_validate({"ids": [self.notes[2].id] * 3})
        assert self.service.bulk_delete(self.store, request) == 1

    @pytest.mark.parametrize("body", [{}, {"ids": "abc"}, {"ids": None}, {"all": False}])
    def test_bulk_delete_requires_id_list(self, body):
        with pytest.raises(ValidationError, match="ids array required"):
            self.service.bulk_delete(self.store, BulkDeleteRequest.model_validate(body))
        assert len(self.store) == 4


class TestNoteServiceDashboard:
    def setup_method(self):
        self.service = NoteService()

    def test_split_is_disjoint_and_covering(self, seeded_store):
        pinned, recent = self.service.dashboard(seeded_store)
        assert len(pinned) == 2
        assert len(recent) == 4
        assert {n.id for n in pinned}.isdisjoint({n.id for n in recent})
        assert {n.id for n in pinned} | {n.id for n in recent} == {
            n.id for n in seeded_store.all()
        }

    def test_pinned_keep_storage_order(self):
        store = NoteStore(
            [
                Note(title="old pinned", pinned=True, updated_at=T0 - timedelta(days=3)),
                Note(title="new pinned", pinned=True, updated_at=T0),
            ]
        )
        pinned, _ = self.service.dashboard(store)
        assert [n.title for n in pinned] == ["old pinned", "new pinned"]

    def test_recent_newest_updated_first_with_stable_ties(self):
        store = NoteStore(
            [
                Note(title="tie-a", updated_at=T0),
                Note(title="oldest", updated_at=T0 - timedelta(days=1)),
                Note(title="newest", updated_at=T0 + timedelta(hours=1)),
                Note(title="tie-b", updated_at=T0),
                Note(title="pinned", pinned=True, updated_at=T0 + timedelta(days=1)),
            ]
        )
        _, recent = self.service.dashboard(store)
        assert [n.title for n in recent] == ["newest", "tie-a", "tie-b", "oldest"]

    def test_updating_note_moves_it_to_front_of_recent(self, seeded_store):
        _, recent = self.service.dashboard(seeded_store)
        oldest = recent[-1]
        self.service.update_note(seeded_store, oldest.id, NoteUpdate(content="bump"))
        _, recent = self.service.dashboard(seeded_store)
        assert recent[0].id == oldest.id
