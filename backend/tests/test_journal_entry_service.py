"""
Journal API: Journal Entry Service Tests
=========================================

What:  The dual write between `journal_entries` and the owner's embedded list.
How:   In-memory MongoDB for behaviour, patched repository for failure paths.

What we test:
    ✅ save_entry stamps date, persists the entry and embeds it in the owner
    ✅ Editing an owned entry replaces its embedded copy
    ✅ Unknown owner and write failures surface as DatabaseError
    ✅ delete_entity_by_id removes from both places, without ownership checks
    ✅ delete_entity / delete_all_entities leave owner lists alone
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

import pytest
from bson import ObjectId

from journal_api.exceptions import DatabaseError, NotFoundError
from journal_api.models.journal_entry import JournalEntry
from journal_api.services.journal_entry_service import JournalEntryService
from journal_api.services.user_service import user_service


class TestSaveEntry:

    def setup_method(self):
        self.service = JournalEntryService()

    @pytest.mark.asyncio
    async def test_date_is_server_assigned(self, mongo_db, sample_user):
        client_date = datetime(2001, 1, 1, tzinfo=timezone.utc)
        started = datetime.now(timezone.utc).replace(microsecond=0)

        saved = await self.service.save_entry(
            mongo_db, JournalEntry(title="T1", date=client_date), "alice"
        )

        assert saved.date >= started
        assert saved.date != client_date

    @pytest.mark.asyncio
    async def test_date_has_millisecond_precision(self, mongo_db, sample_user):
        saved = await self.service.save_entry(mongo_db, JournalEntry(title="T1"), "alice")

        assert saved.date.microsecond % 1000 == 0

    @pytest.mark.asyncio
    async def test_entry_retrievable_and_owned(self, mongo_db, sample_user):
        saved = await self.service.save_entry(
            mongo_db, JournalEntry(title="T1", content="body"), "alice"
        )

        by_id = await self.service.get_journal_entry_by_id(mongo_db, saved.id)
        owner = await user_service.find_by_user_name(mongo_db, "alice")

        assert by_id.title == "T1"
        assert [e.id for e in owner.journal_entries] == [saved.id]
        assert owner.journal_entries[0].content == "body"

    @pytest.mark.asyncio
    async def test_entries_append_in_order(self, mongo_db, sample_user):
        first = await self.service.save_entry(mongo_db, JournalEntry(title="one"), "alice")
        second = await self.service.save_entry(mongo_db, JournalEntry(title="two"), "alice")

        owner = await user_service.find_by_user_name(mongo_db, "alice")

        assert [e.id for e in owner.journal_entries] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_resave_replaces_embedded_copy(self, mongo_db, sample_user):
        saved = await self.service.save_entry(mongo_db, JournalEntry(title="draft"), "alice")

        stored = await self.service.get_journal_entry_by_id(mongo_db, saved.id)
        stored.title = "final"
        await self.service.save_entry(mongo_db, stored, "alice")

        owner = await user_service.find_by_user_name(mongo_db, "alice")
        assert len(owner.journal_entries) == 1
        assert owner.journal_entries[0].title == "final"
        assert await mongo_db.journal_entries.count_documents({}) == 1

    @pytest.mark.asyncio
    async def test_unknown_user_raises_database_error(self, mongo_db):
        with pytest.raises(DatabaseError) as exc_info:
            await self.service.save_entry(mongo_db, JournalEntry(title="orphan"), "ghost")

        assert exc_info.value.message == "Error while saving journal entry"
        assert isinstance(exc_info.value.__cause__, NotFoundError)
        assert await mongo_db.journal_entries.count_documents({}) == 0

    @pytest.mark.asyncio
    async def test_write_failure_is_wrapped(self, mongo_db, sample_user):
        with patch("journal_api.services.journal_entry_service.JournalEntryRepository") as repo_cls:
            repo_cls.return_value.save = AsyncMock(side_effect=RuntimeError("disk full"))

            with pytest.raises(DatabaseError) as exc_info:
                await self.service.save_entry(mongo_db, JournalEntry(title="x"), "alice")

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert exc_info.value.context["original_error"] == "RuntimeError"


class TestReads:

    def setup_method(self):
        self.service = JournalEntryService()

    @pytest.mark.asyncio
    async def test_get_all_is_not_scoped_to_a_user(self, mongo_db, make_user):
        await make_user("alice")
        await make_user("bob")
        await self.service.save_entry(mongo_db, JournalEntry(title="a"), "alice")
        await self.service.save_entry(mongo_db, JournalEntry(title="b"), "bob")

        entries = await self.service.get_all_journal_entries(mongo_db)

        assert sorted(e.title for e in entries) == ["a", "b"]

    @pytest.mark.asyncio
    async def test_get_by_absent_id_returns_none(self, mongo_db):
        assert await self.service.get_journal_entry_by_id(mongo_db, str(ObjectId())) is None


class TestDelete:

    def setup_method(self):
        self.service = JournalEntryService()

    @pytest.mark.asyncio
    async def test_delete_removes_from_both(self, mongo_db, sample_user):
        keep = await self.service.save_entry(mongo_db, JournalEntry(title="keep"), "alice")
        gone = await self.service.save_entry(mongo_db, JournalEntry(title="gone"), "alice")

        await self.service.delete_entity_by_id(mongo_db, gone.id, "alice")

        owner = await user_service.find_by_user_name(mongo_db, "alice")
        assert await self.service.get_journal_entry_by_id(mongo_db, gone.id) is None
        assert [e.id for e in owner.journal_entries] == [keep.id]

    @pytest.mark.asyncio
    async def test_delete_with_uppercase_id_removes_from_both(self, mongo_db, sample_user):
        entry = await self.service.save_entry(mongo_db, JournalEntry(title="x"), "alice")

        await self.service.delete_entity_by_id(mongo_db, entry.id.upper(), "alice")

        owner = await user_service.find_by_user_name(mongo_db, "alice")
        assert await self.service.get_journal_entry_by_id(mongo_db, entry.id) is None
        assert owner.journal_entries == []

    @pytest.mark.asyncio
    async def test_delete_with_malformed_id_keeps_owner_list(self, mongo_db, sample_user):
        entry = await self.service.save_entry(mongo_db, JournalEntry(title="x"), "alice")

        await self.service.delete_entity_by_id(mongo_db, "not-a-hex-id", "alice")

        owner = await user_service.find_by_user_name(mongo_db, "alice")
        assert [e.id for e in owner.journal_entries] == [entry.id]

    @pytest.mark.asyncio
    async def test_delete_by_non_owner_still_deletes_entry(self, mongo_db, make_user):
        await make_user("alice")
        await make_user("mallory")
        entry = await self.service.save_entry(mongo_db, JournalEntry(title="private"), "alice")

        await self.service.delete_entity_by_id(mongo_db, entry.id, "mallory")

        alice = await user_service.find_by_user_name(mongo_db, "alice")
        assert await self.service.get_journal_entry_by_id(mongo_db, entry.id) is None
        # alice's embedded copy is left behind
        assert [e.id for e in alice.journal_entries] == [entry.id]

    @pytest.mark.asyncio
    async def test_delete_with_unknown_user_still_deletes_entry(self, mongo_db, sample_user):
        entry = await self.service.save_entry(mongo_db, JournalEntry(title="x"), "alice")

        await self.service.delete_entity_by_id(mongo_db, entry.id, "ghost")

        assert await self.service.get_journal_entry_by_id(mongo_db, entry.id) is None

    @pytest.mark.asyncio
    async def test_delete_entity_skips_owner_cleanup(self, mongo_db, sample_user):
        entry = await self.service.save_entry(mongo_db, JournalEntry(title="x"), "alice")

        await self.service.delete_entity(mongo_db, entry)

        owner = await user_service.find_by_user_name(mongo_db, "alice")
        assert await self.service.get_journal_entry_by_id(mongo_db, entry.id) is None
        assert len(owner.journal_entries) == 1

    @pytest.mark.asyncio
    async def test_delete_all_entities(self, mongo_db, sample_user):
        for title in ("a", "b"):
            await self.service.save_entry(mongo_db, JournalEntry(title=title), "alice")

        await self.service.delete_all_entities(mongo_db)

        owner = await user_service.find_by_user_name(mongo_db, "alice")
        assert await self.service.get_all_journal_entries(mongo_db) == []
        assert len(owner.journal_entries) == 2
