from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

import pytest

from shelter.application.errors import (
    AlreadyDeleted,
    ConflictError,
    NotFound,
    RepositoryError,
    ValidationError,
)
from shelter.infrastructure.storage.json_store import JsonFileStore


class Colour(str, Enum):
    RED = "Red"
    BLUE = "Blue"


@dataclass(slots=True)
class Note:
    id: int = 0
    title: str = ""
    colour: Colour = Colour.RED
    rank: int = 0
    due: datetime | None = None
    is_deleted: bool = False
    deleted_at: datetime | None = None


@dataclass(slots=True)
class Tag:
    id: int = 0
    label: str = ""


@pytest.fixture()
def notes(tmp_path) -> JsonFileStore[Note]:
    return JsonFileStore(tmp_path / "store" / "notes.json", Note)


@pytest.fixture()
def tags(tmp_path) -> JsonFileStore[Tag]:
    return JsonFileStore(tmp_path / "tags.json", Tag)


@pytest.mark.asyncio
async def test_missing_or_blank_file_reads_as_empty(tmp_path):
    store = JsonFileStore(tmp_path / "nested" / "notes.json", Note)
    assert store.file_path.parent.is_dir()
    assert await store.get_all() == []

    store.file_path.write_text("   \n", encoding="utf-8")
    assert await store.get_all() == []


@pytest.mark.asyncio
async def test_add_assigns_next_id(notes):
    first = await notes.add(Note(title="a"))
    second = await notes.add(Note(title="b"))
    assert (first.id, second.id) == (1, 2)

    await notes.add(Note(id=10, title="explicit"))
    after_gap = await notes.add(Note(title="c"))
    assert after_gap.id == 11


@pytest.mark.asyncio
async def test_next_id_counts_soft_deleted_rows(notes):
    await notes.add(Note(title="a"))
    await notes.add(Note(title="b"))
    await notes.delete(2)
    created = await notes.add(Note(title="c"))
    assert created.id == 3


@pytest.mark.asyncio
async def test_add_with_active_duplicate_id_conflicts(notes):
    await notes.add(Note(id=5, title="a"))
    with pytest.raises(RepositoryError) as exc_info:
        await notes.add(Note(id=5, title="b"))
    assert isinstance(exc_info.value.cause, ConflictError)
    assert exc_info.value.code == "conflict"
    assert [n.title for n in await notes.get_all()] == ["a"]


@pytest.mark.asyncio
async def test_add_reusing_soft_deleted_id_replaces_stale_row(notes):
    await notes.add(Note(id=3, title="old"))
    await notes.delete(3)
    assert await notes.get_by_id(3) is None

    replacement = await notes.add(Note(id=3, title="new", is_deleted=True))
    assert replacement.is_deleted is False
    assert (await notes.get_by_id(3)).title == "new"

    raw = json.loads(notes.file_path.read_text(encoding="utf-8"))
    assert [row["title"] for row in raw] == ["new"]


@pytest.mark.asyncio
async def test_soft_deleted_rows_are_hidden_everywhere(notes):
    await notes.add(Note(title="keep", rank=1))
    await notes.add(Note(title="drop", rank=2))
    await notes.delete(2)

    assert [n.id for n in await notes.get_all()] == [1]
    assert await notes.get_by_id(2) is None
    assert await notes.find(lambda n: True) == await notes.get_all()
    assert await notes.count() == 1
    assert not await notes.exists(2)
    page = await notes.get_paged(1, 10)
    assert page.total_count == 1

    raw = json.loads(notes.file_path.read_text(encoding="utf-8"))
    deleted = next(row for row in raw if row["id"] == 2)
    assert deleted["is_deleted"] is True
    assert deleted["deleted_at"] is not None


@pytest.mark.asyncio
async def test_delete_distinguishes_missing_from_already_deleted(notes):
    await notes.add(Note(title="a"))
    await notes.delete(1)

    with pytest.raises(RepositoryError) as already:
        await notes.delete(1)
    assert isinstance(already.value.cause, AlreadyDeleted)
    assert already.value.code == "already_deleted"

    with pytest.raises(RepositoryError) as missing:
        await notes.delete(42)
    assert isinstance(missing.value.cause, NotFound)
    assert missing.value.status_code == 404


@pytest.mark.asyncio
async def test_delete_without_soft_delete_capability_removes_row(tags):
    await tags.add(Tag(label="x"))
    await tags.add(Tag(label="y"))
    await tags.delete(1)

    raw = json.loads(tags.file_path.read_text(encoding="utf-8"))
    assert [row["label"] for row in raw] == ["y"]
    with pytest.raises(RepositoryError) as exc_info:
        await tags.delete(1)
    assert isinstance(exc_info.value.cause, NotFound)


@pytest.mark.asyncio
async def test_update_replaces_active_record(notes):
    note = await notes.add(Note(title="draft"))
    note.title = "final"
    await notes.update(note)
    assert (await notes.get_by_id(note.id)).title == "final"

    await notes.delete(note.id)
    with pytest.raises(RepositoryError) as exc_info:
        await notes.update(note)
    assert isinstance(exc_info.value.cause, NotFound)


@pytest.mark.asyncio
async def test_round_trip_keeps_enum_values(notes):
    due = datetime(2024, 5, 1, 12, 30)
    await notes.add(Note(title="a", colour=Colour.BLUE, due=due))

    raw = json.loads(notes.file_path.read_text(encoding="utf-8"))
    assert raw[0]["colour"] == "Blue"

    loaded = await notes.get_by_id(1)
    assert loaded == Note(id=1, title="a", colour=Colour.BLUE, due=due)
    assert loaded.colour is Colour.BLUE


@pytest.mark.asyncio
async def test_reads_are_idempotent(notes):
    for title in ("a", "b", "c"):
        await notes.add(Note(title=title))
    assert await notes.get_all() == await notes.get_all()
    assert await notes.find(lambda n: n.title != "b") == await notes.find(lambda n: n.title != "b")


@pytest.mark.asyncio
async def test_validator_runs_before_mutation(tmp_path):
    def validate(note: Note) -> None:
        if not note.title:
            raise ValidationError("title required")

    store = JsonFileStore(tmp_path / "notes.json", Note, validator=validate)
    with pytest.raises(RepositoryError) as exc_info:
        await store.add(Note())
    assert isinstance(exc_info.value.cause, ValidationError)
    assert exc_info.value.details["operation"] == "add"
    assert not store.file_path.exists()


@pytest.mark.asyncio
async def test_add_none_is_rejected(notes):
    with pytest.raises(RepositoryError) as exc_info:
        await notes.add(None)
    assert exc_info.value.code == "validation_error"


@pytest.mark.asyncio
async def test_rejected_add_leaves_caller_id_untouched(tmp_path):
    def no_duplicate_titles(note: Note, others: list[Note]) -> None:
        if any(other.title == note.title for other in others):
            raise ConflictError("duplicate title")

    store = JsonFileStore(tmp_path / "notes.json", Note, conflict_check=no_duplicate_titles)
    await store.add(Note(title="a"))

    duplicate = Note(title="a")
    with pytest.raises(RepositoryError):
        await store.add(duplicate)
    assert duplicate.id == 0
    assert len(await store.get_all()) == 1


@pytest.mark.asyncio
async def test_failed_save_restores_caller_id(notes, monkeypatch):
    await notes.add(Note(title="kept"))

    def broken_write(items):
        raise OSError("disk full")

    monkeypatch.setattr(notes, "_write_sync", broken_write)
    pending = Note(title="lost")
    with pytest.raises(RepositoryError) as exc_info:
        await notes.add(pending)
    assert isinstance(exc_info.value.cause, OSError)
    assert pending.id == 0

    monkeypatch.undo()
    assert [note.title for note in await notes.get_all()] == ["kept"]


@pytest.mark.asyncio
async def test_add_many_writes_all_records_at_once(notes):
    added = await notes.add_many([Note(title="a"), Note(id=7, title="b"), Note(title="c")])
    assert [note.id for note in added] == [1, 7, 8]
    assert [note.title for note in await notes.get_all()] == ["a", "b", "c"]


@pytest.mark.asyncio
async def test_add_many_is_all_or_nothing(tmp_path):
    def validate(note: Note) -> None:
        if not note.title:
            raise ValidationError("title required")

    store = JsonFileStore(tmp_path / "notes.json", Note, validator=validate)
    batch = [Note(title="a"), Note(), Note(title="c")]
    with pytest.raises(RepositoryError) as exc_info:
        await store.add_many(batch)
    assert exc_info.value.details["operation"] == "add_many"
    assert not store.file_path.exists()

    clashing = [Note(id=3, title="x"), Note(id=3, title="y")]
    with pytest.raises(RepositoryError) as exc_info:
        await store.add_many(clashing)
    assert isinstance(exc_info.value.cause, ConflictError)
    assert [note.id for note in clashing] == [3, 3]
    assert not store.file_path.exists()


@pytest.mark.asyncio
async def test_query_helpers(notes):
    for rank, colour in [(3, Colour.RED), (1, Colour.BLUE), (2, Colour.RED), (5, Colour.BLUE)]:
        await notes.add(Note(title=f"n{rank}", rank=rank, colour=colour))
    await notes.delete(4)

    def everything(note: Note) -> bool:
        return True

    ascending = await notes.find_and_sort(everything, lambda n: n.rank)
    assert [n.rank for n in ascending] == [1, 2, 3]
    descending = await notes.find_and_sort(everything, lambda n: n.rank, ascending=False)
    assert [n.rank for n in descending] == [3, 2, 1]

    assert [n.rank for n in await notes.find_and_take(everything, 2)] == [3, 1]
    assert [n.rank for n in await notes.find_and_skip(everything, 2)] == [2]

    groups = await notes.find_and_group(everything, lambda n: n.colour)
    assert {key: [n.rank for n in value] for key, value in groups.items()} == {
        Colour.RED: [3, 2],
        Colour.BLUE: [1],
    }

    red_and_high = await notes.find_all([lambda n: n.colour == Colour.RED, lambda n: n.rank > 2])
    assert [n.rank for n in red_and_high] == [3]
    assert await notes.count(lambda n: n.colour == Colour.RED) == 2


@pytest.mark.asyncio
async def test_get_paged(notes):
    for i in range(7):
        await notes.add(Note(title=f"n{i}", rank=i))

    page = await notes.get_paged(2, 3)
    assert [n.rank for n in page.items] == [3, 4, 5]
    assert page.total_count == 7
    assert page.total_pages == 3

    filtered = await notes.get_paged(1, 10, lambda n: n.rank % 2 == 0)
    assert filtered.total_count == 4

    with pytest.raises(RepositoryError) as exc_info:
        await notes.get_paged(0, 10)
    assert isinstance(exc_info.value.cause, ValidationError)


@pytest.mark.asyncio
async def test_purge_deleted(notes):
    await notes.add(Note(title="a"))
    await notes.add(Note(title="b"))
    await notes.delete(1)

    assert await notes.purge_deleted() == 1
    assert await notes.purge_deleted() == 0
    raw = json.loads(notes.file_path.read_text(encoding="utf-8"))
    assert [row["id"] for row in raw] == [2]


@pytest.mark.asyncio
async def test_corrupt_file_is_wrapped_with_context(notes):
    notes.file_path.write_text("{not json", encoding="utf-8")
    with pytest.raises(RepositoryError) as exc_info:
        await notes.get_all()
    error = exc_info.value
    assert error.status_code == 500
    assert error.code == "repository_error"
    assert error.details["entity"] == "Note"
    assert error.details["file_path"] == str(notes.file_path)
    assert error.cause is not None


@pytest.mark.asyncio
async def test_concurrent_adds_do_not_lose_updates(notes):
    created = await asyncio.gather(*(notes.add(Note(title=f"n{i}")) for i in range(20)))
    assert sorted(n.id for n in created) == list(range(1, 21))
    assert await notes.count() == 20
