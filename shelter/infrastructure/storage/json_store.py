"""File-backed generic store.

One JSON file holds every record of one entity type. There is no in-memory
cache: each operation loads the whole file, works on the list and, for
mutations, writes the whole list back. A per-instance ``asyncio.Lock`` is held
across the full load/modify/save cycle so two operations on the same store
never interleave. Nothing is serialized across different stores.
"""

from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from collections.abc import Callable, Hashable, Iterable, Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter

from shelter.application.errors import (
    AlreadyDeleted,
    AppError,
    ConflictError,
    NotFound,
    RepositoryError,
    ValidationError,
)
from shelter.application.validation import validate_entity
from shelter.domain.entity import Entity, is_active, is_soft_deleted, supports_soft_delete
from shelter.domain.paging import PagedResult

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Entity)
K = TypeVar("K", bound=Hashable)

Predicate = Callable[[T], bool]
Validator = Callable[[T], None]
ConflictCheck = Callable[[T, list[T]], None]


class JsonFileStore(Generic[T]):
    def __init__(
        self,
        file_path: str | Path,
        entity_type: type[T],
        *,
        validator: Validator | None = None,
        conflict_check: ConflictCheck | None = None,
    ) -> None:
        self.file_path = Path(file_path)
        self.entity_type = entity_type
        self.entity_name = entity_type.__name__
        self._validate = validator or validate_entity
        self._check_conflicts = conflict_check
        self._adapter: TypeAdapter[list[T]] = TypeAdapter(list[entity_type])  # type: ignore[valid-type]
        self._lock = asyncio.Lock()
        self.file_path.parent.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------ io

    def _read_sync(self) -> list[T]:
        if not self.file_path.exists():
            return []
        raw = self.file_path.read_text(encoding="utf-8")
        if not raw.strip() or raw.strip() == "null":
            return []
        return self._adapter.validate_json(raw)

    def _write_sync(self, items: list[T]) -> None:
        payload = self._adapter.dump_json(items, indent=2)
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=str(self.file_path.parent), prefix=f".{self.file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as tmp_handle:
                tmp_handle.write(payload)
                tmp_handle.flush()
                os.fsync(tmp_handle.fileno())
            os.replace(tmp_path, self.file_path)
        except BaseException:
            # The data file is untouched; drop the partial temp file
            Path(tmp_path).unlink(missing_ok=True)
            raise

    async def _load(self) -> list[T]:
        return await asyncio.to_thread(self._read_sync)

    async def _save(self, items: list[T]) -> None:
        await asyncio.to_thread(self._write_sync, items)

    async def _snapshot(self) -> list[T]:
        async with self._lock:
            return await self._load()

    @contextmanager
    def _guard(self, operation: str, **context: Any) -> Iterator[None]:
        try:
            yield
        except RepositoryError:
            raise
        except Exception as exc:
            details = {
                "entity": self.entity_name,
                "operation": operation,
                "file_path": str(self.file_path),
                **context,
            }
            if isinstance(exc, AppError):
                logger.info(
                    "%s %s rejected: %s (%s)", self.entity_name, operation, exc.message, exc.code
                )
            else:
                logger.error(
                    "%s %s failed on %s: %s",
                    self.entity_name,
                    operation,
                    self.file_path,
                    exc,
                    exc_info=True,
                )
            raise RepositoryError(
                f"Failed to {operation} {self.entity_name} in {self.file_path}",
                cause=exc,
                details=details,
            ) from exc

    # ------------------------------------------------------------ filters

    @staticmethod
    def _active(items: Iterable[T]) -> list[T]:
        return [item for item in items if is_active(item)]

    @staticmethod
    def _where(predicate: Predicate) -> Predicate:
        def combined(item: T) -> bool:
            return is_active(item) and predicate(item)

        return combined

    @staticmethod
    def _active_index(items: list[T], entity_id: int) -> int | None:
        for index, item in enumerate(items):
            if item.id == entity_id and is_active(item):
                return index
        return None

    # --------------------------------------------------------------- crud

    async def get_all(self) -> list[T]:
        with self._guard("list"):
            return self._active(await self._snapshot())

    async def get_by_id(self, entity_id: int) -> T | None:
        with self._guard("get", id=entity_id):
            items = await self._snapshot()
            index = self._active_index(items, entity_id)
            return items[index] if index is not None else None

    async def exists(self, entity_id: int) -> bool:
        return await self.get_by_id(entity_id) is not None

    def _stage(self, items: list[T], entity: T) -> tuple[list[T], int]:
        """Check ``entity`` against ``items`` and return the list with its slot freed.

        The caller's object is not touched; the id it will be stored under is
        returned instead.
        """
        if entity.id < 0:
            raise ValidationError(f"{self.entity_name} id must not be negative")
        if entity.id == 0:
            new_id = max((item.id for item in items), default=0) + 1
        elif self._active_index(items, entity.id) is not None:
            raise ConflictError(
                f"An active {self.entity_name} with id {entity.id} already exists"
            )
        else:
            new_id = entity.id
            # A soft-deleted row with the same id is replaced by the new record
            items = [item for item in items if item.id != entity.id]
        if self._check_conflicts is not None:
            self._check_conflicts(entity, self._active(items))
        return items, new_id

    @staticmethod
    def _place(entity: T, new_id: int) -> None:
        entity.id = new_id
        if supports_soft_delete(entity):
            entity.is_deleted = False
            entity.deleted_at = None

    @staticmethod
    def _restore(entities: list[T], snapshot: list[tuple[int, Any]]) -> None:
        for entity, (old_id, old_markers) in zip(entities, snapshot):
            entity.id = old_id
            if old_markers is not None:
                entity.is_deleted, entity.deleted_at = old_markers

    @staticmethod
    def _remember(entities: list[T]) -> list[tuple[int, Any]]:
        return [
            (
                entity.id,
                (entity.is_deleted, entity.deleted_at) if supports_soft_delete(entity) else None,
            )
            for entity in entities
        ]

    async def add(self, entity: T) -> T:
        with self._guard("add", id=getattr(entity, "id", None)):
            self._validate(entity)
            async with self._lock:
                items, new_id = self._stage(await self._load(), entity)
                snapshot = self._remember([entity])
                self._place(entity, new_id)
                items.append(entity)
                try:
                    await self._save(items)
                except Exception:
                    self._restore([entity], snapshot)
                    raise
            logger.debug("Added %s id=%s to %s", self.entity_name, entity.id, self.file_path)
            return entity

    async def add_many(self, entities: Iterable[T]) -> list[T]:
        """Add several records with a single write.

        Every record is validated and checked before anything is saved, so
        either all of them are stored or none are.
        """
        entities = list(entities)
        with self._guard("add_many", count=len(entities)):
            for entity in entities:
                self._validate(entity)
            async with self._lock:
                items = await self._load()
                snapshot = self._remember(entities)
                try:
                    for entity in entities:
                        items, new_id = self._stage(items, entity)
                        self._place(entity, new_id)
                        items.append(entity)
                    await self._save(items)
                except Exception:
                    self._restore(entities, snapshot)
                    raise
            logger.debug(
                "Added %d %s records to %s", len(entities), self.entity_name, self.file_path
            )
            return entities

    async def update(self, entity: T) -> T:
        with self._guard("update", id=getattr(entity, "id", None)):
            self._validate(entity)
            async with self._lock:
                items = await self._load()
                index = self._active_index(items, entity.id)
                if index is None:
                    raise NotFound(f"{self.entity_name} with id {entity.id} not found")
                if self._check_conflicts is not None:
                    others = [
                        item for item in self._active(items) if item.id != entity.id
                    ]
                    self._check_conflicts(entity, others)
                items[index] = entity
                await self._save(items)
            return entity

    async def delete(self, entity_id: int) -> None:
        with self._guard("delete", id=entity_id):
            async with self._lock:
                items = await self._load()
                index = self._active_index(items, entity_id)
                if index is None:
                    if any(item.id == entity_id and is_soft_deleted(item) for item in items):
                        raise AlreadyDeleted(
                            f"{self.entity_name} with id {entity_id} is already deleted"
                        )
                    raise NotFound(f"{self.entity_name} with id {entity_id} not found")
                record = items[index]
                if supports_soft_delete(record):
                    record.is_deleted = True
                    record.deleted_at = datetime.now(timezone.utc)
                else:
                    del items[index]
                await self._save(items)
            logger.debug("Deleted %s id=%s in %s", self.entity_name, entity_id, self.file_path)

    async def purge_deleted(self) -> int:
        """Physically remove soft-deleted rows. Returns how many were removed."""
        with self._guard("purge"):
            async with self._lock:
                items = await self._load()
                kept = self._active(items)
                removed = len(items) - len(kept)
                if removed:
                    await self._save(kept)
            if removed:
                logger.info("Purged %d deleted %s rows from %s", removed, self.entity_name, self.file_path)
            return removed

    # ------------------------------------------------------------- queries

    async def find(self, predicate: Predicate) -> list[T]:
        with self._guard("find"):
            return list(filter(self._where(predicate), await self._snapshot()))

    async def find_all(self, predicates: Iterable[Predicate]) -> list[T]:
        predicates = list(predicates)
        with self._guard("find"):
            return [
                item
                for item in await self._snapshot()
                if is_active(item) and all(check(item) for check in predicates)
            ]

    async def count(self, predicate: Predicate | None = None) -> int:
        if predicate is None:
            return len(await self.get_all())
        return len(await self.find(predicate))

    async def find_and_sort(
        self,
        predicate: Predicate,
        sort_key: Callable[[T], Any],
        ascending: bool = True,
    ) -> list[T]:
        with self._guard("sort"):
            matches = filter(self._where(predicate), await self._snapshot())
            return sorted(matches, key=sort_key, reverse=not ascending)

    async def find_and_take(self, predicate: Predicate, count: int) -> list[T]:
        with self._guard("take", count=count):
            if count < 0:
                raise ValidationError("count must not be negative")
            return list(filter(self._where(predicate), await self._snapshot()))[:count]

    async def find_and_skip(self, predicate: Predicate, count: int) -> list[T]:
        with self._guard("skip", count=count):
            if count < 0:
                raise ValidationError("count must not be negative")
            return list(filter(self._where(predicate), await self._snapshot()))[count:]

    async def find_and_group(
        self, predicate: Predicate, group_key: Callable[[T], K]
    ) -> dict[K, list[T]]:
        with self._guard("group"):
            groups: dict[K, list[T]] = {}
            for item in filter(self._where(predicate), await self._snapshot()):
                groups.setdefault(group_key(item), []).append(item)
            return groups

    async def get_paged(
        self,
        page_number: int,
        page_size: int,
        filter_: Predicate | None = None,
    ) -> PagedResult[T]:
        with self._guard("page", page_number=page_number, page_size=page_size):
            if page_number < 1:
                raise ValidationError("page_number must be at least 1")
            if page_size < 1:
                raise ValidationError("page_size must be at least 1")
            matches = self._active(await self._snapshot())
            if filter_ is not None:
                matches = [item for item in matches if filter_(item)]
            start = (page_number - 1) * page_size
            return PagedResult(
                items=matches[start : start + page_size],
                total_count=len(matches),
                page_number=page_number,
                page_size=page_size,
            )
