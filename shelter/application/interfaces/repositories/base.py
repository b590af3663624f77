from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import Any, Protocol, TypeVar

from shelter.domain.paging import PagedResult

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


class EntityStore(Protocol[T]):
    async def get_all(self) -> list[T]: ...

    async def get_by_id(self, entity_id: int) -> T | None: ...

    async def exists(self, entity_id: int) -> bool: ...

    async def add(self, entity: T) -> T: ...

    async def add_many(self, entities: Iterable[T]) -> list[T]: ...

    async def update(self, entity: T) -> T: ...

    async def delete(self, entity_id: int) -> None: ...

    async def purge_deleted(self) -> int: ...

    async def find(self, predicate: Callable[[T], bool]) -> list[T]: ...

    async def find_all(self, predicates: Iterable[Callable[[T], bool]]) -> list[T]: ...

    async def count(self, predicate: Callable[[T], bool] | None = None) -> int: ...

    async def find_and_sort(
        self, predicate: Callable[[T], bool], sort_key: Callable[[T], Any], ascending: bool = True
    ) -> list[T]: ...

    async def find_and_take(self, predicate: Callable[[T], bool], count: int) -> list[T]: ...

    async def find_and_skip(self, predicate: Callable[[T], bool], count: int) -> list[T]: ...

    async def find_and_group(
        self, predicate: Callable[[T], bool], group_key: Callable[[T], K]
    ) -> dict[K, list[T]]: ...

    async def get_paged(
        self,
        page_number: int,
        page_size: int,
        filter_: Callable[[T], bool] | None = None,
    ) -> PagedResult[T]: ...
