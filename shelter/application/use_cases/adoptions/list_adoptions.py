from __future__ import annotations

from shelter.application.interfaces.stores import ShelterStores
from shelter.domain.models.adoption import Adoption
from shelter.domain.paging import PagedResult
from shelter.domain.value_objects.adoption_status import AdoptionStatus


async def execute(
    stores: ShelterStores,
    page_number: int = 1,
    page_size: int = 20,
    status: AdoptionStatus | None = None,
) -> PagedResult[Adoption]:
    filter_ = None
    if status is not None:
        filter_ = lambda a: a.status == status  # noqa: E731
    return await stores.adoptions.get_paged(page_number, page_size, filter_)
