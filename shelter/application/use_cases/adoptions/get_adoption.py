from __future__ import annotations

from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.adoptions.common import load_adoption
from shelter.domain.models.adoption import Adoption


async def execute(stores: ShelterStores, adoption_id: int) -> Adoption:
    return await load_adoption(stores, adoption_id)
