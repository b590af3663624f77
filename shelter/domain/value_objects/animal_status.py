from __future__ import annotations
from enum import Enum

class AnimalStatus(str, Enum):
    AVAILABLE = "Available"
    ADOPTED = "Adopted"
    RESERVED = "Reserved"
    IN_TREATMENT = "InTreatment"
    DECEASED = "Deceased"
