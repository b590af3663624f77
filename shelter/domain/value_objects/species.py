from __future__ import annotations

from enum import Enum


class Species(str, Enum):
    DOG = "Dog"
    CAT = "Cat"
    RABBIT = "Rabbit"
    BIRD = "Bird"
    REPTILE = "Reptile"
    OTHER = "Other"
