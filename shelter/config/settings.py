from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    data_dir: Path = Path("Data/Json")
    log_level: str = "INFO"
    environment: str = "dev"
    # Seed sample records into empty data files at startup
    seed_sample_data: bool = True
    # How far in the future an adoption date may be set
    adoption_date_grace_days: int = 365
    default_page_size: int = 20
    max_page_size: int = 100
    # CORS
    cors_allow_origins: str = "*"
    # Data file names, relative to data_dir
    animals_file: str = "animals.json"
    adoptions_file: str = "adoptions.json"
    customers_file: str = "customers.json"
    employees_file: str = "employees.json"
    health_records_file: str = "healthrecords.json"
    visits_file: str = "visits.json"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="SHELTER_", extra="ignore"
    )

    @field_validator("adoption_date_grace_days", "default_page_size", "max_page_size")
    @classmethod
    def ensure_non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("must not be negative")
        return value

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]

    def data_file(self, name: str) -> Path:
        return self.data_dir / name


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
