"""Company document schema."""

from pydantic import Field

from models.common import CamelModel


class BusinessHours(CamelModel):
    day_of_week: str
    is_open: bool
    start_time: str = Field(..., pattern=r"^\d{2}:\d{2}$")
    end_time: str = Field(..., pattern=r"^\d{2}:\d{2}$")


class CompanySettings(CamelModel):
    address: str | None = None
    timezone: str | None = None
    business_hours: list[BusinessHours] = Field(default_factory=list)
    co2_emission_factor_kg_per_km: float | None = Field(default=None, ge=0)


class Company(CamelModel):
    """Path: companies/{company_id}"""

    id: str = ""
    name: str
    owner_id: str | None = None
    settings: CompanySettings | None = None
