"""Pydantic models for FDC abridged food payloads."""

from pydantic import BaseModel, Field


class FdcNutrient(BaseModel):
    """Nutrient entry of an abridged food."""

    number: str
    name: str = ""
    amount: float = 0.0
    unit_name: str | None = Field(default=None, alias="unitName")


class FdcFood(BaseModel):
    """Abridged food payload."""

    fdc_id: int = Field(alias="fdcId")
    description: str = ""
    data_type: str | None = Field(default=None, alias="dataType")
    publication_date: str | None = Field(default=None, alias="publicationDate")
    ndb_number: int | str | None = Field(default=None, alias="ndbNumber")
    food_nutrients: list[FdcNutrient] = Field(
        default_factory=list, alias="foodNutrients"
    )
