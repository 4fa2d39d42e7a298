from pydantic import BaseModel, ConfigDict
from decimal import Decimal
from typing import Optional


class FacilityResponse(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    description: Optional[str] = None
    directions: Optional[str] = None
    latitude: Decimal
    longitude: Decimal

    model_config = ConfigDict(from_attributes=True)


class CatalogEntryResponse(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
