from pydantic import BaseModel, ConfigDict, Field
from typing import List


class CampAttributeBase(BaseModel):
    name: str
    value: str


class CampAttributeResponse(CampAttributeBase):
    model_config = ConfigDict(from_attributes=True)


class EquipmentBase(BaseModel):
    name: str


class EquipmentResponse(EquipmentBase):
    model_config = ConfigDict(from_attributes=True)


class CampsiteBase(BaseModel):
    loop: str
    name: str
    facility_id: int
    capacity: int = Field(gt=0)


class CampsiteCreate(CampsiteBase):
    pass


class AddCampsite(BaseModel):
    campsite: CampsiteCreate
    attributes: List[CampAttributeBase] = []
    equipment: List[EquipmentBase] = []


class CampsiteCapacityUpdate(BaseModel):
    capacity: int = Field(gt=0)


class CampsiteResponse(CampsiteBase):
    id: int
    active: bool
    attributes: List[CampAttributeResponse] = []
    equipment: List[EquipmentResponse] = []

    model_config = ConfigDict(from_attributes=True)
