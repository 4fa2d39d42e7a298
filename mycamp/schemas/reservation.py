from pydantic import BaseModel, ConfigDict
from datetime import date, datetime


class ReservationCreate(BaseModel):
    campsite_id: int
    check_in: date
    check_out: date


class ReservationResponse(BaseModel):
    id: int
    campsite_id: int
    user_id: int
    check_in: date
    check_out: date
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
