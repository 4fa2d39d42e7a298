from sqlalchemy import Boolean, Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from mycamp.db import Base


class Campsite(Base):
    __tablename__ = "campsites"

    id = Column(Integer, primary_key=True, index=True)
    loop = Column(String, nullable=False)
    name = Column(String, nullable=False)
    facility_id = Column(Integer, ForeignKey("facilities.id"), nullable=False, index=True)
    capacity = Column(Integer, nullable=False, default=1)
    active = Column(Boolean, nullable=False, default=True)

    facility = relationship("Facility", back_populates="campsites")
    reservations = relationship("Reservation", back_populates="campsite")
    attributes = relationship("CampsiteAttribute", order_by="CampsiteAttribute.attribute_id")
    equipment = relationship("CampsiteEquipment", order_by="CampsiteEquipment.equipment_id")
