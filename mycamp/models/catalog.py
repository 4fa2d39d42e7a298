from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from mycamp.db import Base


class Attribute(Base):
    __tablename__ = "attributes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)


class Equipment(Base):
    __tablename__ = "equipment"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)


class CampsiteAttribute(Base):
    __tablename__ = "campsites_attributes"

    campsite_id = Column(Integer, ForeignKey("campsites.id"), primary_key=True)
    attribute_id = Column(Integer, ForeignKey("attributes.id"), primary_key=True)
    value = Column(String, nullable=False)

    attribute = relationship("Attribute", lazy="joined")

    @property
    def name(self):
        return self.attribute.name


class CampsiteEquipment(Base):
    __tablename__ = "campsites_equipment"

    campsite_id = Column(Integer, ForeignKey("campsites.id"), primary_key=True)
    equipment_id = Column(Integer, ForeignKey("equipment.id"), primary_key=True)

    equipment = relationship("Equipment", lazy="joined")

    @property
    def name(self):
        return self.equipment.name
