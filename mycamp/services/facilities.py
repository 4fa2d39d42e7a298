from typing import List, Optional
from sqlalchemy.orm import Session
from mycamp.models.catalog import Attribute, Equipment
from mycamp.models.facility import Facility


def get_facility(db: Session, facility_id: int) -> Optional[Facility]:
    return db.query(Facility).filter(Facility.id == facility_id).first()


def get_attributes(db: Session) -> List[Attribute]:
    return db.query(Attribute).order_by(Attribute.name).all()


def get_equipment(db: Session) -> List[Equipment]:
    return db.query(Equipment).order_by(Equipment.name).all()


def get_attribute_id(db: Session, name: str) -> Optional[int]:
    return db.query(Attribute.id).filter(Attribute.name == name).scalar()


def get_equipment_id(db: Session, name: str) -> Optional[int]:
    return db.query(Equipment.id).filter(Equipment.name == name).scalar()
