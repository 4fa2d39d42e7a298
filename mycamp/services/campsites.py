"""
Campsite lifecycle: creation with attributes and equipment, enable/disable,
hard delete, capacity changes and availability lookups.

Each mutating operation runs in a single unit of work; a failure at any step
leaves the database as it was before the call.
"""

from typing import Dict, List, Optional, Sequence
from sqlalchemy.orm import Session
from mycamp.db import transaction
from mycamp.models.campsite import Campsite
from mycamp.models.catalog import CampsiteAttribute, CampsiteEquipment
from mycamp.schemas.campsite import CampAttributeBase, CampsiteCreate, EquipmentBase
from mycamp.services import availability, capacity, facilities, reservations
from mycamp.utils.errors import (
    ConflictError,
    InvalidAttributeError,
    InvalidEquipmentError,
    NotFoundError,
)
import logging

logger = logging.getLogger(__name__)


def get_campsite(db: Session, campsite_id: int) -> Optional[Campsite]:
    return availability.get_active_campsite(db, campsite_id)


def get_campsites(db: Session, facility_id: int) -> List[Campsite]:
    return (
        db.query(Campsite)
        .filter(Campsite.facility_id == facility_id, Campsite.active.is_(True))
        .order_by(Campsite.loop, Campsite.name)
        .all()
    )


def find_campsite_at_facility(db: Session, facility_id: int, loop: str, name: str) -> Optional[Campsite]:
    return (
        db.query(Campsite)
        .filter(
            Campsite.facility_id == facility_id,
            Campsite.loop == loop,
            Campsite.name == name,
            Campsite.active.is_(True),
        )
        .first()
    )


def _insert_attributes(db: Session, campsite_id: int, attributes: Sequence[CampAttributeBase]):
    for attr in attributes:
        attribute_id = facilities.get_attribute_id(db, attr.name)
        if attribute_id is None:
            logger.error(f"Unknown attribute: {attr.name}")
            raise InvalidAttributeError("Invalid attribute name")
        if not attr.value or not attr.value.strip():
            logger.error(f"Blank value for attribute: {attr.name}")
            raise InvalidAttributeError("Invalid attribute value")
        db.add(CampsiteAttribute(campsite_id=campsite_id, attribute_id=attribute_id, value=attr.value))


def _insert_equipment(db: Session, campsite_id: int, equipment: Sequence[EquipmentBase]):
    for equip in equipment:
        equipment_id = facilities.get_equipment_id(db, equip.name)
        if equipment_id is None:
            logger.error(f"Unknown equipment: {equip.name}")
            raise InvalidEquipmentError("Invalid equipment name")
        db.add(CampsiteEquipment(campsite_id=campsite_id, equipment_id=equipment_id))


def add_campsite(
    db: Session,
    campsite: CampsiteCreate,
    attributes: Sequence[CampAttributeBase] = (),
    equipment: Sequence[EquipmentBase] = (),
) -> Campsite:
    """
    Create an active campsite together with its attributes and equipment.

    Raises NotFoundError for an unknown facility, ConflictError when an active
    campsite already uses the same loop and name at the facility, and
    InvalidAttributeError/InvalidEquipmentError for unknown catalog names or
    blank attribute values. Nothing is stored unless every step succeeds.
    """
    if facilities.get_facility(db, campsite.facility_id) is None:
        logger.error(f"Facility not found: {campsite.facility_id}")
        raise NotFoundError("Facility not found")

    if find_campsite_at_facility(db, campsite.facility_id, campsite.loop, campsite.name):
        logger.error(f"Campsite already exists: {campsite.facility_id}/{campsite.loop}/{campsite.name}")
        raise ConflictError("Campsite already exists")

    with transaction(db):
        db_campsite = Campsite(**campsite.model_dump(), active=True)
        db.add(db_campsite)
        db.flush()
        _insert_attributes(db, db_campsite.id, attributes)
        _insert_equipment(db, db_campsite.id, equipment)
        db.flush()

    db.refresh(db_campsite)
    logger.debug(f"Created campsite: {db_campsite.id}, facility_id: {db_campsite.facility_id}")
    return db_campsite


def delete_campsite(db: Session, campsite_id: int) -> bool:
    """Remove a campsite with its reservations, attributes and equipment."""
    with transaction(db) as uow:
        reservations.delete_all_for_campsite(db, campsite_id)
        db.query(CampsiteAttribute).filter(
            CampsiteAttribute.campsite_id == campsite_id
        ).delete(synchronize_session=False)
        db.query(CampsiteEquipment).filter(
            CampsiteEquipment.campsite_id == campsite_id
        ).delete(synchronize_session=False)
        deleted = (
            db.query(Campsite)
            .filter(Campsite.id == campsite_id)
            .delete(synchronize_session=False)
        )
        if deleted == 0:
            logger.error(f"Campsite not found: {campsite_id}")
            uow.cancel()
            return False

    logger.debug(f"Deleted campsite: {campsite_id}")
    return True


def disable_campsite(db: Session, campsite_id: int) -> bool:
    """Deactivate an active campsite and drop its reservations."""
    with transaction(db) as uow:
        reservations.delete_all_for_campsite(db, campsite_id)
        updated = (
            db.query(Campsite)
            .filter(Campsite.id == campsite_id, Campsite.active.is_(True))
            .update({Campsite.active: False}, synchronize_session=False)
        )
        if updated == 0:
            logger.error(f"Active campsite not found: {campsite_id}")
            uow.cancel()
            return False

    logger.debug(f"Disabled campsite: {campsite_id}")
    return True


def enable_campsite(db: Session, campsite_id: int) -> bool:
    with transaction(db):
        updated = (
            db.query(Campsite)
            .filter(Campsite.id == campsite_id, Campsite.active.is_(False))
            .update({Campsite.active: True}, synchronize_session=False)
        )
    logger.debug(f"Enable campsite: {campsite_id}, rows: {updated}")
    return updated > 0


def update_capacity(db: Session, campsite_id: int, new_capacity: int) -> bool:
    return capacity.update_capacity(db, campsite_id, new_capacity)


def get_availabilities(db: Session, campsite_id: int) -> Dict[str, bool]:
    return availability.availabilities(db, campsite_id)
