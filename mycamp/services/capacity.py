"""
Capacity reconciliation.

Lowering a campsite's capacity evicts the reservations that no longer fit.
For every day covered by at least one reservation, the surplus over the new
capacity is removed starting from the most recently created reservation, so
the earliest bookings are kept. Days are visited following the reservations
in creation order.
"""

from datetime import date
from typing import List
from sqlalchemy import select
from sqlalchemy.orm import Session
from mycamp.db import transaction
from mycamp.models.campsite import Campsite
from mycamp.models.reservation import Reservation
from mycamp.services.availability import overlapping, taken_spots
from mycamp.utils.dates import days_between
from mycamp.utils.errors import DataConsistencyError
import logging

logger = logging.getLogger(__name__)


def reservations_by_creation(db: Session, campsite_id: int) -> List[Reservation]:
    return (
        db.query(Reservation)
        .filter(Reservation.campsite_id == campsite_id)
        .order_by(Reservation.created_at, Reservation.id)
        .all()
    )


def cut_extra_reserved_spots(db: Session, campsite_id: int, day: date, capacity: int) -> int:
    """Delete the newest reservations covering ``day`` until at most ``capacity`` remain."""
    difference = taken_spots(db, campsite_id, day) - capacity
    if difference <= 0:
        return 0

    newest = (
        select(Reservation.id)
        .where(*overlapping(campsite_id, day))
        .order_by(Reservation.created_at.desc(), Reservation.id.desc())
        .limit(difference)
        .subquery()
    )
    deleted = (
        db.query(Reservation)
        .filter(Reservation.id.in_(select(newest.c.id)))
        .delete(synchronize_session=False)
    )
    if deleted == 0:
        logger.error(f"No reservations deleted on {day} for campsite_id: {campsite_id}")
        raise DataConsistencyError("Failed to delete extra reservations")
    logger.debug(f"Evicted {deleted} reservations on {day} for campsite_id: {campsite_id}")
    return deleted


def update_capacity(db: Session, campsite_id: int, capacity: int) -> bool:
    """
    Set a new capacity and evict reservations that exceed it.

    Runs as one unit of work. Returns False, with nothing changed, when no
    active campsite has the given id or its capacity already equals
    ``capacity``.
    """
    with transaction(db) as uow:
        visited = set()
        for reservation in reservations_by_creation(db, campsite_id):
            for day in days_between(reservation.check_in, reservation.check_out):
                if day in visited:
                    continue
                visited.add(day)
                cut_extra_reserved_spots(db, campsite_id, day, capacity)

        updated = (
            db.query(Campsite)
            .filter(
                Campsite.id == campsite_id,
                Campsite.active.is_(True),
                Campsite.capacity != capacity,
            )
            .update({Campsite.capacity: capacity}, synchronize_session=False)
        )
        if updated == 0:
            logger.error(f"No active campsite {campsite_id} to set to capacity {capacity}")
            uow.cancel()
            return False

    logger.debug(f"Updated capacity of campsite_id: {campsite_id} to {capacity}")
    return True
