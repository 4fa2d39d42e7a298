"""
Reservation validation and storage.

Reservations are admitted when their dates fall inside the booking horizon and
do not overlap another stay of the same user on the same campsite. Campsite
capacity is not checked here; it is enforced when capacity is lowered.
"""

from datetime import date, datetime, timezone
from typing import List, Optional
from sqlalchemy.orm import Session
from mycamp.db import transaction
from mycamp.models.reservation import Reservation
from mycamp.services.availability import get_active_campsite
from mycamp.utils.dates import horizon_end
from mycamp.utils.errors import (
    InvalidReservationError,
    NotFoundError,
    ReservationOverlapError,
)
import logging

logger = logging.getLogger(__name__)


def list_by_user(db: Session, user_id: int) -> List[Reservation]:
    return (
        db.query(Reservation)
        .filter(Reservation.user_id == user_id)
        .order_by(Reservation.check_in, Reservation.id)
        .all()
    )


def list_by_campsite(db: Session, campsite_id: int) -> List[Reservation]:
    return (
        db.query(Reservation)
        .filter(Reservation.campsite_id == campsite_id)
        .order_by(Reservation.check_in, Reservation.id)
        .all()
    )


def get_reservation(db: Session, reservation_id: int) -> Optional[Reservation]:
    return db.query(Reservation).filter(Reservation.id == reservation_id).first()


def valid_dates(check_in: date, check_out: date, today: Optional[date] = None) -> bool:
    today = today or date.today()
    return check_in >= today and check_out <= horizon_end(today) and check_out >= check_in


def find_overlap(db: Session, reservation: Reservation) -> Optional[Reservation]:
    """First reservation of the same user on the same campsite sharing at least one day."""
    return (
        db.query(Reservation)
        .filter(
            Reservation.user_id == reservation.user_id,
            Reservation.campsite_id == reservation.campsite_id,
            Reservation.check_in <= reservation.check_out,
            reservation.check_in <= Reservation.check_out,
        )
        .first()
    )


def validate_reservation(db: Session, reservation: Reservation) -> None:
    if get_active_campsite(db, reservation.campsite_id) is None:
        logger.error(f"Campsite not found: {reservation.campsite_id}")
        raise NotFoundError("Campsite not found")

    if not valid_dates(reservation.check_in, reservation.check_out):
        logger.error(
            f"Invalid reservation dates: {reservation.check_in} to {reservation.check_out}"
        )
        raise InvalidReservationError("Invalid reservation")

    existing = find_overlap(db, reservation)
    if existing is not None:
        logger.error(
            f"Reservation overlaps reservation {existing.id} of user {reservation.user_id}"
        )
        raise ReservationOverlapError("Reservation overlaps an existing reservation")


def insert_reservation(db: Session, reservation: Reservation) -> bool:
    """Validate and store a new reservation, stamping its creation time."""
    with transaction(db):
        validate_reservation(db, reservation)
        reservation.created_at = datetime.now(timezone.utc).replace(tzinfo=None)
        db.add(reservation)
        db.flush()
    logger.debug(f"Created reservation: {reservation.id}, campsite_id: {reservation.campsite_id}")
    return reservation.id is not None


def delete_one(db: Session, reservation_id: int) -> bool:
    with transaction(db):
        deleted = (
            db.query(Reservation)
            .filter(Reservation.id == reservation_id)
            .delete(synchronize_session=False)
        )
    logger.debug(f"Deleted reservation: {reservation_id}, rows: {deleted}")
    return deleted > 0


def delete_all_for_campsite(db: Session, campsite_id: int) -> bool:
    """
    Remove every reservation of a campsite.

    Joins the caller's unit of work when invoked inside one.
    Returns True if at least one reservation was removed.
    """
    with transaction(db):
        deleted = (
            db.query(Reservation)
            .filter(Reservation.campsite_id == campsite_id)
            .delete(synchronize_session=False)
        )
    logger.debug(f"Deleted {deleted} reservations for campsite_id: {campsite_id}")
    return deleted > 0
