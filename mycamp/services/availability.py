from datetime import date
from typing import Dict, Optional
from sqlalchemy.orm import Session
from mycamp.models.campsite import Campsite
from mycamp.models.reservation import Reservation
from mycamp.utils.dates import days_between, horizon_end
from mycamp.utils.errors import NotFoundError
import logging

logger = logging.getLogger(__name__)


def get_active_campsite(db: Session, campsite_id: int) -> Optional[Campsite]:
    return (
        db.query(Campsite)
        .filter(Campsite.id == campsite_id, Campsite.active.is_(True))
        .first()
    )


def overlapping(campsite_id: int, day: date):
    """Filter criteria for reservations of a campsite covering ``day``."""
    return (
        Reservation.campsite_id == campsite_id,
        Reservation.check_in <= day,
        day <= Reservation.check_out,
    )


def taken_spots(db: Session, campsite_id: int, day: date) -> int:
    """Number of reservations on the campsite whose stay includes ``day``."""
    return db.query(Reservation).filter(*overlapping(campsite_id, day)).count()


def is_available(db: Session, campsite: Campsite, day: date) -> bool:
    return taken_spots(db, campsite.id, day) < campsite.capacity


def availabilities(db: Session, campsite_id: int) -> Dict[str, bool]:
    """
    Availability of an active campsite for every bookable day.

    Keys are ``YYYY-MM-DD`` strings from today through the end of the
    booking horizon, in calendar order.
    """
    campsite = get_active_campsite(db, campsite_id)
    if campsite is None:
        logger.error(f"Campsite not found: {campsite_id}")
        raise NotFoundError("Campsite not found")

    today = date.today()
    result = {}
    for day in days_between(today, horizon_end(today)):
        result[day.strftime("%Y-%m-%d")] = is_available(db, campsite, day)
    logger.debug(f"Computed {len(result)} availabilities for campsite_id: {campsite_id}")
    return result
