from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from mycamp.db import get_db
from mycamp.models.reservation import Reservation
from mycamp.schemas.reservation import ReservationCreate, ReservationResponse
from mycamp.services import reservations
from mycamp.utils.auth import get_current_admin, get_current_user
import logging

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/reservations",
    tags=["reservations"],
)


@router.get(
    "/",
    response_model=List[ReservationResponse],
    summary="List my reservations",
    description="Retrieve every reservation made by the authenticated user."
)
def get_reservations(
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user),
):
    result = reservations.list_by_user(db, current_user["id"])
    logger.debug(f"Retrieved {len(result)} reservations for user: {current_user['username']}")
    return result


@router.post(
    "/",
    response_model=ReservationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a reservation",
    description="Book a campsite for a date range. Requires authentication."
)
def create_reservation(
    reservation: ReservationCreate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user),
):
    """
    Book a campsite.

    - **campsite_id**: ID of an active campsite.
    - **check_in**: first night, today at the earliest.
    - **check_out**: last day, within two months from today and not before check-in.

    Fails with 409 when the user already holds an overlapping reservation on the campsite.
    """
    logger.debug(f"Creating reservation for user: {current_user['username']}, campsite_id: {reservation.campsite_id}")
    db_reservation = Reservation(
        campsite_id=reservation.campsite_id,
        user_id=current_user["id"],
        check_in=reservation.check_in,
        check_out=reservation.check_out,
    )
    if not reservations.insert_reservation(db, db_reservation):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Failed to add reservation")
    db.refresh(db_reservation)
    return db_reservation


@router.delete("/{reservation_id}")
def delete_reservation(
    reservation_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user),
):
    """
    Cancel a reservation. Only its owner or an administrator may do so.
    """
    db_reservation = reservations.get_reservation(db, reservation_id)
    if not db_reservation:
        logger.error(f"Reservation not found: {reservation_id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reservation not found")

    if db_reservation.user_id != current_user["id"] and current_user["role"] != "admin":
        logger.error(f"User {current_user['username']} not authorized to delete reservation {reservation_id}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized to delete this reservation")

    if not reservations.delete_one(db, reservation_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reservation not found")
    return {"detail": "Reservation deleted successfully"}


@router.get("/campsites/{campsite_id}", response_model=List[ReservationResponse])
def get_campsite_reservations(
    campsite_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_admin),
):
    return reservations.list_by_campsite(db, campsite_id)


@router.delete("/campsites/{campsite_id}")
def delete_campsite_reservations(
    campsite_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_admin),
):
    """
    Delete every reservation of a campsite.
    """
    if not reservations.delete_all_for_campsite(db, campsite_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No reservations found for campsite")
    return {"detail": "Reservations deleted successfully"}
