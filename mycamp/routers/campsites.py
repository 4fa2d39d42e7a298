from typing import Dict
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from mycamp.db import get_db
from mycamp.schemas.campsite import AddCampsite, CampsiteCapacityUpdate, CampsiteResponse
from mycamp.services import campsites
from mycamp.utils.auth import get_current_admin, get_current_user
import logging

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/campsites",
    tags=["campsites"],
)

CAMPSITE_NOT_FOUND = "Campsite not found"


@router.post(
    "/",
    response_model=CampsiteResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a campsite",
    description="Create a campsite with its attributes and equipment. Requires administrator rights."
)
def add_campsite(
    site: AddCampsite,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_admin),
):
    """
    Create a campsite at a facility.

    - **campsite**: loop, name, facility ID and capacity.
    - **attributes**: attribute names from the catalog with a non-empty value.
    - **equipment**: equipment names from the catalog.
    """
    logger.debug(f"Adding campsite {site.campsite.loop}/{site.campsite.name} by {current_user['username']}")
    return campsites.add_campsite(db, site.campsite, site.attributes, site.equipment)


@router.get("/{campsite_id}", response_model=CampsiteResponse)
def get_campsite(campsite_id: int, db: Session = Depends(get_db)):
    """
    Retrieve an active campsite with its attributes and equipment.
    """
    campsite = campsites.get_campsite(db, campsite_id)
    if not campsite:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CAMPSITE_NOT_FOUND)
    return campsite


@router.put("/{campsite_id}/enable")
def enable_campsite(
    campsite_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_admin),
):
    if not campsites.enable_campsite(db, campsite_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CAMPSITE_NOT_FOUND)
    return {"detail": "Campsite enabled successfully"}


@router.put("/{campsite_id}/disable")
def disable_campsite(
    campsite_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_admin),
):
    """
    Deactivate a campsite. All of its reservations are deleted.
    """
    if not campsites.disable_campsite(db, campsite_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CAMPSITE_NOT_FOUND)
    return {"detail": "Campsite disabled successfully"}


@router.delete("/{campsite_id}")
def delete_campsite(
    campsite_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_admin),
):
    """
    Permanently delete a campsite with its reservations, attributes and equipment.
    """
    if not campsites.delete_campsite(db, campsite_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CAMPSITE_NOT_FOUND)
    return {"detail": "Campsite deleted successfully"}


@router.put(
    "/{campsite_id}/capacity",
    summary="Update campsite capacity",
    description="Set a new capacity. Reservations beyond it are removed, newest first."
)
def update_capacity(
    campsite_id: int,
    update: CampsiteCapacityUpdate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_admin),
):
    logger.debug(f"Updating capacity of campsite_id: {campsite_id} to {update.capacity}")
    if not campsites.update_capacity(db, campsite_id, update.capacity):
        if campsites.get_campsite(db, campsite_id) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CAMPSITE_NOT_FOUND)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="Campsite already has this capacity"
        )
    return {"detail": "Capacity updated successfully"}


@router.get("/{campsite_id}/availabilities", response_model=Dict[str, bool])
def get_availabilities(
    campsite_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user),
):
    """
    Availability of the campsite for each day of the booking window, keyed by YYYY-MM-DD.
    """
    return campsites.get_availabilities(db, campsite_id)
