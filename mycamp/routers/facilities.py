from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from mycamp.db import get_db
from mycamp.schemas.campsite import CampsiteResponse
from mycamp.schemas.facility import CatalogEntryResponse, FacilityResponse
from mycamp.services import campsites, facilities


router = APIRouter(
    tags=["facilities"],
)


@router.get("/facilities/{facility_id}", response_model=FacilityResponse)
def get_facility(facility_id: int, db: Session = Depends(get_db)):
    """
    Retrieve a facility by ID.
    """
    facility = facilities.get_facility(db, facility_id)
    if not facility:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Facility not found")
    return facility


@router.get("/facilities/{facility_id}/campsites", response_model=List[CampsiteResponse])
def get_facility_campsites(facility_id: int, db: Session = Depends(get_db)):
    """
    List the active campsites of a facility.
    """
    if not facilities.get_facility(db, facility_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Facility not found")
    return campsites.get_campsites(db, facility_id)


@router.get("/attributes/", response_model=List[CatalogEntryResponse])
def get_attributes(db: Session = Depends(get_db)):
    return facilities.get_attributes(db)


@router.get("/equipment/", response_model=List[CatalogEntryResponse])
def get_equipment(db: Session = Depends(get_db)):
    return facilities.get_equipment(db)
