"""
Guest routes for the wedding guestbook.
Handles guest listing, filtering, and CRUD.
"""

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session, joinedload, selectinload

from app.database import get_db
from app.models import Guest, GuestRelationship, RsvpStatus, SeatingTable
from app.schemas import GuestCreate, GuestDetailResponse, GuestResponse, GuestUpdate
from app.services.seating_service import TableNotFoundError, assign_guest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/guests", tags=["guests"])


def _ensure_table_exists(db: Session, table_id: UUID | None) -> None:
    if table_id is None:
        return
    if not db.query(SeatingTable.id).filter(SeatingTable.id == table_id).first():
        raise HTTPException(status_code=404, detail="Table not found")


def _get_guest_or_404(db: Session, guest_id: UUID) -> Guest:
    guest = (
        db.query(Guest)
        .options(
            joinedload(Guest.table),
            selectinload(Guest.relationships_from).joinedload(GuestRelationship.guest_to),
            selectinload(Guest.relationships_to).joinedload(GuestRelationship.guest_from),
        )
        .filter(Guest.id == guest_id)
        .first()
    )
    if not guest:
        raise HTTPException(status_code=404, detail="Guest not found")
    return guest


@router.get("", response_model=List[GuestResponse])
async def list_guests(
    db: Session = Depends(get_db),
    include_declined: bool = Query(True, description="Include guests who declined"),
    has_photos: Optional[bool] = Query(None, description="Only guests with (true) or without (false) photos"),
):
    """
    List guests ordered by last name, then first name.
    """
    query = db.query(Guest).options(
        joinedload(Guest.table),
        selectinload(Guest.photo_assignments),
    )

    if not include_declined:
        query = query.filter(Guest.rsvp_status != RsvpStatus.DECLINED)

    if has_photos is True:
        query = query.filter(Guest.photo_assignments.any())
    elif has_photos is False:
        query = query.filter(~Guest.photo_assignments.any())

    return query.order_by(Guest.last_name, Guest.first_name).all()


@router.get("/{guest_id}", response_model=GuestDetailResponse)
async def get_guest(guest_id: UUID, db: Session = Depends(get_db)):
    """
    Get a guest with their table and relationships in both directions.
    """
    return _get_guest_or_404(db, guest_id)


@router.post("", response_model=GuestResponse, status_code=status.HTTP_201_CREATED)
async def create_guest(data: GuestCreate, db: Session = Depends(get_db)):
    """
    Create a new guest, optionally already seated at a table.
    """
    _ensure_table_exists(db, data.table_id)

    guest = Guest(**data.model_dump())
    db.add(guest)
    db.commit()
    db.refresh(guest)

    logger.info(f"Created guest {guest.full_name!r} ({guest.id})")
    return guest


@router.patch("/{guest_id}", response_model=GuestResponse)
async def update_guest(guest_id: UUID, data: GuestUpdate, db: Session = Depends(get_db)):
    """
    Update a guest. Only fields present in the request body are changed;
    send "table_id": null to unseat the guest.
    """
    guest = db.query(Guest).filter(Guest.id == guest_id).first()
    if not guest:
        raise HTTPException(status_code=404, detail="Guest not found")

    changes = data.model_dump(exclude_unset=True)
    for field in ("first_name", "last_name", "rsvp_status", "plus_one"):
        if field in changes and changes[field] is None:
            raise HTTPException(status_code=422, detail=f"{field} cannot be null")
    if "table_id" in changes:
        # Seat through the seating service so over-capacity moves are logged
        try:
            assign_guest(db, guest.id, changes.pop("table_id"))
        except TableNotFoundError:
            raise HTTPException(status_code=404, detail="Table not found")

    for field, value in changes.items():
        setattr(guest, field, value)

    db.commit()
    db.refresh(guest)
    return guest


@router.delete("/{guest_id}", response_class=JSONResponse)
async def delete_guest(guest_id: UUID, db: Session = Depends(get_db)):
    """
    Delete a guest together with their relationships and photo tags.
    """
    guest = db.query(Guest).filter(Guest.id == guest_id).first()
    if not guest:
        raise HTTPException(status_code=404, detail="Guest not found")

    name = guest.full_name
    db.delete(guest)
    db.commit()

    logger.info(f"Deleted guest {name!r} ({guest_id})")
    return {"success": True, "id": str(guest_id)}
