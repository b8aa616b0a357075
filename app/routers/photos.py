"""
Photo routes for the wedding guestbook.
Lists photos and tags guests in them.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas import PhotoGuestsUpdate, PhotoResponse
from app.services.photo_service import (
    AssignmentNotFoundError,
    PhotoGuestNotFoundError,
    PhotoNotFoundError,
    assign_guests,
    list_photos,
    remove_guest_assignment,
)

router = APIRouter(prefix="/photos", tags=["photos"])


@router.get("", response_model=List[PhotoResponse])
async def get_photos(
    db: Session = Depends(get_db),
    hide_assigned: bool = Query(False, description="Only photos nobody has been tagged in"),
):
    """
    List photos ordered by file name, with the guests tagged in each.
    """
    return list_photos(db, hide_assigned=hide_assigned)


@router.put("/{photo_id}/guests", response_model=PhotoResponse)
async def set_photo_guests(photo_id: UUID, data: PhotoGuestsUpdate, db: Session = Depends(get_db)):
    """
    Replace the guests tagged in a photo. An empty list clears all tags.
    """
    try:
        return assign_guests(db, photo_id, data.guest_ids)
    except PhotoNotFoundError:
        raise HTTPException(status_code=404, detail="Photo not found")
    except PhotoGuestNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{photo_id}/guests/{guest_id}", response_model=PhotoResponse)
async def remove_photo_guest(photo_id: UUID, guest_id: UUID, db: Session = Depends(get_db)):
    """
    Untag one guest from a photo.
    """
    try:
        return remove_guest_assignment(db, photo_id, guest_id)
    except PhotoNotFoundError:
        raise HTTPException(status_code=404, detail="Photo not found")
    except AssignmentNotFoundError:
        raise HTTPException(status_code=404, detail="Guest is not assigned to this photo")
