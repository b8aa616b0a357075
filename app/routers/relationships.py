"""
Relationship routes for the wedding guestbook.
"""

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from app.database import get_db
from app.models import Guest, GuestRelationship
from app.schemas import RelationshipCreate, RelationshipResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/relationships", tags=["relationships"])


@router.get("", response_model=List[RelationshipResponse])
async def list_relationships(
    db: Session = Depends(get_db),
    guest_id: Optional[UUID] = Query(None, description="Only relationships touching this guest"),
):
    """
    List relationships with both guests.
    """
    query = db.query(GuestRelationship).options(
        joinedload(GuestRelationship.guest_from),
        joinedload(GuestRelationship.guest_to),
    )

    if guest_id:
        query = query.filter(
            or_(
                GuestRelationship.guest_from_id == guest_id,
                GuestRelationship.guest_to_id == guest_id,
            )
        )

    return query.order_by(GuestRelationship.created_at).all()


@router.post("", response_model=RelationshipResponse, status_code=status.HTTP_201_CREATED)
async def create_relationship(data: RelationshipCreate, db: Session = Depends(get_db)):
    """
    Create a relationship between two different guests.
    """
    found = {
        row.id
        for row in db.query(Guest.id).filter(Guest.id.in_([data.guest_from_id, data.guest_to_id])).all()
    }
    if data.guest_from_id not in found or data.guest_to_id not in found:
        raise HTTPException(status_code=404, detail="Guest not found")

    relationship = GuestRelationship(**data.model_dump())
    db.add(relationship)
    db.commit()
    db.refresh(relationship)

    logger.info(
        f"Created {relationship.relationship_type.value} relationship "
        f"{relationship.guest_from_id} -> {relationship.guest_to_id} (strength {relationship.strength})"
    )
    return relationship


@router.delete("/{relationship_id}", response_class=JSONResponse)
async def delete_relationship(relationship_id: UUID, db: Session = Depends(get_db)):
    """
    Delete a relationship.
    """
    relationship = db.query(GuestRelationship).filter(GuestRelationship.id == relationship_id).first()
    if not relationship:
        raise HTTPException(status_code=404, detail="Relationship not found")

    db.delete(relationship)
    db.commit()
    return {"success": True, "id": str(relationship_id)}
