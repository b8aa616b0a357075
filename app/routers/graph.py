"""
Relationship graph routes for the wedding guestbook.
Provides network visualization data of guests and their relationships.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.database import get_db
from app.models import Guest, GuestRelationship, RsvpStatus, SeatingTable
from app.services.relationship_graph import FILTER_ALL, GRAPH_FILTERS, build_relationship_graph

router = APIRouter(prefix="/graph", tags=["graph"])


@router.get("/filters", response_class=JSONResponse)
async def get_graph_filters():
    """Filter names accepted by /graph/data."""
    return {"filters": list(GRAPH_FILTERS)}


@router.get("/data", response_class=JSONResponse)
async def get_graph_data(
    db: Session = Depends(get_db),
    filter_type: str = Query(FILTER_ALL, description="all, family or friends"),
    include_declined: bool = Query(False, description="Include guests who declined"),
):
    """
    Return graph data for a force-directed layout.
    Returns nodes (guests), links (relationships) and summary stats.
    """
    guest_query = db.query(Guest)
    if not include_declined:
        guest_query = guest_query.filter(Guest.rsvp_status != RsvpStatus.DECLINED)
    guests = guest_query.order_by(Guest.last_name, Guest.first_name).all()

    relationships = db.query(GuestRelationship).order_by(GuestRelationship.created_at).all()
    tables = db.query(SeatingTable).order_by(SeatingTable.name).all()

    return build_relationship_graph(guests, relationships, tables, filter_type=filter_type)
