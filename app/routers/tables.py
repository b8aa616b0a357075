"""
Table routes for the wedding guestbook.
Handles table CRUD, seating guests, and table suggestions.
"""

import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.database import get_db
from app.models import SeatingTable
from app.schemas import (
    AssignGuestRequest,
    GuestResponse,
    SeatingOverviewResponse,
    SuggestionsResponse,
    TableCreate,
    TableResponse,
    TableUpdate,
)
from app.services.seating_service import (
    GuestNotFoundError,
    TableNotFoundError,
    assign_guest,
    load_tables,
    seating_overview,
    suggestions_for_guest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tables", tags=["tables"])


def _get_table_or_404(db: Session, table_id: UUID) -> SeatingTable:
    table = db.query(SeatingTable).filter(SeatingTable.id == table_id).first()
    if not table:
        raise HTTPException(status_code=404, detail="Table not found")
    return table


@router.get("", response_model=List[TableResponse])
async def list_tables(db: Session = Depends(get_db)):
    """
    List tables ordered by name, with the guests seated at each.
    """
    return load_tables(db)


@router.get("/overview", response_model=SeatingOverviewResponse)
async def get_overview(db: Session = Depends(get_db)):
    """
    Capacity totals, unassigned guests, and relationships within each table.
    """
    return seating_overview(db)


@router.get("/suggestions/{guest_id}", response_model=SuggestionsResponse)
async def get_suggestions(guest_id: UUID, db: Session = Depends(get_db)):
    """
    Suggest up to three tables for an unseated guest, ranked by the summed
    strength of their relationships with guests already at each table.
    Full tables are never suggested. All tables with a free seat are
    returned alongside as available_tables.
    """
    try:
        result = suggestions_for_guest(db, guest_id)
    except GuestNotFoundError:
        raise HTTPException(status_code=404, detail="Guest not found")

    return {
        "guest_id": result["guest"].id,
        "suggestions": [
            {"table": table, "score": score} for table, score in result["suggestions"]
        ],
        "available_tables": result["available_tables"],
    }


@router.post("/assign", response_model=GuestResponse)
async def assign_guest_to_table(data: AssignGuestRequest, db: Session = Depends(get_db)):
    """
    Seat a guest at a table, or unseat them when table_id is null.
    """
    try:
        return assign_guest(db, data.guest_id, data.table_id)
    except GuestNotFoundError:
        raise HTTPException(status_code=404, detail="Guest not found")
    except TableNotFoundError:
        raise HTTPException(status_code=404, detail="Table not found")


@router.post("", response_model=TableResponse, status_code=status.HTTP_201_CREATED)
async def create_table(data: TableCreate, db: Session = Depends(get_db)):
    """
    Create a new table.
    """
    table = SeatingTable(**data.model_dump())
    db.add(table)
    db.commit()
    db.refresh(table)

    logger.info(f"Created table {table.name!r} with {table.capacity} seats")
    return table


@router.patch("/{table_id}", response_model=TableResponse)
async def update_table(table_id: UUID, data: TableUpdate, db: Session = Depends(get_db)):
    """
    Update a table's name, capacity or description.
    """
    table = _get_table_or_404(db, table_id)

    changes = data.model_dump(exclude_unset=True)
    for field in ("name", "capacity"):
        if field in changes and changes[field] is None:
            raise HTTPException(status_code=422, detail=f"{field} cannot be null")

    for field, value in changes.items():
        setattr(table, field, value)

    db.commit()
    db.refresh(table)

    if table.guest_count > table.capacity:
        logger.warning(f"Table {table.name!r} is over capacity ({table.guest_count}/{table.capacity})")
    return table


@router.delete("/{table_id}", response_class=JSONResponse)
async def delete_table(table_id: UUID, db: Session = Depends(get_db)):
    """
    Delete a table. Its guests become unassigned.
    """
    table = _get_table_or_404(db, table_id)

    unseated = table.guest_count
    db.delete(table)
    db.commit()

    logger.info(f"Deleted table {table_id}; {unseated} guests unassigned")
    return {"success": True, "id": str(table_id), "unassigned_guests": unseated}
