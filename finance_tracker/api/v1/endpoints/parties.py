from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from finance_tracker.db.json_store import JsonDatabase
from finance_tracker.db.session import get_db
from finance_tracker.models.party import PartyCreate, PartyWithTotals
from finance_tracker.repositories.ledger_repo import PartyRepository
from finance_tracker.services.ledger import InvalidEntryType

router = APIRouter()


@router.get("", response_model=List[PartyWithTotals])
async def list_parties(db: JsonDatabase = Depends(get_db)):
    """List all parties with totals from their ledgers"""
    return PartyRepository(db).list_with_totals()


@router.get("/search", response_model=List[PartyWithTotals])
async def search_parties(q: str = Query(default=""), db: JsonDatabase = Depends(get_db)):
    """Search parties by name or contact"""
    repo = PartyRepository(db)
    return repo.list_with_totals(repo.search(q))


@router.get("/{party_id}", response_model=PartyWithTotals)
async def get_party(party_id: int, db: JsonDatabase = Depends(get_db)):
    """Get a specific party"""
    try:
        party = PartyRepository(db).get_with_totals(party_id)
    except InvalidEntryType as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    if party is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Party not found")
    return party


@router.post("", response_model=PartyWithTotals, status_code=status.HTTP_201_CREATED)
async def create_party(payload: PartyCreate, db: JsonDatabase = Depends(get_db)):
    """Create a party"""
    repo = PartyRepository(db)
    return repo.with_totals(repo.create(payload), rows=[])


@router.put("/{party_id}", response_model=PartyWithTotals)
async def replace_party(party_id: int, payload: PartyCreate, db: JsonDatabase = Depends(get_db)):
    """Replace a party's details; its ledger entries are kept"""
    repo = PartyRepository(db)
    party = repo.update(party_id, payload)
    if party is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Party not found")
    return repo.with_totals_or_error(party)


@router.delete("/{party_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_party(party_id: int, db: JsonDatabase = Depends(get_db)):
    """Delete a party and its ledger entries"""
    if not PartyRepository(db).delete(party_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Party not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
