from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from finance_tracker.db.json_store import JsonDatabase
from finance_tracker.db.session import get_db
from finance_tracker.models.ledger import LedgerEntry, LedgerEntryCreate
from finance_tracker.models.party import Party
from finance_tracker.repositories.ledger_repo import LedgerRepository, PartyRepository
from finance_tracker.schemas.ledger import (
    LedgerLineResponse,
    OutstandingResponse,
    PartyLedgerResponse,
    PartySummary,
)
from finance_tracker.services.ledger import (
    InvalidEntryType,
    LedgerSide,
    LedgerStatement,
    compute_ledger,
    filter_lines,
)

router = APIRouter()


def _get_party(db: JsonDatabase, party_id: int) -> Party:
    party = PartyRepository(db).get(party_id)
    if party is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Party not found")
    return party


def _statement(db: JsonDatabase, party: Party) -> LedgerStatement:
    try:
        return compute_ledger(party.opening_balance, LedgerRepository(db).rows_for_party(party.id))
    except InvalidEntryType as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


@router.get("/parties/{party_id}/entries", response_model=PartyLedgerResponse)
async def get_party_ledger(
    party_id: int,
    side: LedgerSide = Query(default=LedgerSide.ALL),
    db: JsonDatabase = Depends(get_db),
):
    """Party ledger in date order with the running balance after each entry"""
    party = _get_party(db, party_id)
    statement = _statement(db, party)
    summary = PartySummary.from_statement(party.id, statement)
    return PartyLedgerResponse(
        **summary.model_dump(),
        side=side,
        entries=[LedgerLineResponse.from_line(line) for line in filter_lines(statement, side)],
    )


@router.get("/parties/{party_id}/summary", response_model=PartySummary)
async def get_party_summary(party_id: int, db: JsonDatabase = Depends(get_db)):
    """Opening balance, totals and current balance for a party"""
    party = _get_party(db, party_id)
    return PartySummary.from_statement(party.id, _statement(db, party))


@router.get("/parties/{party_id}/outstanding", response_model=OutstandingResponse)
async def get_party_outstanding(party_id: int, db: JsonDatabase = Depends(get_db)):
    """Current balance of a party"""
    party = _get_party(db, party_id)
    return OutstandingResponse(party_id=party.id, outstanding=_statement(db, party).current_balance)


@router.get("/entries/{entry_id}", response_model=LedgerEntry)
async def get_entry(entry_id: int, db: JsonDatabase = Depends(get_db)):
    """Get a ledger entry"""
    entry = LedgerRepository(db).get(entry_id)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ledger entry not found")
    return entry


@router.post("/entries", response_model=LedgerEntry, status_code=status.HTTP_201_CREATED)
async def create_entry(payload: LedgerEntryCreate, db: JsonDatabase = Depends(get_db)):
    """Add a purchase, payment or adjustment to a party"""
    _get_party(db, payload.party_id)
    return LedgerRepository(db).create(payload)


@router.put("/entries/{entry_id}", response_model=LedgerEntry)
async def replace_entry(entry_id: int, payload: LedgerEntryCreate, db: JsonDatabase = Depends(get_db)):
    """Replace a ledger entry"""
    _get_party(db, payload.party_id)
    entry = LedgerRepository(db).update(entry_id, payload)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ledger entry not found")
    return entry


@router.delete("/entries/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(entry_id: int, db: JsonDatabase = Depends(get_db)):
    """Delete a ledger entry"""
    if not LedgerRepository(db).delete(entry_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ledger entry not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
