"""
Parties and their ledger entries.

Both live in ``database.json``. Entries are returned in insertion order,
which is the tie-break the balance calculation relies on for equal dates.

Balances are computed from the stored rows as they are, so an entry with an
unknown type fails only its own party's statement (InvalidEntryType).
"""

from collections import defaultdict
from typing import Any, Dict, List, Optional

from finance_tracker.core.logging import get_logger
from finance_tracker.models.ledger import LedgerEntry
from finance_tracker.models.party import Party, PartyWithTotals
from finance_tracker.repositories.base import JsonRepository
from finance_tracker.services.ledger import InvalidEntryType, compute_ledger

logger = get_logger(__name__)


class LedgerRepository(JsonRepository[LedgerEntry]):
    """Repository for ledger entries."""

    collection = "ledgerEntries"
    model = LedgerEntry

    def rows_for_party(self, party_id: int) -> List[Dict[str, Any]]:
        """Stored rows of one party, unvalidated, in insertion order."""
        return [row for row in self.db.read_collection(self.collection) if row.get("partyId") == party_id]

    def rows_by_party(self) -> Dict[int, List[Dict[str, Any]]]:
        grouped = defaultdict(list)
        for row in self.db.read_collection(self.collection):
            grouped[row.get("partyId")].append(row)
        return grouped


class PartyRepository(JsonRepository[Party]):
    """Repository for trading parties."""

    collection = "parties"
    model = Party

    def with_totals(self, party: Party, rows: Optional[List[Dict[str, Any]]] = None) -> PartyWithTotals:
        """
        Attach totals derived from the party's ledger entries.

        Raises InvalidEntryType if one of the party's entries has an unknown type.
        """
        if rows is None:
            rows = LedgerRepository(self.db).rows_for_party(party.id)
        statement = compute_ledger(party.opening_balance, rows)
        return PartyWithTotals(
            **party.model_dump(),
            total_purchases=statement.total_purchases,
            total_payments=statement.total_payments,
            current_balance=statement.current_balance,
            transaction_count=statement.transaction_count,
        )

    def with_totals_or_error(self, party: Party, rows: Optional[List[Dict[str, Any]]] = None) -> PartyWithTotals:
        """Like with_totals, but a broken ledger leaves the totals empty and sets ``ledger_error``."""
        try:
            return self.with_totals(party, rows)
        except InvalidEntryType as e:
            logger.warning("Cannot total ledger of party %s: %s", party.id, e)
            return PartyWithTotals(**party.model_dump(), ledger_error=str(e))

    def list_with_totals(self, parties: Optional[List[Party]] = None) -> List[PartyWithTotals]:
        if parties is None:
            parties = self.list_all()
        rows = LedgerRepository(self.db).rows_by_party()
        return [self.with_totals_or_error(party, rows.get(party.id, [])) for party in parties]

    def search(self, query: str) -> List[Party]:
        """Case-insensitive match on name or contact."""
        needle = query.strip().lower()
        if not needle:
            return self.list_all()
        return [
            party for party in self.list_all()
            if needle in party.name.lower() or needle in (party.contact or "").lower()
        ]

    def delete(self, record_id: int) -> bool:
        """Delete a party together with its ledger entries in one write."""
        parties = self.db.read_collection(self.collection)
        remaining = [row for row in parties if row.get("id") != record_id]
        if len(remaining) == len(parties):
            return False

        entries = self.db.read_collection(LedgerRepository.collection)
        self.db.write_collections({
            self.collection: remaining,
            LedgerRepository.collection: [
                row for row in entries if row.get("partyId") != record_id
            ],
        })
        return True

    def get_with_totals(self, party_id: int) -> Optional[PartyWithTotals]:
        party = self.get(party_id)
        return self.with_totals(party) if party is not None else None
