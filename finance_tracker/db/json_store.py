"""
Flat JSON file persistence.

Every read loads the whole file and every write replaces it. There is no
locking: two processes writing the same file can overwrite each other's
last change.
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, List

from finance_tracker.core.logging import get_logger

logger = get_logger(__name__)

COLLECTIONS = (
    "expenses",
    "income",
    "credits",
    "notes",
    "tasks",
    "budgets",
    "recurringItems",
    "expenseTemplates",
    "savingsGoals",
    "parties",
    "ledgerEntries",
)


class JsonStore:
    """One JSON document on disk."""

    def __init__(self, path: Path, default: Any):
        self.path = Path(path)
        self.default = default

    def initialize(self) -> None:
        """Create the parent directory and an empty document if missing."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self.write(copy.deepcopy(self.default))

    def read(self) -> Any:
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                return json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Error reading %s: %s", self.path, exc)
            return copy.deepcopy(self.default)

    def write(self, data: Any) -> None:
        with self.path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=2)


class JsonDatabase:
    """The two backing files: ``users.json`` and ``database.json``."""

    def __init__(self, users_path: Path, database_path: Path):
        self.users = JsonStore(users_path, [])
        self.data = JsonStore(database_path, {name: [] for name in COLLECTIONS})

    def initialize(self) -> None:
        self.users.initialize()
        self.data.initialize()

    def read_users(self) -> List[Dict[str, Any]]:
        users = self.users.read()
        return users if isinstance(users, list) else []

    def write_users(self, users: List[Dict[str, Any]]) -> None:
        self.users.write(users)

    def read_collection(self, name: str) -> List[Dict[str, Any]]:
        document = self.data.read()
        return list(document.get(name) or [])

    def write_collection(self, name: str, rows: List[Dict[str, Any]]) -> None:
        document = self.data.read()
        document[name] = rows
        self.data.write(document)

    def write_collections(self, collections: Dict[str, List[Dict[str, Any]]]) -> None:
        """Replace several collections with a single file write."""
        document = self.data.read()
        document.update(collections)
        self.data.write(document)
