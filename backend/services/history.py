from typing import List, Optional, Tuple
from pydantic import TypeAdapter, ValidationError
from config import logger
from config.constants import HISTORY_CONFIG
from exceptions import PersistenceException
from models.verdicts import AnalysisOutcome
from utils.storage import KeyValueStorage

_ENTRIES_ADAPTER = TypeAdapter(List[AnalysisOutcome])


class HistoryStore:
    """
    Bounded, most-recent-first list of past outcomes plus the one currently
    on display.

    `entries` is persisted under a single storage key after every mutation.
    Storage problems are logged and never undo the in-memory change. The
    displayed result (`current`) is not persisted.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = HISTORY_CONFIG.STORAGE_KEY,
        capacity: int = HISTORY_CONFIG.CAPACITY,
    ):
        self.storage = storage
        self.key = key
        self.capacity = capacity
        self._entries: List[AnalysisOutcome] = []
        self._current: Optional[AnalysisOutcome] = None

    @property
    def entries(self) -> Tuple[AnalysisOutcome, ...]:
        return tuple(self._entries)

    @property
    def current(self) -> Optional[AnalysisOutcome]:
        return self._current

    def __len__(self) -> int:
        return len(self._entries)

    def load(self) -> Tuple[AnalysisOutcome, ...]:
        """Rehydrate entries from storage; missing or corrupt data yields an empty history."""
        try:
            raw = self.storage.get(self.key)
        except Exception as e:
            logger.warning("%s", PersistenceException(self.key, "read", str(e)).message)
            self._entries = []
            return self.entries

        if raw is None:
            self._entries = []
            return self.entries

        try:
            loaded = _ENTRIES_ADAPTER.validate_json(raw)
        except (ValidationError, ValueError) as e:
            logger.warning("Failed to parse history under '%s', starting empty: %s", self.key, e)
            self._entries = []
            return self.entries

        self._entries = loaded[:self.capacity]
        logger.info("Loaded %d history entries.", len(self._entries))
        return self.entries

    def save(self) -> bool:
        """Persist the full ordered sequence. Returns False if storage failed."""
        try:
            payload = _ENTRIES_ADAPTER.dump_json(self._entries, by_alias=True).decode("utf-8")
            self.storage.set(self.key, payload)
            return True
        except Exception as e:
            logger.warning("%s", PersistenceException(self.key, "write", str(e)).message)
            return False

    def push(self, outcome: AnalysisOutcome) -> None:
        remaining = [e for e in self._entries if e.id != outcome.id]
        self._entries = [outcome, *remaining][:self.capacity]
        self.save()

    def clear(self) -> None:
        self._entries = []
        self.save()

    def get(self, outcome_id: str) -> Optional[AnalysisOutcome]:
        for entry in self._entries:
            if entry.id == outcome_id:
                return entry
        return None

    def set_current(self, outcome: Optional[AnalysisOutcome]) -> None:
        self._current = outcome
