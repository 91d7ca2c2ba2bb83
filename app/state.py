# app/state.py
import logging
import threading
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

from pydantic import BaseModel

from .schemas import Customer, Survey, SurveyDistribution, SurveyResponse

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

IdFactory = Callable[[], str]
Clock = Callable[[], datetime]


def default_id_factory() -> str:
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Mutation:
    action: str  # "add", "replace", "remove"
    collection: str
    item_id: str
    at: datetime


class Collection(Generic[T]):
    """Insertion-ordered list of records keyed by their ``id`` field.

    Updates and deletes for unknown ids are no-ops that return False.
    Nothing here knows about the other collections, so removing a record
    never touches records that reference it. Writes hold the shared
    state lock, so a request never sees a half-applied change.
    """

    def __init__(
        self,
        name: str,
        on_change: Callable[[str, str, str], None],
        lock: threading.RLock,
    ):
        self.name = name
        self._items: List[T] = []
        self._on_change = on_change
        self._lock = lock

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def all(self) -> List[T]:
        return list(self._items)

    def get(self, item_id: str) -> Optional[T]:
        return next((item for item in self._items if item.id == item_id), None)

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [item for item in self._items if predicate(item)]

    def add(self, item: T) -> T:
        with self._lock:
            self._items.append(item)
            self._on_change("add", self.name, item.id)
        return item

    def replace(self, item: T) -> bool:
        with self._lock:
            for index, existing in enumerate(self._items):
                if existing.id == item.id:
                    self._items[index] = item
                    self._on_change("replace", self.name, item.id)
                    return True
        return False

    def remove(self, item_id: str) -> bool:
        with self._lock:
            remaining = [item for item in self._items if item.id != item_id]
            if len(remaining) == len(self._items):
                return False
            self._items = remaining
            self._on_change("remove", self.name, item_id)
        return True


class AppState:
    """Alle Daten der Anwendung, nur im Speicher gehalten."""

    def __init__(
        self,
        id_factory: Optional[IdFactory] = None,
        clock: Optional[Clock] = None,
    ):
        self.new_id: IdFactory = id_factory or default_id_factory
        self.now: Clock = clock or utc_now
        self.history: List[Mutation] = []
        # Endpunkte laufen im Threadpool; crud hält die Sperre für Lesen+Ersetzen
        self.lock = threading.RLock()

        self.surveys: Collection[Survey] = Collection(
            "surveys", self._record, self.lock
        )
        self.customers: Collection[Customer] = Collection(
            "customers", self._record, self.lock
        )
        self.responses: Collection[SurveyResponse] = Collection(
            "responses", self._record, self.lock
        )
        self.distributions: Collection[SurveyDistribution] = Collection(
            "distributions", self._record, self.lock
        )

    def _record(self, action: str, collection: str, item_id: str) -> None:
        self.history.append(Mutation(action, collection, item_id, self.now()))
        logger.debug("%s %s/%s", action, collection, item_id)


# Eine Instanz pro Prozess; Tests ersetzen sie über dependency_overrides
_state = AppState()


def get_state() -> AppState:
    return _state
