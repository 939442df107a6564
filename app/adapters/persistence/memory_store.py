# app/adapters/persistence/memory_store.py
from threading import Lock
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Type, TypeVar, Union

import structlog
from pydantic import BaseModel

from app.core.domain.models import Identified
from app.core.ports.entity_store import IEntityStore

logger = structlog.get_logger()

T = TypeVar("T", bound=Identified)

class EntityStore(IEntityStore[T]):
    """
    Concrete implementation of the Entity Store Port, held in process memory.

    Records are kept in a list (insertion order) plus an id index (O(1) lookup).
    Ids come from a counter that only moves forward, so an id is never
    handed out twice even if records were ever removed.
    """

    def __init__(
        self,
        entity_type: Type[T],
        initial: Iterable[Union[BaseModel, Mapping[str, Any]]] = (),
    ):
        self.entity_type = entity_type
        self._items: List[T] = []
        self._index: Dict[int, T] = {}
        self._last_id = 0
        # Guards "next id + append" as one step (sync endpoints run on a thread pool)
        self._lock = Lock()

        for fields in initial:
            self.create(fields)

    @staticmethod
    def _as_fields(fields: Union[BaseModel, Mapping[str, Any]]) -> Dict[str, Any]:
        if isinstance(fields, BaseModel):
            data = fields.model_dump()
        else:
            data = dict(fields)
        # The store owns identity; a caller-supplied id is ignored.
        data.pop("id", None)
        return data

    # --- Interface Implementation ---

    def create(self, fields: Union[BaseModel, Mapping[str, Any]]) -> T:
        data = self._as_fields(fields)

        with self._lock:
            entity_id = self._last_id + 1
            # Build before committing the id: a failed build leaves no trace.
            entity = self.entity_type(id=entity_id, **data)
            self._last_id = entity_id
            self._items.append(entity)
            self._index[entity_id] = entity

        logger.debug("entity_stored", entity=self.entity_type.__name__, id=entity_id)
        return entity

    def get_all(self) -> List[T]:
        with self._lock:
            return list(self._items)

    def get_by_id(self, entity_id: int) -> Optional[T]:
        return self._index.get(entity_id)

    def count(self) -> int:
        return len(self._items)

    @property
    def last_id(self) -> int:
        """Highest id ever assigned by this store (0 when nothing was created)."""
        return self._last_id

    # --- Python protocol sugar ---

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._index

    def __iter__(self) -> Iterator[T]:
        return iter(self.get_all())

    def __repr__(self) -> str:
        return f"EntityStore({self.entity_type.__name__}, count={self.count()}, last_id={self._last_id})"
