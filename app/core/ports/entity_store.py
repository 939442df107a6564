# app\core\ports\entity_store.py
from typing import Any, List, Mapping, Optional, Protocol, TypeVar, Union

from pydantic import BaseModel

from app.core.domain.models import Identified

T = TypeVar("T", bound=Identified)

class IEntityStore(Protocol[T]):
    """
    Port for an identity-bearing collection of records of one shape.
    Implementations could be an in-memory list, a SQL table, or a KV store.
    """

    def create(self, fields: Union[BaseModel, Mapping[str, Any]]) -> T:
        """
        Assigns the next unused id to `fields`, stores the record and returns it.

        Args:
            fields: The domain fields of the new record, without an id.

        Returns:
            The stored record, including its id.
        """
        ...

    def get_all(self) -> List[T]:
        """
        Returns every stored record in insertion order.
        The returned list is a snapshot; changing it does not touch the store.
        """
        ...

    def get_by_id(self, entity_id: int) -> Optional[T]:
        """
        Retrieves a single record by id.

        Returns:
            The record if found, None otherwise.
        """
        ...

    def count(self) -> int:
        """Returns the number of stored records."""
        ...
