# app\core\use_cases\resource_handlers.py
from dataclasses import dataclass
from typing import Any, Generic, Type, TypeVar, Union

import structlog
from pydantic import BaseModel

from app.core.domain.exceptions import EntityNotFoundError, InvalidPayloadError
from app.core.domain.models import Identified
from app.core.ports.entity_store import IEntityStore
from app.core.use_cases.parsing import parse_create_input

logger = structlog.get_logger()

T = TypeVar("T", bound=Identified)

# Status codes are plain ints here; the Core does not import the web framework.
HTTP_200_OK = 200
HTTP_201_CREATED = 201
HTTP_404_NOT_FOUND = 404
HTTP_422_UNPROCESSABLE = 422

@dataclass(frozen=True)
class HandlerResponse:
    """Outbound result of a handler: a status code and a JSON-ready body."""
    status_code: int
    body: Any

class ResourceHandlers(Generic[T]):
    """
    Use Case: CRUD request handling for one resource backed by an entity store.

    Each operation is a single step: read or write the store, then describe the
    response. Nothing is kept between calls; the store is the only state.

    Responsibilities:
    1. Parse untrusted create bodies into the resource's input model.
    2. Delegate reads and writes to the injected store (IEntityStore Port).
    3. Translate "not found" and invalid input into response descriptions.
    """

    def __init__(
        self,
        store: IEntityStore[T],
        input_model: Type[BaseModel],
        resource_name: str = "Entity",
        envelope_key: str = "entity",
    ):
        self.store = store
        self.input_model = input_model
        self.resource_name = resource_name
        self.envelope_key = envelope_key

    def list_all(self) -> HandlerResponse:
        """Returns every record, in creation order."""
        entities = self.store.get_all()
        return HandlerResponse(HTTP_200_OK, [e.to_payload() for e in entities])

    def get_one(self, entity_id: int) -> HandlerResponse:
        """
        Looks up a single record.
        A missing id is an ordinary outcome (404), not an error.
        """
        try:
            entity = self.require(entity_id)
        except EntityNotFoundError as e:
            return self.not_found(e.entity_id)
        return HandlerResponse(HTTP_200_OK, entity.to_payload())

    def not_found(self, entity_id: Union[int, str]) -> HandlerResponse:
        """404 description for an id with no record (or one that is not an id at all)."""
        logger.info("entity_not_found", resource=self.resource_name, id=entity_id)
        return HandlerResponse(
            HTTP_404_NOT_FOUND,
            {"message": EntityNotFoundError(self.resource_name, entity_id).message},
        )

    def require(self, entity_id: int) -> T:
        """Returns the record with `entity_id` or raises EntityNotFoundError."""
        entity = self.store.get_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.resource_name, entity_id)
        return entity

    def create_one(self, raw: Any) -> HandlerResponse:
        """
        Validates `raw` and stores a new record.

        Returns:
            201 with {"message": ..., <envelope_key>: record} on success,
            422 with {"message": ..., "errors": [...]} when the body is malformed.
        """
        try:
            fields = parse_create_input(self.input_model, raw, self.resource_name)
        except InvalidPayloadError as e:
            logger.info("create_rejected", resource=self.resource_name, errors=e.errors)
            return HandlerResponse(
                HTTP_422_UNPROCESSABLE,
                {"message": e.message, "errors": e.errors},
            )

        entity = self.store.create(fields)
        logger.info("entity_created", resource=self.resource_name, id=entity.id)

        return HandlerResponse(
            HTTP_201_CREATED,
            {
                "message": f"{self.resource_name} created successfully",
                self.envelope_key: entity.to_payload(),
            },
        )
