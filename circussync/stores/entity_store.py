# circussync/stores/entity_store.py
"""
Per-entity state store: list, selected item, loading flag, error string.

Every action follows the same sequence:

    set loading -> call the service -> publish the result, clear loading
                                    -> on failure publish a fixed error
                                       string and clear loading

Loads never raise; mutating actions (add / update / delete) re-raise
after publishing the error so callers can react. Overlapping calls are
not sequenced: whichever finishes last wins.
"""

import logging
from typing import Any, Awaitable, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from circussync.core.errors import NotFoundError
from circussync.services.base_service import CrudService, Payload
from circussync.stores.base import Store

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = logging.getLogger(__name__)


class EntityState(BaseModel):
    items: list[Any] = []
    selected: Any | None = None
    loading: bool = False
    error: str | None = None


class EntityStore(Store[EntityState], Generic[ModelT]):
    noun: ClassVar[str] = "record"
    plural: ClassVar[str] = "records"
    state_class: ClassVar[type[EntityState]] = EntityState

    def __init__(self, service: CrudService[ModelT]):
        super().__init__(self.state_class())
        self.service = service

    # ----- Sequencing helpers -----

    def _begin(self) -> None:
        self.patch(loading=True, error=None)

    def _fail(self, message: str, exc: Exception) -> None:
        logger.error("%s: %s", message, exc)
        self.patch(loading=False, error=message)

    async def _load_items(self, message: str, call: Awaitable[list[ModelT]]) -> None:
        """Replace `items` with the result of a query."""
        self._begin()
        try:
            items = await call
        except Exception as exc:
            self._fail(message, exc)
            return
        self.patch(items=items, loading=False)

    @staticmethod
    def _same(item: Any, record_id: str) -> bool:
        return item is not None and getattr(item, "id", None) == record_id

    # ----- Actions -----

    async def load_all(self) -> None:
        await self._load_items(f"Failed to load {self.plural}", self.service.get_all())

    async def load(self, record_id: str) -> None:
        """Fetch one record into `selected`."""
        self._begin()
        try:
            record = await self.service.get(record_id)
            if record is None:
                raise NotFoundError(self.noun.capitalize(), record_id)
            await self._on_selected(record)
        except NotFoundError as exc:
            self.patch(selected=None)
            self._fail(f"{self.noun.capitalize()} not found", exc)
            return
        except Exception as exc:
            self._fail(f"Failed to load {self.noun}", exc)
            return
        self.patch(selected=record, loading=False)

    async def add(self, payload: Payload) -> str:
        """Create a record, append it to `items` and select it."""
        self._begin()
        try:
            record_id = await self.service.add(payload)
            record = await self.service.get(record_id)
            if record is None:
                raise NotFoundError(self.noun.capitalize(), record_id)
            await self._on_selected(record)
        except Exception as exc:
            self._fail(f"Failed to add {self.noun}", exc)
            raise
        self.patch(items=[*self.state.items, record], selected=record, loading=False)
        return record_id

    async def update(self, record_id: str, payload: Payload) -> None:
        """Write a partial update, then swap the fresh record into state."""
        self._begin()
        try:
            await self.service.update(record_id, payload)
            record = await self.service.get(record_id)
            if record is None:
                raise NotFoundError(self.noun.capitalize(), record_id)
            if self._same(self.state.selected, record_id):
                await self._on_selected(record)
        except Exception as exc:
            self._fail(f"Failed to update {self.noun}", exc)
            raise

        state = self.state
        self.patch(
            items=[record if self._same(i, record_id) else i for i in state.items],
            selected=record if self._same(state.selected, record_id) else state.selected,
            loading=False,
        )

    async def delete(self, record_id: str) -> None:
        self._begin()
        try:
            await self.service.delete(record_id)
        except Exception as exc:
            self._fail(f"Failed to delete {self.noun}", exc)
            raise

        state = self.state
        was_selected = self._same(state.selected, record_id)
        if was_selected:
            await self._on_selected(None)
        self.patch(
            items=[i for i in state.items if not self._same(i, record_id)],
            selected=None if was_selected else state.selected,
            loading=False,
        )

    def clear_selected(self) -> None:
        self.patch(selected=None)
        self._on_cleared()

    def clear_error(self) -> None:
        self.patch(error=None)

    # ----- Hooks -----

    async def _on_selected(self, record: ModelT | None) -> None:
        """Called before `selected` changes; subclasses refresh derived slices."""

    def _on_cleared(self) -> None:
        """Called after `selected` is cleared synchronously."""
