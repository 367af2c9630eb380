# circussync/services/base_service.py
"""
Uniform CRUD service shared by every entity service.

Services take caller payloads (a Create/Update schema or a plain dict),
validate them, and hand plain dicts to their repository. Persistence
errors are logged and re-raised unchanged.
"""

import logging
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from circussync.core.errors import CircusSyncError, NotFoundError
from circussync.models.base import SERVER_FIELDS
from circussync.repositories.base import Repository

ModelT = TypeVar("ModelT", bound=BaseModel)

Payload = BaseModel | dict[str, Any]


class CrudService(Generic[ModelT]):
    """
    Business logic base for one entity.

    Subclasses set `noun`, `create_schema` and `update_schema` and add
    their named queries.
    """

    noun: ClassVar[str] = "Record"
    create_schema: ClassVar[type[BaseModel]]
    update_schema: ClassVar[type[BaseModel]]

    def __init__(self, repo: Repository[ModelT]):
        self.repo = repo
        self.logger = logging.getLogger(self.__class__.__name__)

    # ----- Helpers -----

    @staticmethod
    def _as_dict(payload: Payload, exclude_unset: bool = False) -> dict[str, Any]:
        if isinstance(payload, BaseModel):
            return payload.model_dump(exclude_unset=exclude_unset)
        return dict(payload)

    def _create_data(self, payload: Payload) -> dict[str, Any]:
        data = {k: v for k, v in self._as_dict(payload).items() if k not in SERVER_FIELDS}
        return self.create_schema.model_validate(data).model_dump()

    def _update_data(self, payload: Payload) -> dict[str, Any]:
        data = {
            k: v
            for k, v in self._as_dict(payload, exclude_unset=True).items()
            if k not in SERVER_FIELDS
        }
        return self.update_schema.model_validate(data).model_dump(exclude_unset=True)

    async def _logged(self, operation: str, coro: Any) -> Any:
        try:
            return await coro
        except CircusSyncError as exc:
            self.logger.error("%s %s failed: %s", self.noun, operation, exc.message)
            raise

    # ----- CRUD -----

    async def add(self, payload: Payload) -> str:
        """Create a record; id / created_at / updated_at come from the server."""
        data = self._create_data(payload)
        return await self._logged("add", self.repo.add(data))

    async def update(self, record_id: str, payload: Payload) -> None:
        """
        Partial update.

        Raises:
            NotFoundError: if the record does not exist.
        """
        data = self._update_data(payload)
        await self._logged("update", self.repo.update(record_id, data))

    async def delete(self, record_id: str) -> None:
        """
        Raises:
            NotFoundError: if the record does not exist.
        """
        await self._logged("delete", self.repo.delete(record_id))

    async def get(self, record_id: str) -> ModelT | None:
        return await self._logged("get", self.repo.get(record_id))

    async def get_or_fail(self, record_id: str) -> ModelT:
        record = await self.get(record_id)
        if record is None:
            raise NotFoundError(self.noun, record_id)
        return record

    async def get_all(self) -> list[ModelT]:
        return await self._logged("get_all", self.repo.list_all())
