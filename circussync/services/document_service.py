# circussync/services/document_service.py
from circussync.models.document import Document, RelatedEntityType
from circussync.repositories.document_repo import DocumentRepository
from circussync.schemas.document import DocumentCreate, DocumentUpdate
from circussync.services.base_service import CrudService


class DocumentService(CrudService[Document]):
    noun = "Document"
    create_schema = DocumentCreate
    update_schema = DocumentUpdate

    def __init__(self, repo: DocumentRepository):
        super().__init__(repo)
        self.repo: DocumentRepository = repo

    async def get_by_related_entity(
        self,
        entity_type: RelatedEntityType,
        entity_id: str,
    ) -> list[Document]:
        """Documents attached to one record, newest first."""
        return await self._logged(
            "get_by_related_entity",
            self.repo.list_for_entity(entity_type, entity_id),
        )
