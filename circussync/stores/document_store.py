# circussync/stores/document_store.py
from circussync.models.document import Document, RelatedEntityType
from circussync.services.document_service import DocumentService
from circussync.stores.entity_store import EntityStore


class DocumentStore(EntityStore[Document]):
    noun = "document"
    plural = "documents"

    def __init__(self, service: DocumentService):
        super().__init__(service)
        self.service: DocumentService = service

    async def load_for_entity(self, entity_type: RelatedEntityType, entity_id: str) -> None:
        await self._load_items(
            "Failed to load documents",
            self.service.get_by_related_entity(entity_type, entity_id),
        )
