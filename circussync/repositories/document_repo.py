# circussync/repositories/document_repo.py
from circussync.database import Filter
from circussync.models.document import Document
from circussync.repositories.base import Repository


class DocumentRepository(Repository[Document]):
    kind = "documents"
    model = Document

    async def list_for_entity(self, entity_type: str, entity_id: str) -> list[Document]:
        return await self.find(
            Filter("related_to.type", "==", entity_type),
            Filter("related_to.id", "==", entity_id),
            order_by="created_at",
            descending=True,
        )
