# circussync/routers/documents.py
from fastapi import APIRouter, Depends, status

from circussync.core.auth import require_manager, require_readonly
from circussync.core.deps import get_document_service
from circussync.models.document import Document, RelatedEntityType
from circussync.schemas.document import DocumentCreate, DocumentUpdate
from circussync.services.document_service import DocumentService

router = APIRouter(prefix="/documents", tags=["Documents"])


@router.get(
    "",
    response_model=list[Document],
    dependencies=[Depends(require_readonly)],
)
async def list_documents(
    related_type: RelatedEntityType | None = None,
    related_id: str | None = None,
    service: DocumentService = Depends(get_document_service),
):
    """All documents, or those attached to one record (`related_type` + `related_id`)."""
    if related_type is not None and related_id is not None:
        return await service.get_by_related_entity(related_type, related_id)
    return await service.get_all()


@router.get(
    "/{document_id}",
    response_model=Document,
    dependencies=[Depends(require_readonly)],
)
async def get_document(document_id: str, service: DocumentService = Depends(get_document_service)):
    return await service.get_or_fail(document_id)


@router.post(
    "",
    response_model=Document,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_manager)],
)
async def create_document(
    payload: DocumentCreate,
    service: DocumentService = Depends(get_document_service),
):
    document_id = await service.add(payload)
    return await service.get_or_fail(document_id)


@router.patch(
    "/{document_id}",
    response_model=Document,
    dependencies=[Depends(require_manager)],
)
async def update_document(
    document_id: str,
    payload: DocumentUpdate,
    service: DocumentService = Depends(get_document_service),
):
    await service.update(document_id, payload)
    return await service.get_or_fail(document_id)


@router.delete(
    "/{document_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_manager)],
)
async def delete_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
):
    await service.delete(document_id)
