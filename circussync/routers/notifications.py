# circussync/routers/notifications.py
from fastapi import APIRouter, Depends, status

from circussync.core.auth import require_auth, require_manager
from circussync.core.deps import get_notification_service
from circussync.core.errors import AuthorizationError
from circussync.core.roles import has_role
from circussync.models.notification import Notification
from circussync.models.user import User
from circussync.schemas.notification import NotificationCreate
from circussync.services.notification_service import NotificationService

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("/me", response_model=list[Notification])
async def list_my_notifications(
    include_read: bool = False,
    service: NotificationService = Depends(get_notification_service),
    current_user: User = Depends(require_auth),
):
    """The caller's notifications, newest first. Unread only by default."""
    return await service.get_for_user(current_user.id, include_read)


@router.post("/{notification_id}/read", status_code=status.HTTP_204_NO_CONTENT)
async def mark_notification_read(
    notification_id: str,
    service: NotificationService = Depends(get_notification_service),
    current_user: User = Depends(require_auth),
):
    """
    Mark one notification as read.

    Recipients may mark their own; managers and admins may mark any.
    """
    notification = await service.get_or_fail(notification_id)
    if notification.user_id != current_user.id and not has_role(current_user.role, "manager"):
        raise AuthorizationError("Cannot modify another user's notification")
    await service.mark_as_read(notification_id)


@router.post(
    "",
    response_model=Notification,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_manager)],
)
async def create_notification(
    payload: NotificationCreate,
    service: NotificationService = Depends(get_notification_service),
):
    notification_id = await service.add(payload)
    return await service.get_or_fail(notification_id)


@router.delete(
    "/{notification_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_manager)],
)
async def delete_notification(
    notification_id: str,
    service: NotificationService = Depends(get_notification_service),
):
    await service.delete(notification_id)
