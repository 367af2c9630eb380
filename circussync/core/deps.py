# circussync/core/deps.py
"""
FastAPI providers for services.

Everything hangs off `get_database`, so tests override that one
dependency to run the whole API against an InMemoryDatabase.
"""

from fastapi import Depends

from circussync.database import Database, get_database
from circussync.repositories.agent_repo import AgentRepository
from circussync.repositories.client_repo import ClientRepository
from circussync.repositories.document_repo import DocumentRepository
from circussync.repositories.event_repo import EventRepository
from circussync.repositories.notification_repo import NotificationRepository
from circussync.repositories.performer_repo import PerformerRepository
from circussync.repositories.task_repo import TaskRepository
from circussync.repositories.user_repo import UserRepository
from circussync.services.agent_service import AgentService
from circussync.services.client_service import ClientService
from circussync.services.document_service import DocumentService
from circussync.services.event_service import EventService
from circussync.services.notification_service import NotificationService
from circussync.services.performer_service import PerformerService
from circussync.services.task_service import TaskService
from circussync.services.user_service import UserService


def get_user_service(db: Database = Depends(get_database)) -> UserService:
    return UserService(UserRepository(db))


def get_client_service(db: Database = Depends(get_database)) -> ClientService:
    return ClientService(ClientRepository(db))


def get_performer_service(db: Database = Depends(get_database)) -> PerformerService:
    return PerformerService(PerformerRepository(db))


def get_event_service(db: Database = Depends(get_database)) -> EventService:
    return EventService(EventRepository(db), PerformerRepository(db))


def get_agent_service(db: Database = Depends(get_database)) -> AgentService:
    return AgentService(AgentRepository(db))


def get_task_service(db: Database = Depends(get_database)) -> TaskService:
    return TaskService(TaskRepository(db))


def get_notification_service(db: Database = Depends(get_database)) -> NotificationService:
    return NotificationService(NotificationRepository(db))


def get_document_service(db: Database = Depends(get_database)) -> DocumentService:
    return DocumentService(DocumentRepository(db))
