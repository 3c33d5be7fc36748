# socialnet/api/deps.py
"""Request-scoped service wiring for the routers."""

from fastapi import Depends
from sqlalchemy.orm import Session

from socialnet.database import get_db
from socialnet.services.asset_store import LocalAssetStore
from socialnet.services.messaging_service import MessagingService
from socialnet.services.notification_service import NotificationEngine
from socialnet.services.user_directory import SqlUserDirectory


def get_notification_engine(db: Session = Depends(get_db)) -> NotificationEngine:
    return NotificationEngine(db)


def get_messaging_service(
    db: Session = Depends(get_db),
    notifier: NotificationEngine = Depends(get_notification_engine),
) -> MessagingService:
    return MessagingService(
        db,
        users=SqlUserDirectory(db),
        assets=LocalAssetStore(),
        notifier=notifier,
    )
