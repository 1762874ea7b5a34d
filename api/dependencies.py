# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: dependencies.py
# -----------------------------------------------------------------------------
from api.AppContainer import get_app_container
from services.GixChatService import GixChatService
from services.GixHealthService import GixHealthService
from services.GixIngestService import GixIngestService


def get_ingest_service() -> GixIngestService:
    # use the singleton service from the container
    return get_app_container().ingest_service

def get_chat_service() -> GixChatService:
    # use the singleton service from the container
    return get_app_container().chat_service

def get_health_service() -> GixHealthService:
    return get_app_container().health_service
