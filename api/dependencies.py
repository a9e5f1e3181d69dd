# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-13
# Description: dependencies.py
# -----------------------------------------------------------------------------
from api.AppContainer import app_container
from services.UDLHealthService import UDLHealthService
from services.UDLSearchService import UDLSearchService
from services.UDLStatusService import UDLStatusService


def get_health_service() -> UDLHealthService:
    # use the singleton service from the container
    return app_container.health_service


def get_search_service() -> UDLSearchService:
    # use the singleton service from the container
    return app_container.search_service


def get_status_service() -> UDLStatusService:
    # use the singleton service from the container
    return app_container.status_service
