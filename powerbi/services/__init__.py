from .admin import AdminGroupsService, AdminService
from .base import Service
from .dashboards import DashboardsService
from .datasets import DatasetGroupService, DatasetsService
from .embed_token import EmbedTokenService
from .groups import GroupsService
from .push_datasets import PushDatasetsService
from .reports import ReportsService

__all__ = (
    "AdminGroupsService",
    "AdminService",
    "DashboardsService",
    "DatasetGroupService",
    "DatasetsService",
    "EmbedTokenService",
    "GroupsService",
    "PushDatasetsService",
    "ReportsService",
    "Service",
)
