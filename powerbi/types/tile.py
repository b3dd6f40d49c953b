__all__ = ("CloneTileRequest", "PositionConflictAction", "Tile")

from enum import StrEnum

from .common import PowerBIModel


class PositionConflictAction(StrEnum):
    TAIL = "Tail"
    ABORT = "Abort"


class CloneTileRequest(PowerBIModel):
    target_dashboard_id: str
    position_conflict_action: PositionConflictAction | None = None
    target_model_id: str | None = None
    target_report_id: str | None = None
    target_workspace_id: str | None = None


class Tile(PowerBIModel):
    id: str | None = None
    title: str | None = None
    col_span: int | None = None
    row_span: int | None = None
    dataset_id: str | None = None
    embed_data: str | None = None
    embed_url: str | None = None
    report_id: str | None = None
