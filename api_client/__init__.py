from .api import APIError, ResourceAPI, TaskAPI, TenderAPI
from .transform import (
    TASK_TRANSFORMER,
    TENDER_TRANSFORMER,
    RecordTransformer,
    transform_task,
    transform_tender,
)

__all__ = [
    "APIError",
    "ResourceAPI",
    "TaskAPI",
    "TenderAPI",
    "RecordTransformer",
    "TASK_TRANSFORMER",
    "TENDER_TRANSFORMER",
    "transform_task",
    "transform_tender",
]
