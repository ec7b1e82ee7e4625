"""Presentation state machine: Idle -> Analyzing -> {Success, Error}, reset from anywhere.

``AppState`` is immutable; :func:`reduce` is the only way to move between states.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from geosight.exceptions import AnalysisInProgressError, InvalidInputError
from geosight.models.analysis import AnalysisResult, ImageSelection


class Status(str, Enum):
    IDLE = "IDLE"
    ANALYZING = "ANALYZING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class AppState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Status = Status.IDLE
    image: ImageSelection | None = None
    result: AnalysisResult | None = None
    error: str | None = None


class ImageSelected(BaseModel):
    image: ImageSelection


class AnalysisStarted(BaseModel):
    pass


class AnalysisSucceeded(BaseModel):
    result: AnalysisResult


class AnalysisFailed(BaseModel):
    message: str


class Reset(BaseModel):
    pass


Action = ImageSelected | AnalysisStarted | AnalysisSucceeded | AnalysisFailed | Reset


def reduce(state: AppState, action: Action) -> AppState:
    if isinstance(action, Reset):
        return AppState()

    if isinstance(action, ImageSelected):
        if state.status == Status.ANALYZING:
            raise AnalysisInProgressError("Wait for the running analysis before changing the image.")
        return AppState(image=action.image)

    if isinstance(action, AnalysisStarted):
        if state.status == Status.ANALYZING:
            raise AnalysisInProgressError("An analysis is already running.")
        if state.image is None:
            raise InvalidInputError("Select an image before starting an analysis.")
        return state.model_copy(update={"status": Status.ANALYZING, "result": None, "error": None})

    # A late answer for an analysis the user already moved away from
    if state.status != Status.ANALYZING:
        return state

    if isinstance(action, AnalysisSucceeded):
        return state.model_copy(update={"status": Status.SUCCESS, "result": action.result})
    if isinstance(action, AnalysisFailed):
        return state.model_copy(update={"status": Status.ERROR, "error": action.message})

    raise TypeError(f"Unknown action: {action!r}")
