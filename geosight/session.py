import logging
from collections.abc import Awaitable, Callable

from geosight.exceptions import GeoSightError
from geosight.models.analysis import AnalysisResult
from geosight.models.map import MapView
from geosight.services import gemini as gemini_service
from geosight.services import intake
from geosight.services.map_view import build_map_view
from geosight.state import (
    Action,
    AnalysisFailed,
    AnalysisStarted,
    AnalysisSucceeded,
    AppState,
    ImageSelected,
    Reset,
    reduce,
)

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Failed to analyze the location. Please try again."

Analyzer = Callable[[str, str], Awaitable[AnalysisResult]]


class AnalysisSession:
    """Drives one user's intake -> analysis flow through the state reducer.

    Only one analysis may be outstanding at a time. A failed analysis keeps the
    selected image, so calling :meth:`analyze` again retries without re-uploading.
    """

    def __init__(self, analyzer: Analyzer | None = None):
        self._analyzer = analyzer or gemini_service.analyze
        self.state = AppState()

    def dispatch(self, action: Action) -> AppState:
        self.state = reduce(self.state, action)
        return self.state

    def select_image(self, data: bytes, mime_type: str | None, filename: str | None = None) -> AppState:
        # raises InvalidInputError before touching state
        image = intake.select_image(data, mime_type, filename)
        return self.dispatch(ImageSelected(image=image))

    async def analyze(self) -> AppState:
        self.dispatch(AnalysisStarted())
        image = self.state.image
        try:
            result = await self._analyzer(image.base64_payload, image.mime_type)
        except GeoSightError as e:
            logger.error("Analysis failed: %s", e)
            outcome = AnalysisFailed(message=str(e) or DEFAULT_ERROR_MESSAGE)
        except Exception as e:
            logger.exception("Analysis failed unexpectedly")
            outcome = AnalysisFailed(message=str(e) or DEFAULT_ERROR_MESSAGE)
        else:
            outcome = AnalysisSucceeded(result=result)
        if self.state.image is not image:
            logger.info("Discarding outcome for a replaced image")
            return self.state
        return self.dispatch(outcome)

    def reset(self) -> AppState:
        return self.dispatch(Reset())

    @property
    def map_view(self) -> MapView:
        return build_map_view(self.state.result)
