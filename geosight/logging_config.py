import logging
import warnings

from geosight.exceptions import CoordinateDefaultedWarning

LOG_FORMAT = "[%(asctime)s] %(levelname)s in %(module)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging and route Python warnings into it.

    Coordinate defaulting is reported with ``warnings.warn``; capturing warnings
    makes every occurrence show up in the log instead of only the first one.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.captureWarnings(True)
    warnings.simplefilter("always", CoordinateDefaultedWarning)
