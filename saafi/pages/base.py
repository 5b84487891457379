import logging
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class Page:
    """Shared alert plumbing. Alerts are kept on the page and forwarded to an optional callback."""

    def __init__(self, alert: Optional[Callable[[str], None]] = None):
        self._alert = alert
        self.alerts: List[str] = []

    def alert(self, message: str):
        logger.info(f"{self.__class__.__name__} alert: {message}")
        self.alerts.append(message)
        if self._alert is not None:
            self._alert(message)
