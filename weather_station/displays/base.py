import logging

from weather_station.observer import Observer

_logger = logging.getLogger(__name__)


class BaseDisplay(Observer):
    """
    Base class for displays. A display caches one field of the latest
    measurement and renders it every time it is updated.

    Rendering goes to a logger, which can be passed in to capture or redirect
    the output (e.g. in tests). Child classes set:
        NAME (str): Label used when rendering.
        FIELD (str): Measurement attribute the display tracks.
        UNIT (str): Unit suffix used when rendering.
    """

    NAME = None
    FIELD = None
    UNIT = ""

    def __init__(self, logger: logging.Logger = None) -> None:
        self.logger = logger if logger is not None else _logger
        self._current_value = 0.0
        self.logger.info("%s display created", self.NAME)

    @property
    def current_value(self) -> float:
        return self._current_value

    def update(self, data):
        if data is None:
            self.logger.warning("Weather data is missing, %s display not updated", self.NAME)
            return

        self._current_value = getattr(data, self.FIELD)
        self.display()

    def display(self):
        self.logger.info("%s display: %.1f %s", self.NAME, self._current_value, self.UNIT)
