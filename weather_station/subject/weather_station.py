import logging
from typing import Optional

from weather_station.measurement import Measurement
from weather_station.subject.base import BaseSubject

logger = logging.getLogger(__name__)


class WeatherStation(BaseSubject[Measurement]):
    """
    Subject holding the latest weather measurement. Every call to
    set_measurements() replaces the measurement and notifies all observers,
    even when the readings did not change.

    Typical usage:
        station = WeatherStation()
        station.register_observer(TemperatureDisplay())
        station.set_measurements(25.0, 65.0, 1013.0)
    """

    def __init__(self, fail_fast: bool = False) -> None:
        super().__init__(fail_fast=fail_fast)

        self._current_weather_data: Optional[Measurement] = None
        # None until the first set_measurements() call, never reset afterwards.

    @property
    def current_data(self) -> Optional[Measurement]:
        return self._current_weather_data

    def get_current_weather_data(self) -> Optional[Measurement]:
        return self._current_weather_data

    def set_measurements(self, temperature: float, humidity: float, pressure: Optional[float] = None) -> None:
        """
        Record new readings and notify observers.

        Args:
            temperature (float): Temperature in degrees Celsius.
            humidity (float): Relative humidity in percent.
            pressure (float, optional): Pressure in hPa. Standard sea-level pressure if omitted.
        """
        if pressure is None:
            logger.info("Updating measurements - Temp: %s °C, Humidity: %s %%", temperature, humidity)
        else:
            logger.info("Updating measurements - Temp: %s °C, Humidity: %s %%, Pressure: %s hPa",
                        temperature, humidity, pressure)

        self._current_weather_data = Measurement.from_readings(temperature, humidity, pressure)
        self.measurements_changed()

    def measurements_changed(self) -> None:
        logger.info("Notifying observers about new measurements")
        self.notify_observers()
