import logging

from weather_station.displays import HumidityDisplay, TemperatureDisplay
from weather_station.subject import WeatherStation

logger = logging.getLogger(__name__)


def run_demo(config: dict) -> WeatherStation:
    """
    Wire a weather station with one temperature and one humidity display and
    push the configured readings through it.

    Args:
        config (dict): A configuration as returned by weather_station.config.load_config().

    Returns:
        WeatherStation: The station after all readings were pushed.
    """
    station = WeatherStation(fail_fast=config["station"]["fail_fast"])
    displays = {
        "temperature": TemperatureDisplay(),
        "humidity": HumidityDisplay(),
    }
    for display in displays.values():
        station.register_observer(display)

    remove_display = config["demo"].get("remove_display")
    for index, reading in enumerate(config["demo"]["readings"]):
        station.set_measurements(reading["temperature"], reading["humidity"], reading.get("pressure"))

        if index == 0 and remove_display is not None:
            station.remove_observer(displays[remove_display])

    logger.info("Demo finished with %d observers registered", len(station.get_observers()))
    return station
