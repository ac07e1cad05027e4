from weather_station.displays.base import BaseDisplay


class TemperatureDisplay(BaseDisplay):

    NAME = "Temperature"
    FIELD = "temperature"
    UNIT = "°C"

    def get_current_temperature(self) -> float:
        return self.current_value
