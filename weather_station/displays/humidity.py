from weather_station.displays.base import BaseDisplay


class HumidityDisplay(BaseDisplay):

    NAME = "Humidity"
    FIELD = "humidity"
    UNIT = "%"

    def get_current_humidity(self) -> float:
        return self.current_value
