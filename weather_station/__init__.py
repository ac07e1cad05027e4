from .measurement import STANDARD_PRESSURE_HPA, Measurement
from .observer import Observer
from .subject import BaseSubject, WeatherStation
from .displays import BaseDisplay, HumidityDisplay, TemperatureDisplay
from .utils.exceptions import ConfigError, NotificationError
