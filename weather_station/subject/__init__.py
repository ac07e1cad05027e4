from .base import BaseSubject
from .weather_station import WeatherStation
