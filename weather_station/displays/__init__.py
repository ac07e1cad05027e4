from .base import BaseDisplay
from .humidity import HumidityDisplay
from .temperature import TemperatureDisplay
