from typing import Optional

from pydantic import BaseModel, Field

STANDARD_PRESSURE_HPA = 1013.25


class Measurement(BaseModel):
    """
    One set of weather readings. Instances are frozen: a station replaces its
    measurement on every update instead of mutating it.
    """

    temperature: float = Field(..., description="Temperature in degrees Celsius.")
    humidity: float = Field(..., description="Relative humidity in percent.")
    pressure: float = Field(STANDARD_PRESSURE_HPA, description="Atmospheric pressure in hPa.")

    model_config = {
        "frozen": True
    }

    @classmethod
    def from_readings(cls, temperature: float, humidity: float, pressure: Optional[float] = None) -> "Measurement":
        """
        Build a measurement from positional readings. Without a pressure
        reading the standard sea-level pressure is used.
        """
        if pressure is None:
            return cls(temperature=temperature, humidity=humidity)
        return cls(temperature=temperature, humidity=humidity, pressure=pressure)
