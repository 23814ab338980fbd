"""Response models for the backend clients.

Field names follow the upstream JSON payloads so they validate directly
from ``response.json()``. Unknown fields are ignored.
"""

from pydantic import BaseModel, Field


class WeatherDetails(BaseModel):
    """Instantaneous measurements."""

    air_temperature: float | None = Field(default=None, description="Temperature in °C")
    relative_humidity: float | None = Field(default=None, description="Humidity in %")
    wind_speed: float | None = Field(default=None, description="Wind speed in m/s")
    wind_from_direction: float | None = Field(default=None, description="Wind direction in degrees")
    cloud_area_fraction: float | None = Field(default=None, description="Cloud cover in %")
    air_pressure_at_sea_level: float | None = Field(default=None, description="Pressure in hPa")


class InstantData(BaseModel):
    details: WeatherDetails


class WeatherSummary(BaseModel):
    symbol_code: str


class PrecipitationDetails(BaseModel):
    precipitation_amount: float | None = Field(default=None, description="Precipitation in mm")


class NextHours(BaseModel):
    summary: WeatherSummary | None = None
    details: PrecipitationDetails | None = None


class WeatherData(BaseModel):
    instant: InstantData
    next_1_hours: NextHours | None = None
    next_6_hours: NextHours | None = None
    next_12_hours: NextHours | None = None


class TimeseriesItem(BaseModel):
    time: str
    data: WeatherData


class WeatherProperties(BaseModel):
    timeseries: list[TimeseriesItem] = Field(default_factory=list)


class WeatherForecast(BaseModel):
    """Forecast payload of the weather service."""

    properties: WeatherProperties


class WeatherResult(BaseModel):
    success: bool
    status_code: int
    body: WeatherForecast | None = None


class GeoLocation(BaseModel):
    """A geocoded place. The service sends coordinates as strings."""

    lat: float
    lon: float
    display_name: str = ""


class GeocodingResult(BaseModel):
    success: bool
    status_code: int = 200
    results: list[GeoLocation] = Field(default_factory=list)


class EncyclopediaSummary(BaseModel):
    """Page summary from the encyclopedia service."""

    title: str
    extract: str = ""
    description: str | None = None


class EncyclopediaResult(BaseModel):
    success: bool
    status_code: int
    body: EncyclopediaSummary | None = None
