"""Weather client for the Norwegian Meteorological Institute API.

Reference: https://api.met.no/weatherapi/locationforecast/2.0/documentation
The service requires an identifying User-Agent and at most four decimals
in coordinates.
"""

from typing import Any

from ..base import WeatherClient
from ..models import WeatherForecast, WeatherResult
from .http import HttpBackendClient


class MetNoWeatherClient(HttpBackendClient, WeatherClient):
    BASE_URL = "https://api.met.no/weatherapi/"

    def __init__(self, base_url: str = BASE_URL, **kwargs: Any):
        super().__init__(base_url=base_url, **kwargs)

    async def get_weather(self, lat: float, lon: float) -> WeatherResult:
        response = await self._get(
            "locationforecast/2.0/compact",
            params={"lat": round(lat, 4), "lon": round(lon, 4)},
        )
        if not response.is_success:
            return WeatherResult(success=False, status_code=response.status_code)
        return WeatherResult(
            success=True,
            status_code=response.status_code,
            body=WeatherForecast.model_validate(response.json()),
        )
