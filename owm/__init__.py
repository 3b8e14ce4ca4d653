"""
owm: a client for the OpenWeatherMap current weather and forecast API.

    from owm import new_client

    client = new_client("YOUR_API_KEY")
    weather = client.weather_by_name("Lisbon", "metric")
"""
import logging

from owm.config import Settings, configure_logging
from owm.errors import DecodeError, FetchError, NotFoundError, OWMError
from owm.models import (
    Condition,
    Coordinates,
    DailyForecast,
    DailyForecastEntry,
    Forecast,
    ForecastCity,
    ForecastEntry,
    Weather,
    WeatherCollection,
)
from owm.services.openweather import OpenWeatherClient, new_client

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Condition",
    "Coordinates",
    "DailyForecast",
    "DailyForecastEntry",
    "DecodeError",
    "FetchError",
    "Forecast",
    "ForecastCity",
    "ForecastEntry",
    "NotFoundError",
    "OWMError",
    "OpenWeatherClient",
    "Settings",
    "Weather",
    "WeatherCollection",
    "configure_logging",
    "new_client",
]
