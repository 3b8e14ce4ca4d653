import json
import logging
import re
from typing import Iterable, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from owm.config import Settings
from owm.errors import DecodeError, FetchError, NotFoundError
from owm.models import DailyForecast, Forecast, Weather, WeatherCollection
from owm.services import urls

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# {"cod":"404","message":"city not found"}, code quoted or not
_NOT_FOUND = re.compile(rb'"cod"\s*:\s*"?404\b')
_MESSAGE = re.compile(rb'"message"\s*:\s*"((?:[^"\\]|\\.)*)"')


def is_not_found(body: bytes) -> bool:
    return _NOT_FOUND.search(body) is not None


def _service_message(body: bytes, default: str = "city not found") -> str:
    match = _MESSAGE.search(body)
    if match is None:
        return default
    raw = match.group(1).decode("utf-8", errors="replace")
    try:
        return json.loads(f'"{raw}"')
    except ValueError:
        return raw


class OpenWeatherClient:
    """
    Synchronous client for the OpenWeatherMap 2.5 API.

    The client only holds configuration; every query opens its own
    connection, so one instance can be shared freely between callers.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = urls.DEFAULT_BASE_URL,
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        # empty string means unauthenticated, same as None
        self.api_key = api_key or None
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout_seconds
        self.transport = transport

    @classmethod
    def from_settings(
        cls, config: Optional[Settings] = None, transport: Optional[httpx.BaseTransport] = None
    ) -> "OpenWeatherClient":
        """Client configured from ``config``, or from a fresh ``Settings()`` read of the environment."""
        config = config or Settings()
        return cls(
            api_key=config.openweather_api_key,
            base_url=config.openweather_base_url,
            timeout_seconds=config.openweather_timeout_seconds,
            transport=transport,
        )

    def url(self, path: str, params: str, units: str) -> str:
        return urls.build_url(self.base_url, path, params, units, self.api_key)

    # ── Current weather ──────────────────────────────────────────────────

    def weather_by_name(self, name: str, units: str = "metric") -> Weather:
        return self._get(urls.WEATHER_PATH, urls.name_param(name), units, Weather)

    def weather_by_id(self, city_id: int, units: str = "metric") -> Weather:
        return self._get(urls.WEATHER_PATH, urls.id_param(city_id), units, Weather)

    def weather_by_coord(self, lat: float, lon: float, units: str = "metric") -> Weather:
        return self._get(urls.WEATHER_PATH, urls.coord_params(lat, lon), units, Weather)

    def weather_by_zone(
        self, lat1: float, lon1: float, lat2: float, lon2: float, zoom: int, units: str = "metric"
    ) -> WeatherCollection:
        """Weather for every city inside the bounding box at the given map zoom."""
        params = urls.bbox_param(lat1, lon1, lat2, lon2, zoom)
        return self._get(urls.BOX_PATH, params, units, WeatherCollection)

    def weather_by_radius(self, lat: float, lon: float, radius: int, units: str = "metric") -> WeatherCollection:
        """
        Weather for cities around a point.

        ``radius`` is sent as the ``cnt`` query parameter, which the service
        reads as the maximum number of cities to return.
        """
        params = f"{urls.coord_params(lat, lon)}&cnt={int(radius)}"
        return self._get(urls.FIND_PATH, params, units, WeatherCollection)

    def weather_by_ids(self, ids: Iterable[int], units: str = "metric") -> WeatherCollection:
        return self._get(urls.GROUP_PATH, urls.ids_param(ids), units, WeatherCollection)

    # ── Forecast ─────────────────────────────────────────────────────────

    def forecast_by_name(self, name: str, days: int = 0, units: str = "metric") -> Union[Forecast, DailyForecast]:
        return self._forecast(urls.name_param(name), days, units)

    def forecast_by_id(self, city_id: int, days: int = 0, units: str = "metric") -> Union[Forecast, DailyForecast]:
        return self._forecast(urls.id_param(city_id), days, units)

    def forecast_by_coord(
        self, lat: float, lon: float, days: int = 0, units: str = "metric"
    ) -> Union[Forecast, DailyForecast]:
        return self._forecast(urls.coord_params(lat, lon), days, units)

    # ── Shared helpers ───────────────────────────────────────────────────

    def _forecast(self, primary: str, days: int, units: str) -> Union[Forecast, DailyForecast]:
        """Hourly forecast when ``days`` is zero or negative, daily forecast of ``days`` days otherwise."""
        model = DailyForecast if days > 0 else Forecast
        return self._get(urls.forecast_path(days), urls.forecast_params(primary, days), units, model)

    def _get(self, path: str, params: str, units: str, model: Type[ModelT]) -> ModelT:
        body = self._fetch(self.url(path, params, units))
        return self._decode(body, model)

    def _fetch(self, url: str) -> bytes:
        logger.debug("GET %s", self._redact(url))
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                r = client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug("request failed: %r", exc)
            raise FetchError(f"owm: error while getting weather data ({type(exc).__name__})") from exc

        body = r.content
        if is_not_found(body):
            raise NotFoundError(_service_message(body))
        try:
            r.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.debug("service responded %s: %s", r.status_code, _service_message(body, ""))
            raise FetchError(f"owm: service responded with HTTP {r.status_code}") from exc
        return body

    @staticmethod
    def _decode(body: bytes, model: Type[ModelT]) -> ModelT:
        try:
            return model.model_validate_json(body)
        except ValidationError as exc:
            logger.debug("cannot decode %s: %s", model.__name__, exc)
            raise DecodeError(f"owm: error while decoding {model.__name__}") from exc

    def _redact(self, url: str) -> str:
        if self.api_key:
            return url.replace(self.api_key, "***")
        return url


def new_client(api_key: Optional[str] = None) -> OpenWeatherClient:
    """Client for the public service endpoint; no key means unauthenticated requests."""
    return OpenWeatherClient(api_key=api_key)
