from typing import Iterable, Optional
from urllib.parse import quote

DEFAULT_BASE_URL = "http://api.openweathermap.org/data/2.5/"

WEATHER_PATH = "weather"
BOX_PATH = "box/city"
FIND_PATH = "find"
GROUP_PATH = "group"
FORECAST_PATH = "forecast"
DAILY_FORECAST_PATH = "forecast/daily"


def format_coord(value: float) -> str:
    return f"{value:.2f}"


def name_param(name: str) -> str:
    return "q=" + quote(name, safe=",")


def id_param(city_id: int) -> str:
    return f"id={int(city_id)}"


def coord_params(lat: float, lon: float) -> str:
    return f"lat={format_coord(lat)}&lon={format_coord(lon)}"


def bbox_param(lat1: float, lon1: float, lat2: float, lon2: float, zoom: int) -> str:
    corners = ",".join(format_coord(v) for v in (lat1, lon1, lat2, lon2))
    return f"bbox={corners},{int(zoom)}"


def ids_param(ids: Iterable[int]) -> str:
    return "id=" + ",".join(str(int(i)) for i in ids)


def forecast_path(days: int) -> str:
    """Daily endpoint for a positive day count, hourly otherwise."""
    return DAILY_FORECAST_PATH if days > 0 else FORECAST_PATH


def forecast_params(primary: str, days: int) -> str:
    if days > 0:
        return f"{primary}&cnt={int(days)}"
    return primary


def build_url(base_url: str, path: str, params: str, units: str, api_key: Optional[str] = None) -> str:
    """
    Assemble ``<base><path>?<params>&units=<units>`` and append the key
    as ``&APPID=<key>`` only when one is configured. ``units`` is not
    validated; the service rejects unknown unit systems itself.
    """
    if not base_url.endswith("/"):
        base_url += "/"
    url = f"{base_url}{path}?{params}&units={units}"
    if api_key:
        url += f"&APPID={api_key}"
    return url
