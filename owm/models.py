"""
Typed records for OpenWeatherMap 2.5 responses.

Every record maps the service's snake-case keys onto semantic field names
through explicit aliases. Unknown keys are ignored and missing keys decode
to zero values, so a sparse payload never fails validation.
"""
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Coordinates(_Record):
    # box/city capitalises these keys
    lat: float = Field(0.0, validation_alias=AliasChoices("lat", "Lat"))
    lon: float = Field(0.0, validation_alias=AliasChoices("lon", "Lon"))


class Condition(_Record):
    """One weather condition descriptor, e.g. 800 / Clear / clear sky / 01d."""

    id: int = 0
    main: str = ""
    description: str = ""
    icon: str = ""


class SysInfo(_Record):
    country: str = ""
    sunrise: int = 0
    sunset: int = 0


class Measurements(_Record):
    temperature: float = Field(0.0, alias="temp")
    feels_like: float = 0.0
    temperature_min: float = Field(0.0, alias="temp_min")
    temperature_max: float = Field(0.0, alias="temp_max")
    pressure: float = 0.0
    sea_level_pressure: float = Field(0.0, alias="sea_level")
    ground_level_pressure: float = Field(0.0, alias="grnd_level")
    humidity: int = 0


class Wind(_Record):
    speed: float = 0.0
    direction: float = Field(0.0, alias="deg")
    gust: float = 0.0


class Clouds(_Record):
    cloudiness: int = Field(0, alias="all")


class Precipitation(_Record):
    """Rain or snow volume in mm for the last hour / three hours."""

    one_hour: float = Field(0.0, alias="1h")
    three_hours: float = Field(0.0, alias="3h")


class Weather(_Record):
    """Current weather snapshot for a single location."""

    coordinates: Coordinates = Field(default_factory=Coordinates, alias="coord")
    sys: SysInfo = Field(default_factory=SysInfo)
    conditions: List[Condition] = Field(default_factory=list, alias="weather")
    measurements: Measurements = Field(default_factory=Measurements, alias="main")
    wind: Wind = Field(default_factory=Wind)
    clouds: Clouds = Field(default_factory=Clouds)
    rain: Precipitation = Field(default_factory=Precipitation)
    snow: Precipitation = Field(default_factory=Precipitation)
    visibility: int = 0
    timestamp: int = Field(0, alias="dt")
    timezone: int = 0
    id: int = 0
    name: str = ""
    status_code: int = Field(0, alias="cod")

    @property
    def primary_condition(self) -> Optional[Condition]:
        """First condition descriptor, or None when the service sent none."""
        return self.conditions[0] if self.conditions else None


class WeatherCollection(_Record):
    """Weather for several locations (box/city, find and group endpoints)."""

    # find reports "count", the other endpoints "cnt"
    count: int = Field(0, validation_alias=AliasChoices("cnt", "count"))
    items: List[Weather] = Field(default_factory=list, alias="list")


class ForecastCity(_Record):
    id: int = 0
    name: str = ""
    country: str = ""
    coordinates: Coordinates = Field(default_factory=Coordinates, alias="coord")
    population: int = 0
    timezone: int = 0
    sunrise: int = 0
    sunset: int = 0


class ForecastSys(_Record):
    part_of_day: str = Field("", alias="pod")


class ForecastEntry(_Record):
    """A three-hour slot of the hourly forecast."""

    timestamp: int = Field(0, alias="dt")
    measurements: Measurements = Field(default_factory=Measurements, alias="main")
    conditions: List[Condition] = Field(default_factory=list, alias="weather")
    wind: Wind = Field(default_factory=Wind)
    clouds: Clouds = Field(default_factory=Clouds)
    rain: Precipitation = Field(default_factory=Precipitation)
    snow: Precipitation = Field(default_factory=Precipitation)
    visibility: int = 0
    precipitation_probability: float = Field(0.0, alias="pop")
    sys: ForecastSys = Field(default_factory=ForecastSys)
    timestamp_text: str = Field("", alias="dt_txt")


class Forecast(_Record):
    """Hourly forecast (5 days in three-hour slots)."""

    status_code: int = Field(0, alias="cod")
    city: ForecastCity = Field(default_factory=ForecastCity)
    count: int = Field(0, alias="cnt")
    entries: List[ForecastEntry] = Field(default_factory=list, alias="list")


class DailyTemperature(_Record):
    day: float = 0.0
    minimum: float = Field(0.0, alias="min")
    maximum: float = Field(0.0, alias="max")
    night: float = 0.0
    evening: float = Field(0.0, alias="eve")
    morning: float = Field(0.0, alias="morn")


class DailyForecastEntry(_Record):
    """One day of the daily forecast, with its temperature breakdown."""

    timestamp: int = Field(0, alias="dt")
    sunrise: int = 0
    sunset: int = 0
    temperature: DailyTemperature = Field(default_factory=DailyTemperature, alias="temp")
    pressure: float = 0.0
    humidity: int = 0
    conditions: List[Condition] = Field(default_factory=list, alias="weather")
    wind_speed: float = Field(0.0, alias="speed")
    wind_direction: float = Field(0.0, alias="deg")
    wind_gust: float = Field(0.0, alias="gust")
    cloudiness: int = Field(0, alias="clouds")
    # the daily endpoint reports plain mm values here
    rain: float = 0.0
    snow: float = 0.0
    precipitation_probability: float = Field(0.0, alias="pop")


class DailyForecast(_Record):
    """Daily forecast (up to 16 days)."""

    status_code: int = Field(0, alias="cod")
    city: ForecastCity = Field(default_factory=ForecastCity)
    count: int = Field(0, alias="cnt")
    entries: List[DailyForecastEntry] = Field(default_factory=list, alias="list")
