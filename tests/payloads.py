"""
Sample OpenWeatherMap 2.5 payloads shared by the test modules.
"""

SAMPLE_CURRENT = {
    "coord": {"lon": -9.13, "lat": 38.72},
    "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
    "base": "stations",
    "main": {
        "temp": 21.4,
        "feels_like": 21.0,
        "temp_min": 19.8,
        "temp_max": 23.1,
        "pressure": 1018,
        "humidity": 56,
        "sea_level": 1018,
        "grnd_level": 1009,
    },
    "visibility": 10000,
    "wind": {"speed": 4.6, "deg": 330, "gust": 7.2},
    "clouds": {"all": 0},
    "dt": 1700000000,
    "sys": {"type": 2, "id": 2012986, "country": "PT", "sunrise": 1699986000, "sunset": 1700022000},
    "timezone": 0,
    "id": 2267057,
    "name": "Lisbon",
    "cod": 200,
}


SAMPLE_FORECAST = {
    "cod": "200",
    "message": 0,
    "cnt": 1,
    "list": [
        {
            "dt": 1700010800,
            "main": {"temp": 18.2, "temp_min": 17.9, "temp_max": 18.2, "pressure": 1017, "humidity": 70},
            "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10n"}],
            "clouds": {"all": 75},
            "wind": {"speed": 5.1, "deg": 310, "gust": 8.0},
            "visibility": 10000,
            "pop": 0.4,
            "rain": {"3h": 0.6},
            "sys": {"pod": "n"},
            "dt_txt": "2023-11-15 03:00:00",
        }
    ],
    "city": {
        "id": 2267057,
        "name": "Lisbon",
        "coord": {"lat": 38.7167, "lon": -9.1333},
        "country": "PT",
        "population": 517802,
        "timezone": 0,
    },
}


SAMPLE_DAILY = {
    "city": {"id": 2267057, "name": "Lisbon", "coord": {"lon": -9.1333, "lat": 38.7167}, "country": "PT"},
    "cod": "200",
    "cnt": 1,
    "list": [
        {
            "dt": 1700049600,
            "sunrise": 1700032000,
            "sunset": 1700068000,
            "temp": {"day": 20.1, "min": 14.3, "max": 21.0, "night": 15.2, "eve": 18.4, "morn": 14.5},
            "pressure": 1016,
            "humidity": 62,
            "weather": [{"id": 801, "main": "Clouds", "description": "few clouds", "icon": "02d"}],
            "speed": 6.3,
            "deg": 320,
            "gust": 9.1,
            "clouds": 20,
            "rain": 1.2,
            "pop": 0.3,
        }
    ],
}
