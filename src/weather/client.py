import logging
from dataclasses import dataclass

import requests

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


@dataclass(frozen=True)
class WeatherReport:
    temperature: float
    description: str
    icon: str
    humidity: float
    wind_speed: float
    city: str


def fallback_report(city: str) -> WeatherReport:
    """Placeholder conditions served when the weather service can't be reached."""
    return WeatherReport(
        temperature=25.0,
        description="partly cloudy",
        icon="02d",
        humidity=65.0,
        wind_speed=3.5,
        city=city,
    )


def fetch_weather(
    city: str,
    api_key: str,
    base_url: str = OPENWEATHER_URL,
    timeout_s: float = 3.0,
) -> WeatherReport:
    """Fetch current weather for ``city`` from OpenWeatherMap.

    Expected JSON shape (abridged):
      {"main": {"temp": 24.1, "humidity": 60},
       "weather": [{"description": "light rain", "icon": "10d"}],
       "wind": {"speed": 4.2}, "name": "Lusaka"}

    Never raises; on any failure the fallback report is returned.
    """
    try:
        resp = requests.get(
            base_url,
            params={"q": city, "appid": api_key, "units": "metric"},
            timeout=timeout_s,
        )
        resp.raise_for_status()
        payload = resp.json()

        current = payload["weather"][0]
        return WeatherReport(
            temperature=float(payload["main"]["temp"]),
            description=str(current["description"]),
            icon=str(current["icon"]),
            humidity=float(payload["main"]["humidity"]),
            wind_speed=float(payload["wind"]["speed"]),
            city=payload.get("name") or city,
        )
    except Exception as e:
        logging.getLogger(__name__).warning("Weather unavailable for %s: %s", city, e)
        return fallback_report(city)
