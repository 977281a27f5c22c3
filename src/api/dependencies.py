import os
from typing import Optional

from api import state
from scheduling.scheduler import Scheduler
from weather.advice import WeatherAdvisor
from weather.client import OPENWEATHER_URL

# Configuration
USE_DATABASE = os.getenv("USE_DATABASE", "false").lower() in {"1", "true", "yes"}
WEATHER_API_URL = os.getenv("WEATHER_API_URL", OPENWEATHER_URL).strip()
WEATHER_TIMEOUT_S = float(os.getenv("WEATHER_TIMEOUT_S", "3"))
DEFAULT_CITY = os.getenv("DEFAULT_CITY", "Lusaka")
HOT_DAY_C = float(os.getenv("WEATHER_HOT_DAY_C", "30"))
CHILLY_DAY_C = float(os.getenv("WEATHER_CHILLY_DAY_C", "15"))

advisor = WeatherAdvisor(hot_above_c=HOT_DAY_C, cold_below_c=CHILLY_DAY_C)
scheduler = Scheduler()


def get_task_store():
    return state.task_store


def get_scheduler() -> Scheduler:
    return scheduler


def get_weather_advisor() -> WeatherAdvisor:
    return advisor


def get_weather_api_key() -> Optional[str]:
    # Read per request so the key can be rotated without a restart.
    return os.getenv("WEATHER_API_KEY", "").strip() or None
