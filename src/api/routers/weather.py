import asyncio
import logging
from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import (
    DEFAULT_CITY,
    WEATHER_API_URL,
    WEATHER_TIMEOUT_S,
    get_weather_advisor,
    get_weather_api_key,
)
from weather.advice import WeatherAdvisor
from weather.client import WeatherReport, fetch_weather

router = APIRouter()
logger = logging.getLogger(__name__)


async def _get_weather(city: str, api_key: str) -> WeatherReport:
    return await asyncio.to_thread(fetch_weather, city, api_key, WEATHER_API_URL, WEATHER_TIMEOUT_S)


def _require_key(api_key: Optional[str]) -> str:
    if not api_key:
        raise HTTPException(status_code=400, detail="Weather API key not configured")
    return api_key


@router.get("/weather")
async def get_weather(
    city: str = DEFAULT_CITY,
    api_key: Optional[str] = Depends(get_weather_api_key),
) -> dict:
    report = await _get_weather(city, _require_key(api_key))
    return asdict(report)


@router.get("/weather-suggestion")
async def get_weather_suggestion(
    city: str = DEFAULT_CITY,
    api_key: Optional[str] = Depends(get_weather_api_key),
    advisor: WeatherAdvisor = Depends(get_weather_advisor),
) -> dict:
    report = await _get_weather(city, _require_key(api_key))
    return {"weather": asdict(report), "suggestion": advisor.suggest(report)}
