from __future__ import annotations

from dataclasses import dataclass

from weather.client import WeatherReport


@dataclass(frozen=True)
class WeatherAdvisor:
    """Maps current weather to a one-line planning suggestion."""

    hot_above_c: float = 30.0
    cold_below_c: float = 15.0

    def suggest(self, report: WeatherReport) -> str:
        description = report.description.lower()

        if report.temperature > self.hot_above_c:
            return "Hot day! Schedule intense tasks for cooler morning/evening hours."
        if report.temperature < self.cold_below_c:
            return "Chilly weather. Good for focused indoor tasks."
        if "rain" in description:
            return "Rainy day. Perfect for indoor coding and study sessions!"
        if "cloud" in description:
            return "Cloudy weather. Balanced energy for all types of tasks."
        return "Beautiful weather! Great for any activities."


def suggest(report: WeatherReport) -> str:
    return WeatherAdvisor().suggest(report)
