from dataclasses import dataclass

@dataclass(frozen=True)
class Settings:
    app_name: str = "Weekday Profile"
    log_level: str = "INFO"
    chart_height: int = 420
    observed_color: str = "#2563eb"
    interpolated_color: str = "#f97316"

SETTINGS = Settings()
