from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType

from .compensation.repository import CompensationRepository
from .compensation.service import CompensationService
from .compensation.strategies.factory import DayStrategyFactory
from .holidays.repository import HolidayRepository
from .settings.config_repository import ConfigSettingsRepository


@dataclass(frozen=True)
class Container:
    settings_repo: ConfigSettingsRepository
    holidays_repo: HolidayRepository
    compensations_repo: CompensationRepository

    compensation_service: CompensationService


def build_container(
    *,
    settings: ModuleType,
    holidays: HolidayRepository,
    compensations: CompensationRepository,
) -> Container:
    settings_repo = ConfigSettingsRepository.from_settings(settings)

    compensation_service = CompensationService(
        settings_repo,
        holidays,
        compensations,
        strategy_factory=DayStrategyFactory(),
    )

    return Container(
        settings_repo=settings_repo,
        holidays_repo=holidays,
        compensations_repo=compensations,
        compensation_service=compensation_service,
    )
