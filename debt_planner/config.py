"""Configuration management for debt-planner."""

from dataclasses import dataclass, field
from pathlib import Path

from debt_planner.exceptions import InvalidConfigurationError

DEFAULT_MAX_PERIODS = 1200  # 100 years of monthly periods


@dataclass
class EngineConfig:
    """Engine-wide settings shared by the simulator, reporter and scripts."""

    max_periods: int = DEFAULT_MAX_PERIODS
    log_level: str = "INFO"
    log_format: str = "standard"
    parallel_compare: bool = False
    output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = True

    def __post_init__(self) -> None:
        if self.max_periods < 1:
            raise InvalidConfigurationError(
                f"max_periods must be at least 1, got {self.max_periods}"
            )

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Create config from environment variables."""
        import os

        max_periods_str = os.getenv("DEBT_PLANNER_MAX_PERIODS")
        try:
            max_periods = int(max_periods_str) if max_periods_str else DEFAULT_MAX_PERIODS
        except ValueError as exc:
            raise InvalidConfigurationError(
                f"DEBT_PLANNER_MAX_PERIODS must be an integer, got {max_periods_str!r}"
            ) from exc

        return cls(
            max_periods=max_periods,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            parallel_compare=os.getenv("DEBT_PLANNER_PARALLEL", "false").lower() == "true",
            output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "true").lower() == "true",
        )
