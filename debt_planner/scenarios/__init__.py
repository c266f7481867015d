"""Preset payoff plans."""

from debt_planner.scenarios.presets import (
    AGGRESSIVE,
    BALANCED,
    CONSERVATIVE,
    PRESETS,
    PlanPreset,
    run_presets,
)

__all__ = [
    "AGGRESSIVE",
    "BALANCED",
    "CONSERVATIVE",
    "PRESETS",
    "PlanPreset",
    "run_presets",
]
