from scenario_runner.config import DEFAULT_BASE_URL, data_test
from scenario_runner.macros import DEFAULT_MACROS, MacroRegistry
from scenario_runner.runner import expand_scenario, run_scenario, run_steps
from scenario_runner.schema import (
    ClickAction, Macro, MacroCall, Scenario, SubmitAction, TypeAction, VisitAction,
)

__all__ = [
    "DEFAULT_BASE_URL", "DEFAULT_MACROS", "MacroRegistry", "data_test",
    "expand_scenario", "run_scenario", "run_steps",
    "ClickAction", "Macro", "MacroCall", "Scenario", "SubmitAction", "TypeAction", "VisitAction",
]
