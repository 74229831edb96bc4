# scenario_runner/scenarios.py
from __future__ import annotations

from scenario_runner.config import DEFAULT_BASE_URL, data_test
from scenario_runner.schema import (
    ClickAction, MacroCall, Scenario, SubmitAction, TypeAction, VisitAction,
)

EMAIL = "maria@gmail.com"
PASSWORD = "Senha123"

# Landing page -> login form
OPEN_LOGIN = [
    VisitAction(url="/"),
    ClickAction(selector=data_test("login-button")),
]

LOGIN_INLINE = Scenario(
    name="login-inline",
    base_url=DEFAULT_BASE_URL,
    steps=[
        *OPEN_LOGIN,
        TypeAction(selector=data_test("input-loginEmail"), text=EMAIL),
        TypeAction(selector=data_test("input-loginPassword"), text=PASSWORD),
        SubmitAction(selector=data_test("submit-button")),
    ],
)

LOGIN_WITH_MACRO = Scenario(
    name="login-with-macro",
    base_url=DEFAULT_BASE_URL,
    steps=[
        *OPEN_LOGIN,
        MacroCall(name="login", args=[EMAIL, PASSWORD]),
    ],
)

BUILTIN_SCENARIOS = {s.name: s for s in (LOGIN_INLINE, LOGIN_WITH_MACRO)}
