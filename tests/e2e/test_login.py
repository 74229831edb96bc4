"""
Live login against the deployed Adopet front end (pytest --run-e2e).

Uses the pytest-playwright `page` fixture: every test gets a fresh context.
"""

import pytest
from playwright.sync_api import Page, expect

from scenario_runner.config import data_test, load_options
from scenario_runner.runner import run_scenario
from scenario_runner.scenarios import (
    EMAIL, LOGIN_INLINE, LOGIN_WITH_MACRO, OPEN_LOGIN, PASSWORD,
)
from scenario_runner.schema import MacroCall, Scenario


@pytest.fixture
def options():
    return load_options({})


@pytest.mark.e2e
@pytest.mark.parametrize("scenario", [LOGIN_INLINE, LOGIN_WITH_MACRO], ids=lambda s: s.name)
def test_login_authenticates_user(page: Page, options, scenario):
    results = run_scenario(page, scenario, options=options)

    assert results["status"] == "passed"
    assert [s["type"] for s in results["steps"]][-1] == "submit"
    # the login form goes away once the session is authenticated
    expect(page.locator(data_test("input-loginEmail"))).to_have_count(0, timeout=options["timeout_ms"])


@pytest.mark.e2e
def test_login_macro_leaves_login_page(page: Page, options):
    open_login = Scenario(name="open-login", base_url=LOGIN_INLINE.base_url, steps=OPEN_LOGIN)
    run_scenario(page, open_login, options=options)
    login_url = page.url
    expect(page.locator(data_test("input-loginEmail"))).to_be_visible()

    login = Scenario(name="login", base_url=LOGIN_INLINE.base_url,
                     steps=[MacroCall(name="login", args=[EMAIL, PASSWORD])])
    results = run_scenario(page, login, options=options)

    assert [s["type"] for s in results["steps"]] == ["type", "type", "submit"]
    expect(page).not_to_have_url(login_url, timeout=options["timeout_ms"])
