"""
pytest fixtures

- fake_page: an in-memory stand-in for a Playwright Page, enough for the
  runner's visit/click/type/submit calls
- e2e tests (marked `e2e`) hit the deployed site and only run with --run-e2e
"""

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from scenario_runner.config import load_options


class FakeLocator:
    def __init__(self, page, selector):
        self.page = page
        self.selector = selector

    def _resolve(self, action, timeout):
        count = self.page.elements.get(self.selector, 0)
        if count == 0:
            raise PlaywrightTimeoutError(
                f"Timeout {timeout}ms exceeded waiting for locator('{self.selector}')"
            )
        if count > 1:
            raise RuntimeError(
                f"strict mode violation: locator('{self.selector}') resolved to {count} elements"
            )
        self.page.calls.append((action, self.selector))

    def click(self, timeout=None):
        self._resolve("click", timeout)
        if self.selector in self.page.reveals:
            for sel in self.page.reveals[self.selector]:
                self.page.elements[sel] = 1

    def fill(self, value, timeout=None):
        self._resolve("fill", timeout)
        self.page.values[self.selector] = value


class FakePage:
    """Records every interaction as (action, target)."""

    def __init__(self, elements=None, reveals=None):
        self.elements = dict(elements or {})
        self.reveals = dict(reveals or {})
        self.calls = []
        self.values = {}
        self.url = "about:blank"

    def goto(self, url, wait_until=None, timeout=None):
        self.calls.append(("goto", url))
        self.url = url

    def locator(self, selector):
        return FakeLocator(self, selector)


LOGIN_FORM = [
    '[data-test="input-loginEmail"]',
    '[data-test="input-loginPassword"]',
    '[data-test="submit-button"]',
]


@pytest.fixture
def adopet_page():
    """Landing page whose login button opens the login form."""
    return FakePage(
        elements={'[data-test="login-button"]': 1},
        reveals={'[data-test="login-button"]': LOGIN_FORM},
    )


@pytest.fixture
def options():
    return load_options({}, env={})


def pytest_addoption(parser):
    parser.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="run tests against the deployed application",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-e2e"):
        return
    skip_e2e = pytest.mark.skip(reason="needs --run-e2e")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.fixture
def make_page():
    return FakePage
