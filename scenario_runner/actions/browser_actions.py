from scenario_runner.config import resolve_url

# ===============================================================
#  ACTIONS: Navigation & Clicks
# ===============================================================
# Locators are strict: a selector matching zero elements times out,
# one matching several raises before anything is clicked.

def action_visit(page, *, url, base_url=None, timeout_ms=7000, **_):
    target = resolve_url(base_url, url)
    page.goto(target, wait_until="load", timeout=timeout_ms)


def action_click(page, *, selector, timeout_ms=7000, **_):
    page.locator(selector).click(timeout=timeout_ms)


def action_submit(page, *, selector, timeout_ms=7000, **_):
    """
    Clicks the form's submit control. The resulting network submission
    belongs to the application under test.
    """
    page.locator(selector).click(timeout=timeout_ms)
