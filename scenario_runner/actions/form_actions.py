def action_type(page, *, selector, text, timeout_ms=7000, **_):
    """
    Types text into a single input field. The field is waited for by
    Playwright (visible, enabled, editable) before it is filled.
    """
    page.locator(selector).fill(str(text), timeout=timeout_ms)
