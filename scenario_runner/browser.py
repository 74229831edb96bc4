from __future__ import annotations
from pathlib import Path
from typing import Optional, Sequence, Dict, Any, Tuple
from playwright.sync_api import sync_playwright, Playwright, Browser, BrowserContext, Page

def _normalize_viewport(viewport: Optional[Sequence[int]]) -> Optional[Dict[str, int]]:
    if not viewport:
        return None
    try:
        w, h = int(viewport[0]), int(viewport[1])
    except (TypeError, ValueError, IndexError):
        return None
    if w > 0 and h > 0:
        return {"width": w, "height": h}
    return None

def _browser_ctor(p: Playwright, name: str):
    name = (name or "chromium").strip().lower()
    if name in ("chromium", "chrome"): return p.chromium
    if name in ("firefox", "ff"):       return p.firefox
    if name in ("webkit", "safari"):    return p.webkit
    return p.chromium

def open_browser(browser_name: str, headful: bool, *, slow_mo: int = 0) -> Tuple[Playwright, Browser]:
    p = sync_playwright().start()
    browser_type = _browser_ctor(p, browser_name)

    launch_kwargs: Dict[str, Any] = {"headless": not bool(headful)}
    if slow_mo and int(slow_mo) > 0:
        launch_kwargs["slow_mo"] = int(slow_mo)

    print(f"[browser] launching {browser_name} (headful={bool(headful)})")
    try:
        return p, browser_type.launch(**launch_kwargs)
    except Exception:
        p.stop()
        raise

def new_session(
    browser: Browser,
    *,
    viewport: Optional[Sequence[int]] = None,
    user_agent: Optional[str] = None,
    timeout_ms: Optional[int] = None,
    record_video_dir: Optional[Path] = None,
) -> Tuple[BrowserContext, Page]:
    """
    Fresh context + page for one scenario. The page is the session handle
    handed to the runner; nothing is shared between scenarios.
    """
    vp = _normalize_viewport(viewport)
    context_kwargs: Dict[str, Any] = {}
    if vp:
        context_kwargs["viewport"] = vp
    if user_agent:
        context_kwargs["user_agent"] = str(user_agent)
    if record_video_dir:
        Path(record_video_dir).mkdir(parents=True, exist_ok=True)
        context_kwargs["record_video_dir"] = str(record_video_dir)
        if vp:
            context_kwargs["record_video_size"] = {"width": vp["width"], "height": vp["height"]}

    ctx: BrowserContext = browser.new_context(**context_kwargs)
    page: Page = ctx.new_page()

    if timeout_ms and int(timeout_ms) > 0:
        ms = int(timeout_ms)
        page.set_default_timeout(ms)
        page.set_default_navigation_timeout(ms)

    return ctx, page

def close_browser(p: Playwright, browser: Browser) -> None:
    try:
        browser.close()
    finally:
        p.stop()
