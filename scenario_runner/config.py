
from __future__ import annotations
import os, re
from typing import Optional, Any, Dict, Sequence

DEFAULT_BASE_URL = "https://adopet-frontend-cypress.vercel.app/"

def _parse_viewport(v) -> Optional[Sequence[int]]:
    if not v: return None
    if isinstance(v, (list, tuple)) and len(v) == 2: return [int(v[0]), int(v[1])]
    if isinstance(v, str):
        parts = [p.strip() for p in v.lower().replace("×", "x").split("x")]
        if len(parts) == 2 and parts[0].isdigit() and parts[1].isdigit():
            return [int(parts[0]), int(parts[1])]
    return None

def _env_flag(env, key: str, default: str) -> bool:
    return env.get(key, default) == "1"

def load_options(scenario: dict, env=os.environ) -> Dict[str, Any]:
    opts = scenario.get("options", {}) or {}

    variables = dict(scenario.get("variables", {}) or {})
    if isinstance(opts.get("variables"), dict):
        variables.update(opts["variables"])

    return {
        "base_url": scenario.get("base_url") or env.get("BASE_URL") or DEFAULT_BASE_URL,
        "headful": bool(opts.get("headful", _env_flag(env, "HEADFUL", "0"))),
        "browser": str(opts.get("browser", env.get("BROWSER", "chromium"))).lower(),
        "timeout_ms": int(opts.get("timeout_ms", env.get("TIMEOUT_MS", 7000))),
        "tracing": bool(opts.get("tracing", _env_flag(env, "TRACING", "0"))),
        "video": bool(opts.get("video", _env_flag(env, "VIDEO", "0"))),
        "viewport": _parse_viewport(opts.get("viewport") or env.get("VIEWPORT", "1366x900")),
        "user_agent": opts.get("user_agent") or env.get("USER_AGENT"),
        "slow_mo": int(opts.get("slow_mo", env.get("SLOW_MO", 0))),
        "variables": variables,
    }

def data_test(name: str) -> str:
    """Selector for the element carrying data-test="<name>"."""
    return f'[data-test="{name}"]'

def resolve_url(base_url: Optional[str], url: str) -> str:
    if not url: return ""
    if url.startswith("http://") or url.startswith("https://"):
        return url
    if base_url:
        if url == "/": return base_url if base_url.endswith("/") else base_url + "/"
        return base_url.rstrip("/") + "/" + url.lstrip("/")
    return url

_VAR_RE = re.compile(r"\$\{(\w+)\}")

def substitute_vars(value: Any, variables: dict):
    """Replaces ${NAME} in one pass; substituted text is not scanned again."""
    if not isinstance(value, str) or not variables: return value
    return _VAR_RE.sub(lambda m: str(variables[m.group(1)]) if m.group(1) in variables else m.group(0), value)
