from pathlib import Path
import argparse
from scenario_runner.runner import run_file

def _parse_viewport(s: str):
    s = str(s).lower().replace(" ", "")
    if "x" in s:
        w, h = s.split("x", 1)
        if w.isdigit() and h.isdigit():
            return int(w), int(h)
    raise argparse.ArgumentTypeError("viewport must be like 1366x900")

def _parse_vars(items):
    out = {}
    if not items: return out
    for it in items:
        if "=" not in it:
            raise argparse.ArgumentTypeError(f"--var expects KEY=VALUE, got '{it}'")
        k, v = it.split("=", 1)
        out[k.strip()] = v
    return out

def build_argparser():
    ap = argparse.ArgumentParser(description="E2E scenario runner (YAML + Playwright)")
    ap.add_argument("scenario", help="Path to YAML scenario or suite")
    ap.add_argument("--browser", default=None, choices=("chromium", "firefox", "webkit"))
    ap.add_argument("--headful", action="store_true", default=None)
    ap.add_argument("--timeout-ms", type=int, default=None)
    ap.add_argument("--viewport", type=_parse_viewport, default=None)
    ap.add_argument("--slow-mo", type=int, default=None)
    ap.add_argument("--tracing", action="store_true", default=None)
    ap.add_argument("--video", action="store_true", default=None)
    ap.add_argument("--base-url", dest="base_url", default=None)
    ap.add_argument("--var", action="append", help="KEY=VALUE, substituted for ${KEY}")
    return ap

def main(argv=None):
    ap = build_argparser()
    args = ap.parse_args(argv)
    try:
        variables = _parse_vars(args.var)
    except argparse.ArgumentTypeError as e:
        ap.error(str(e))
    overrides = {
        "browser": args.browser,
        "headful": args.headful,
        "timeout_ms": args.timeout_ms,
        "viewport": args.viewport,
        "slow_mo": args.slow_mo,
        "tracing": args.tracing,
        "video": args.video,
        "base_url": args.base_url,
        "variables": variables,
    }
    code = run_file(Path(args.scenario), overrides)
    raise SystemExit(code)

if __name__ == "__main__":
    main()
