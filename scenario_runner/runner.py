# scenario_runner/runner.py
from __future__ import annotations
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence
from scenario_runner.config import load_options
from scenario_runner.browser import open_browser, new_session, close_browser
from scenario_runner.reporting import (
    start_run, record_step, attach_artifact, finalize_run, finish_step, summary_line,
)
from scenario_runner.schema import Action, PrimitiveAction, Scenario, validate_suite
from scenario_runner.exceptions import ActionExecutionError
from scenario_runner.macros import DEFAULT_MACROS, MacroRegistry
from scenario_runner.yaml_io import read_yaml
from scenario_runner.actions import ACTION_REGISTRY

def _step_value(step: PrimitiveAction) -> Any:
    if step.type == "visit":
        return step.url
    if step.type == "type":
        return step.text
    return None

def execute_step(page, step: PrimitiveAction, *, base_url, options, results):
    """
    Runs one primitive action. A failure is recorded and re-raised as is;
    the caller does not get to run the next step.
    """
    t = step.type
    selector = getattr(step, "selector", None)
    rec = record_step(results, len(results["steps"]) + 1, t, selector, _step_value(step))

    action = ACTION_REGISTRY.get(t)
    if not action:
        err = ActionExecutionError(f"Unknown step type: {t}")
        finish_step(rec, "failed", str(err))
        raise err

    print(f"[runner] {rec['index']}. {t} {selector or rec['value'] or ''}".rstrip())
    try:
        action(
            page,
            **step.model_dump(exclude={"type"}),
            base_url=base_url,
            timeout_ms=options["timeout_ms"],
        )
    except Exception as e:
        finish_step(rec, "failed", str(e))
        raise
    finish_step(rec, "passed", None)

def run_steps(page, steps: Sequence[PrimitiveAction], *, base_url, options, results):
    for step in steps:
        execute_step(page, step, base_url=base_url, options=options, results=results)

def expand_scenario(
    scenario: Scenario,
    *,
    macros: MacroRegistry = DEFAULT_MACROS,
    before_each: Sequence[Action] = (),
    variables: Optional[Dict[str, Any]] = None,
) -> List[PrimitiveAction]:
    """before_each + scenario steps, with every macro call flattened."""
    return macros.expand([*before_each, *scenario.steps], variables)

def run_scenario(
    page,
    scenario: Scenario,
    *,
    options: Optional[Dict[str, Any]] = None,
    macros: MacroRegistry = DEFAULT_MACROS,
    before_each: Sequence[Action] = (),
    results: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Executes a scenario against the given page (the browser-session handle).

    Macros are expanded up front, so an unknown macro or bad arguments fail
    the scenario before the browser is touched. Any action failure finalizes
    the run as failed and propagates unchanged.
    """
    options = options or load_options({})
    base_url = scenario.base_url or options.get("base_url")
    if results is None:
        results = start_run(scenario.name, base_url, options.get("browser", "chromium"),
                            bool(options.get("headful")))

    try:
        steps = expand_scenario(scenario, macros=macros, before_each=before_each,
                                variables=options.get("variables"))
        run_steps(page, steps, base_url=base_url, options=options, results=results)
    except Exception as e:
        finalize_run(results, "failed", str(e))
        raise
    finalize_run(results, "passed", None)
    return results

def run_file(path: Path, overrides: Optional[Dict[str, Any]] = None) -> int:
    """Loads a scenario/suite YAML file and runs each scenario in a fresh context."""
    doc = read_yaml(path)
    suite = validate_suite(doc)
    options = load_options(doc)
    for k, v in (overrides or {}).items():
        if k == "variables":
            options["variables"].update(v)
        elif v is not None:
            options[k] = v

    scenarios = suite.scenarios
    if (overrides or {}).get("base_url"):
        scenarios = [s.model_copy(update={"base_url": overrides["base_url"]}) for s in scenarios]

    registry = DEFAULT_MACROS.copy()
    for m in suite.macros:
        registry.register(m)

    reports_dir = Path("reports") / (suite.name or path.stem)
    reports_dir.mkdir(parents=True, exist_ok=True)

    p, browser = open_browser(options["browser"], options["headful"], slow_mo=options.get("slow_mo", 0))
    rc = 0
    try:
        for scenario in scenarios:
            print(f"\n=== {suite.name} :: {scenario.name} ===\n")
            rc = max(rc, _run_single(browser, scenario, suite.before_each, registry, options, reports_dir))
    finally:
        close_browser(p, browser)
    return rc

def _run_single(browser, scenario: Scenario, before_each, registry: MacroRegistry,
                options: Dict[str, Any], reports_dir: Path) -> int:
    slug = "".join(c if c.isalnum() else "_" for c in scenario.name).strip("_") or "scenario"
    ctx, page = new_session(
        browser,
        viewport=options.get("viewport"),
        user_agent=options.get("user_agent"),
        timeout_ms=options.get("timeout_ms"),
        record_video_dir=(reports_dir / "video") if options.get("video") else None,
    )
    results = start_run(scenario.name, scenario.base_url or options.get("base_url"),
                        options["browser"], options["headful"])

    if options.get("tracing"):
        ctx.tracing.start(screenshots=True, snapshots=True, sources=True)

    try:
        run_scenario(page, scenario, options=options, macros=registry,
                     before_each=before_each, results=results)
        print(f"\n[PASS] {summary_line(results)}\n")
        return_code = 0
    except Exception:
        shot = reports_dir / f"fail_{slug}_{int(time.time())}.png"
        try:
            page.screenshot(path=str(shot))
            attach_artifact(results, "screenshot", shot)
            print(f"[runner] failure screenshot: {shot}")
        except Exception as e:
            print(f"[WARN] could not capture screenshot: {e}")
        print(f"\n[FAIL] {summary_line(results)}\n")
        return_code = 1
    finally:
        try:
            if options.get("tracing"):
                trace_path = reports_dir / f"trace_{slug}.zip"
                ctx.tracing.stop(path=str(trace_path))
                attach_artifact(results, "trace", trace_path)
        finally:
            ctx.close()

    return return_code
