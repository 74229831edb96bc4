# scenario_runner/reporting.py
from __future__ import annotations
import time
from pathlib import Path
from typing import Dict, Any, List, Optional

def start_run(name: str, base_url: Optional[str], browser: str, headful: bool) -> Dict[str, Any]:
    return {
        "name": name,
        "base_url": base_url,
        "browser": browser,
        "headful": headful,
        "started": time.time(),
        "ended": None,
        "steps": [],
        "artifacts": [],
        "status": "running",
        "error": None,
    }

def record_step(results: Dict[str, Any], idx: int, t: str, selector: Optional[str], value: Any) -> Dict[str, Any]:
    rec = {
        "index": idx,
        "type": t,
        "selector": selector,
        "value": value,
        "started": time.time(),
        "ended": None,
        "status": "running",
        "error": None,
    }
    results["steps"].append(rec)
    return rec

def finish_step(rec: Dict[str, Any], status: str = "passed", error: Optional[str] = None) -> None:
    rec["ended"] = time.time()
    rec["status"] = status
    if error:
        rec["error"] = error

def attach_artifact(results: Dict[str, Any], kind: str, path: Path) -> None:
    results["artifacts"].append({"type": kind, "path": str(path)})

def finalize_run(results: Dict[str, Any], status: str, error: Optional[str]) -> None:
    results["ended"] = time.time()
    results["status"] = status
    results["error"] = error

def failed_step(results: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    return next((s for s in results["steps"] if s["status"] == "failed"), None)

def summary_line(results: Dict[str, Any]) -> str:
    total = (results["ended"] or time.time()) - results["started"]
    done = sum(1 for s in results["steps"] if s["status"] == "passed")
    line = f"{results['name']}: {results['status']} ({done} step(s), {total:.2f}s)"
    if results["error"]:
        line += f" - {results['error']}"
    return line
