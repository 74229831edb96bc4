# scenario_runner/schema.py
from __future__ import annotations
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from scenario_runner.exceptions import StepValidationError

PRIMITIVE_TYPES = ("visit", "click", "type", "submit")


class VisitAction(BaseModel):
    type: Literal["visit"] = "visit"
    url: str

    @field_validator("url")
    @classmethod
    def _url_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("'visit' requires 'url'")
        return v


class _SelectorAction(BaseModel):
    selector: str

    @field_validator("selector")
    @classmethod
    def _selector_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("selector must not be empty")
        return v


class ClickAction(_SelectorAction):
    type: Literal["click"] = "click"


class TypeAction(_SelectorAction):
    type: Literal["type"] = "type"
    text: str


class SubmitAction(_SelectorAction):
    type: Literal["submit"] = "submit"


class MacroCall(BaseModel):
    """
    Reference to a registered macro, e.g.
    {"type": "macro", "name": "login", "args": ["maria@gmail.com", "Senha123"]}
    """
    type: Literal["macro"] = "macro"
    name: str
    args: List[Any] = Field(default_factory=list)
    kwargs: Dict[str, Any] = Field(default_factory=dict, alias="with")

    model_config = {"populate_by_name": True}


Action = Annotated[
    Union[VisitAction, ClickAction, TypeAction, SubmitAction, MacroCall],
    Field(discriminator="type"),
]
PrimitiveAction = Union[VisitAction, ClickAction, TypeAction, SubmitAction]


class Scenario(BaseModel):
    name: str = "scenario"
    base_url: Optional[str] = None
    steps: List[Action]


class Macro(BaseModel):
    name: str
    params: List[str] = Field(default_factory=list)
    steps: List[Action]


class Suite(BaseModel):
    """A scenario file: shared before_each steps plus one or more scenarios."""
    name: str = "suite"
    base_url: Optional[str] = None
    before_each: List[Action] = Field(default_factory=list)
    scenarios: List[Scenario]
    macros: List[Macro] = Field(default_factory=list)


# ---------- validation of raw dicts (YAML) ----------

def _require(d: Dict[str, Any], key: str, msg: str):
    if key not in d or d[key] in (None, ""):
        raise StepValidationError(msg)


def validate_step(i: int, st: Any) -> Action:
    if not isinstance(st, dict):
        raise StepValidationError(f"Step {i} must be a dict")
    if st.get("type") is not None and not isinstance(st["type"], str):
        raise StepValidationError(f"Step {i} 'type' must be a string")
    t = (st.get("type") or "").strip().lower()
    if not t:
        raise StepValidationError(f"Step {i} missing 'type'")
    if t not in PRIMITIVE_TYPES and t != "macro":
        raise StepValidationError(f"Step {i} has unknown type {t!r}")

    if t == "visit":
        _require(st, "url", f"Step {i} 'visit' requires 'url'")
    if t in ("click", "type", "submit"):
        _require(st, "selector", f"Step {i} '{t}' requires 'selector'")
    if t == "type" and st.get("text") is None:
        raise StepValidationError(f"Step {i} 'type' requires 'text'")
    if t == "macro":
        _require(st, "name", f"Step {i} 'macro' requires 'name'")

    raw = dict(st, type=t)
    if t == "type":
        raw["text"] = str(raw["text"])
    try:
        return _ACTION_MODELS[t].model_validate(raw)
    except ValidationError as e:
        raise StepValidationError(f"Step {i} is invalid: {e}") from e


def validate_steps(steps: Any, *, allow_empty: bool = False) -> List[Action]:
    if not isinstance(steps, list) or (not steps and not allow_empty):
        raise StepValidationError("Scenario must have a non-empty 'steps' list")
    return [validate_step(i, st) for i, st in enumerate(steps, start=1)]


def validate_scenario(s: Dict[str, Any], *, base_url: Optional[str] = None) -> Scenario:
    if not isinstance(s, dict):
        raise StepValidationError("Scenario must be a dict")
    return Scenario(
        name=s.get("name") or "scenario",
        base_url=s.get("base_url") or s.get("url") or base_url,
        steps=validate_steps(s.get("steps")),
    )


def validate_macro(m: Dict[str, Any]) -> Macro:
    if not isinstance(m, dict) or not m.get("name"):
        raise StepValidationError("Macro must be a dict with a 'name'")
    params = m.get("params") or []
    if not isinstance(params, list) or not all(isinstance(p, str) for p in params):
        raise StepValidationError(f"Macro {m['name']!r} 'params' must be a list of strings")
    return Macro(name=m["name"], params=params, steps=validate_steps(m.get("steps")))


def validate_suite(doc: Dict[str, Any]) -> Suite:
    """
    Accepts either a single scenario ({"steps": [...]}) or a suite
    ({"before_each": [...], "scenarios": [...]}).
    """
    if not isinstance(doc, dict):
        raise StepValidationError("Scenario file must be a mapping")
    base_url = doc.get("base_url") or doc.get("url")
    macros = [validate_macro(m) for m in (doc.get("macros") or [])]

    if "scenarios" not in doc:
        return Suite(name=doc.get("name") or "suite", base_url=base_url,
                     scenarios=[validate_scenario(doc)], macros=macros)

    raw_scenarios = doc["scenarios"]
    if not isinstance(raw_scenarios, list) or not raw_scenarios:
        raise StepValidationError("Suite must have a non-empty 'scenarios' list")
    return Suite(
        name=doc.get("name") or "suite",
        base_url=base_url,
        before_each=validate_steps(doc.get("before_each") or [], allow_empty=True),
        scenarios=[validate_scenario(s, base_url=base_url) for s in raw_scenarios],
        macros=macros,
    )


_ACTION_MODELS = {
    "visit": VisitAction,
    "click": ClickAction,
    "type": TypeAction,
    "submit": SubmitAction,
    "macro": MacroCall,
}
