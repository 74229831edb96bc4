# scenario_runner/macros.py
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional, Sequence

from scenario_runner.config import data_test, substitute_vars
from scenario_runner.exceptions import MacroError, UnknownMacroError
from scenario_runner.schema import (
    Action, Macro, MacroCall, PrimitiveAction, SubmitAction, TypeAction,
)


class MacroRegistry:
    """
    Named action macros: a macro is registered once and referenced by name
    from any scenario ({"type": "macro", "name": "login", ...}).
    """
    def __init__(self, macros: Iterable[Macro] = ()):
        self._macros: Dict[str, Macro] = {}
        for m in macros:
            self.register(m)

    def register(self, macro: Macro) -> None:
        self._macros[macro.name] = macro

    def get(self, name: str) -> Macro:
        try:
            return self._macros[name]
        except KeyError:
            raise UnknownMacroError(f"Unknown macro: {name!r}") from None

    def __contains__(self, name: str) -> bool:
        return name in self._macros

    def names(self) -> List[str]:
        return sorted(self._macros)

    def copy(self) -> "MacroRegistry":
        return MacroRegistry(self._macros.values())

    def bind(self, call: MacroCall) -> Dict[str, Any]:
        """Maps the call's positional/keyword args onto the macro's params."""
        macro = self.get(call.name)
        if len(call.args) > len(macro.params):
            raise MacroError(
                f"Macro {macro.name!r} takes {len(macro.params)} argument(s), got {len(call.args)}"
            )
        bound = dict(zip(macro.params, call.args))
        for k, v in call.kwargs.items():
            if k not in macro.params:
                raise MacroError(f"Macro {macro.name!r} has no parameter {k!r}")
            if k in bound:
                raise MacroError(f"Macro {macro.name!r} got multiple values for {k!r}")
            bound[k] = v
        missing = [p for p in macro.params if p not in bound]
        if missing:
            raise MacroError(f"Macro {macro.name!r} missing argument(s): {', '.join(missing)}")
        return bound

    def expand(self, steps: Sequence[Action], variables: Optional[dict] = None) -> List[PrimitiveAction]:
        """
        Flattens macro calls into primitive actions, in declared order.
        ${param} placeholders inside macro steps are replaced by the bound args
        (and scenario variables); every value is substituted exactly once.
        """
        return self._expand(steps, dict(variables or {}), (), True)

    def _expand(self, steps: Sequence[Action], variables: dict, stack: Sequence[str],
                resolve: bool) -> List[PrimitiveAction]:
        out: List[PrimitiveAction] = []
        for step in steps:
            if not isinstance(step, MacroCall):
                out.append(_substitute(step, variables) if resolve else step)
                continue
            if step.name in stack:
                chain = " -> ".join([*stack, step.name])
                raise MacroError(f"Recursive macro call: {chain}")
            macro = self.get(step.name)
            call = _substitute(step, variables) if resolve else step
            scope = {**variables, **self.bind(call)}
            inner = [_substitute(s, scope) for s in macro.steps]
            # inner steps are already resolved
            out.extend(self._expand(inner, variables, (*stack, step.name), False))
        return out


def _substitute(step: Action, variables: Optional[dict]) -> Action:
    if not variables:
        return step
    if isinstance(step, MacroCall):
        return step.model_copy(update={
            "args": [substitute_vars(a, variables) for a in step.args],
            "kwargs": {k: substitute_vars(v, variables) for k, v in step.kwargs.items()},
        })
    fields = {k: substitute_vars(v, variables)
              for k, v in step.model_dump(exclude={"type"}).items()}
    return step.model_copy(update=fields)


LOGIN_MACRO = Macro(
    name="login",
    params=["email", "password"],
    steps=[
        TypeAction(selector=data_test("input-loginEmail"), text="${email}"),
        TypeAction(selector=data_test("input-loginPassword"), text="${password}"),
        SubmitAction(selector=data_test("submit-button")),
    ],
)

DEFAULT_MACROS = MacroRegistry([LOGIN_MACRO])
