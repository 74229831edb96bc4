"""scenario_runner.macros: registration, argument binding, expansion"""

import pytest

from scenario_runner.config import data_test
from scenario_runner.exceptions import MacroError, UnknownMacroError
from scenario_runner.macros import DEFAULT_MACROS, LOGIN_MACRO, MacroRegistry
from scenario_runner.schema import (
    ClickAction, Macro, MacroCall, SubmitAction, TypeAction, VisitAction,
)

LOGIN_STEPS = [
    TypeAction(selector=data_test("input-loginEmail"), text="maria@gmail.com"),
    TypeAction(selector=data_test("input-loginPassword"), text="Senha123"),
    SubmitAction(selector=data_test("submit-button")),
]


def test_login_is_registered_by_default():
    assert "login" in DEFAULT_MACROS
    assert DEFAULT_MACROS.get("login") is LOGIN_MACRO
    assert LOGIN_MACRO.params == ["email", "password"]


def test_expand_login_positional():
    steps = DEFAULT_MACROS.expand([MacroCall(name="login", args=["maria@gmail.com", "Senha123"])])
    assert steps == LOGIN_STEPS


def test_expand_login_named():
    call = MacroCall(name="login", kwargs={"password": "Senha123", "email": "maria@gmail.com"})
    assert DEFAULT_MACROS.expand([call]) == LOGIN_STEPS


def test_expand_keeps_surrounding_order():
    steps = DEFAULT_MACROS.expand([
        VisitAction(url="/"),
        MacroCall(name="login", args=["maria@gmail.com", "Senha123"]),
        ClickAction(selector="#after"),
    ])
    assert steps == [VisitAction(url="/"), *LOGIN_STEPS, ClickAction(selector="#after")]


def test_expand_substitutes_scenario_variables():
    steps = DEFAULT_MACROS.expand(
        [MacroCall(name="login", args=["${EMAIL}", "${PASSWORD}"]),
         VisitAction(url="/${PAGE}")],
        {"EMAIL": "maria@gmail.com", "PASSWORD": "Senha123", "PAGE": "home"},
    )
    assert steps == [*LOGIN_STEPS, VisitAction(url="/home")]


def test_expand_does_not_mutate_macro_definition():
    DEFAULT_MACROS.expand([MacroCall(name="login", args=["a@b.c", "x"])])
    assert LOGIN_MACRO.steps[0].text == "${email}"


def test_unknown_macro():
    with pytest.raises(UnknownMacroError, match="'logout'"):
        DEFAULT_MACROS.expand([MacroCall(name="logout")])


@pytest.mark.parametrize("call, message", [
    (MacroCall(name="login", args=["a"]), "missing argument"),
    (MacroCall(name="login", args=["a", "b", "c"]), "takes 2 argument"),
    (MacroCall(name="login", args=["a"], kwargs={"email": "b"}), "multiple values"),
    (MacroCall(name="login", kwargs={"email": "a", "pass": "b"}), "no parameter 'pass'"),
])
def test_bad_arguments(call, message):
    with pytest.raises(MacroError, match=message):
        DEFAULT_MACROS.expand([call])


def test_nested_macros():
    registry = DEFAULT_MACROS.copy()
    registry.register(Macro(
        name="open_and_login",
        params=["who"],
        steps=[
            ClickAction(selector=data_test("login-button")),
            MacroCall(name="login", args=["${who}", "Senha123"]),
        ],
    ))
    steps = registry.expand([MacroCall(name="open_and_login", args=["maria@gmail.com"])])
    assert steps == [ClickAction(selector=data_test("login-button")), *LOGIN_STEPS]


def test_recursive_macro_is_rejected():
    registry = MacroRegistry([
        Macro(name="a", steps=[MacroCall(name="b")]),
        Macro(name="b", steps=[MacroCall(name="a")]),
    ])
    with pytest.raises(MacroError, match="a -> b -> a"):
        registry.expand([MacroCall(name="a")])


def test_copy_is_independent():
    registry = DEFAULT_MACROS.copy()
    registry.register(Macro(name="extra", steps=[ClickAction(selector="#x")]))
    assert "extra" in registry
    assert "extra" not in DEFAULT_MACROS
    assert registry.names() == ["extra", "login"]


def test_argument_text_is_not_substituted_twice():
    steps = DEFAULT_MACROS.expand([MacroCall(name="login", args=["${password}", "Senha123"])])
    assert steps[0].text == "${password}"
    assert steps[1].text == "Senha123"


def test_variable_values_are_not_substituted_twice():
    steps = DEFAULT_MACROS.expand(
        [MacroCall(name="login", args=["${EMAIL}", "${PASSWORD}"]),
         TypeAction(selector="#note", text="${EMAIL}")],
        {"EMAIL": "${PASSWORD}", "PASSWORD": "Senha123"},
    )
    assert [s.text for s in steps[:2]] == ["${PASSWORD}", "Senha123"]
    assert steps[3].text == "${PASSWORD}"


def test_macro_and_inline_type_the_same_literal_text():
    inline = [
        TypeAction(selector=data_test("input-loginEmail"), text="${password}"),
        TypeAction(selector=data_test("input-loginPassword"), text="Senha123"),
        SubmitAction(selector=data_test("submit-button")),
    ]
    expanded = DEFAULT_MACROS.expand([MacroCall(name="login", args=["${password}", "Senha123"])])
    assert expanded == DEFAULT_MACROS.expand(inline)
