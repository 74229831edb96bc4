class ScenarioRuntimeError(RuntimeError):
    """Base scenario runtime error."""

class StepValidationError(ScenarioRuntimeError):
    """Raised when a scenario or step does not match the schema."""

class ActionExecutionError(ScenarioRuntimeError):
    """Raised when an action cannot be dispatched."""

class MacroError(ScenarioRuntimeError):
    """Raised when a macro call cannot be expanded."""

class UnknownMacroError(MacroError):
    """Raised when a step references a macro that was never registered."""
