from .browser_actions import action_visit, action_click, action_submit
from .form_actions import action_type

# -----------------------------------------------------
# action type -> function
# -----------------------------------------------------
ACTION_REGISTRY = {
    # navigation
    "visit": action_visit,
    "click": action_click,

    # forms
    "type": action_type,
    "submit": action_submit,
}
