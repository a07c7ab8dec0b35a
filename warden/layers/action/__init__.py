"""Action Layer - Script catalog, retrying executor and JS actions."""

from warden.layers.action.scripts import JavaScript, ScriptDescriptor
from warden.layers.action.executor import ScriptExecutor, resolve_arguments
from warden.layers.action.js_actions import HighlightState, JsActions, Point

__all__ = [
    "JavaScript",
    "ScriptDescriptor",
    "ScriptExecutor",
    "resolve_arguments",
    "HighlightState",
    "JsActions",
    "Point",
]
