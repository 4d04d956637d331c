from .editor import NotEditingError, ProfileEditor, ProfileEditorError
from .fields import FIELD_DEFAULTS, FIELD_NAMES
from .registry import EditorRegistry, editor_registry
from .session_gate import SessionGate
from .wallet import StaticBalanceProvider
