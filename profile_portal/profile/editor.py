import logging

from .avatar import resolve_avatar
from .fields import FIELD_LABELS, FIELD_NAMES, FIELD_TYPES, is_profile_field, seed_draft
from .session_gate import ROOT_PATH, SessionGate
from .wallet import StaticBalanceProvider, format_coins

logger = logging.getLogger(__name__)


class ProfileEditorError(Exception):
    """Base error for invalid profile editor operations."""


class NotEditingError(ProfileEditorError):
    """Raised when submitting while the editor is in view mode."""


class ProfileEditor:
    """
    State holder for one mount of the profile screen.

    Collaborators are injected:
        auth_session: exposes is_authenticated, user (identity mapping or None)
            and update_profile(draft).
        navigate: callable taking a path, used by the session gate.
        balance_provider: exposes get_balance(); defaults to a static provider.

    The draft is seeded from the identity the first time the gate lets a
    render through and is never re-seeded for the lifetime of the editor.
    """

    def __init__(self, auth_session, navigate, balance_provider=None, root_path=ROOT_PATH):
        self.auth_session = auth_session
        self.gate = SessionGate(navigate, root_path=root_path)
        self.balance_provider = balance_provider or StaticBalanceProvider()
        self.edit_mode = False
        self._draft = None

    @property
    def is_mounted(self):
        return self._draft is not None

    @property
    def draft(self):
        """A copy of the current draft, or None before the first successful render."""
        return dict(self._draft) if self._draft is not None else None

    def evaluate(self):
        """Run the session gate and seed the draft on the first pass that yields an identity."""
        identity = self.gate.evaluate(self.auth_session)
        if identity is not None and self._draft is None:
            self._draft = seed_draft(identity)
            logger.debug("Profile draft seeded from identity")
        return identity

    # --- Edit mode ---

    def toggle_edit(self):
        self.edit_mode = not self.edit_mode
        logger.debug(f"Profile edit mode toggled to {self.edit_mode}")
        return self.edit_mode

    def cancel_edit(self):
        # Uncommitted draft changes are kept; only the form controls are hidden.
        self.edit_mode = False
        return self.edit_mode

    # --- Field binding ---

    def set_field(self, name, value):
        """
        Overwrite a single draft entry.
        Returns False (and changes nothing) for unrecognised field names or
        before the draft has been seeded.
        """
        if self._draft is None or not is_profile_field(name):
            return False
        if not isinstance(value, str):
            raise TypeError(f"Value for '{name}' must be a string, got {type(value).__name__}")
        self._draft[name] = value
        return True

    def submit(self):
        """
        Hand the full draft to the update collaborator and return to view mode.
        The collaborator's outcome is not inspected.
        """
        if not self.edit_mode:
            raise NotEditingError("Profile can only be submitted while editing.")
        if self._draft is None:
            raise ProfileEditorError("Profile draft has not been initialised.")

        snapshot = dict(self._draft)
        try:
            self.auth_session.update_profile(snapshot)
            logger.info("Profile changes submitted")
        finally:
            self.cancel_edit()
        return snapshot

    # --- Rendering ---

    def render(self):
        """
        Build the view model for the screen.
        Returns None when the session gate fails or the identity is not available yet.
        """
        identity = self.evaluate()
        if identity is None:
            return None

        editing = self.edit_mode
        balance = self.balance_provider.get_balance()
        area_name = self._draft['areaName']

        return {
            'title': 'Profile',
            'subtitle': 'Manage your personal information',
            'edit_mode': editing,
            'primary_action': {
                'label': 'Save Changes' if editing else 'Edit Profile',
                'action': 'submit' if editing else 'toggle_edit',
            },
            'show_save_cancel': editing,
            'show_avatar_upload': editing,
            'fields': [
                {
                    'name': name,
                    'label': FIELD_LABELS[name],
                    'type': FIELD_TYPES[name],
                    'value': self._draft[name],
                    'read_only': not editing,
                }
                for name in FIELD_NAMES
            ],
            'overview': {
                'avatar': resolve_avatar(identity.get('avatar'), identity.get('name')),
                'name': identity.get('name'),
                'email': identity.get('email'),
                'location': f"Location: {area_name or 'No location added'}",
            },
            'wallet': {
                'balance': balance,
                'label': format_coins(balance),
            },
        }
