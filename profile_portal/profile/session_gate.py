import logging

logger = logging.getLogger(__name__)

ROOT_PATH = '/'


class SessionGate:
    """
    Decides whether the profile screen may render for the current session.

    The redirect to the root path is fired once per transition into the
    unauthenticated state. Evaluating again while still signed out does not
    navigate a second time.
    """

    def __init__(self, navigate, root_path=ROOT_PATH):
        self.navigate = navigate
        self.root_path = root_path
        self._was_authenticated = None

    def evaluate(self, auth_session):
        """Return the identity to render with, or None when nothing should render."""
        is_authenticated = bool(auth_session.is_authenticated)

        if not is_authenticated:
            if self._was_authenticated is not False:
                logger.info(f"Session is not authenticated, redirecting to {self.root_path}")
                self.navigate(self.root_path)
            self._was_authenticated = False
            return None

        self._was_authenticated = True
        # Authenticated but the identity has not been loaded yet
        return auth_session.user or None
