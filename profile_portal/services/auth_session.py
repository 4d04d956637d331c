import logging
from flask import g
from flask_jwt_extended import verify_jwt_in_request, get_jwt_identity
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError
from profile_portal.database.models.user import User
from profile_portal.services.profile_service import profile_service

logger = logging.getLogger(__name__)

def current_session_identity():
    """
    Return the user id carried by the request's access token, or None.
    A missing, expired, malformed or revoked token all count as signed out.
    The result is cached on flask.g for the rest of the request.
    """
    if 'session_identity' not in g:
        identity = None
        try:
            verify_jwt_in_request(optional=True)
            identity = get_jwt_identity()
        except (JWTExtendedException, PyJWTError) as e:
            logger.info(f"Treating request as signed out: {e}")
        g.session_identity = str(identity) if identity is not None else None
    return g.session_identity


class JWTAuthSession:
    """
    Auth provider for the profile editor backed by the request's JWT.
    Status and identity are read from the current request every time they are accessed.
    """

    def __init__(self, user_id=None, updater=None):
        self.user_id = str(user_id) if user_id is not None else None
        self.updater = updater or profile_service

    @property
    def is_authenticated(self):
        identity = current_session_identity()
        return identity is not None and (self.user_id is None or identity == self.user_id)

    @property
    def user(self):
        if not self.is_authenticated:
            return None
        if 'session_user' not in g:
            record = User.find_by_id(current_session_identity())
            g.session_user = record.to_identity() if record else None
        return g.session_user

    def update_profile(self, draft):
        self.updater.update_profile_async(self.user_id or current_session_identity(), draft)


class RequestNavigator:
    """Navigation service that records the requested path so the view can answer with a redirect."""

    def push(self, path):
        g.navigate_to = path

    @staticmethod
    def pending():
        return g.get('navigate_to')


class SignedOutSession:
    """Auth provider state after sign-out: no identity and nothing to update."""

    is_authenticated = False
    user = None

    def update_profile(self, draft):
        raise RuntimeError("Cannot update a profile after sign-out")
