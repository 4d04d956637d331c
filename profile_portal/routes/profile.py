import logging
from functools import wraps
from flask import Blueprint, current_app, redirect

from profile_portal.profile import NotEditingError, ProfileEditor, SessionGate, StaticBalanceProvider, editor_registry
from profile_portal.schemas.profile_schema import draft_field_schema
from profile_portal.services.auth_session import JWTAuthSession, RequestNavigator, current_session_identity
from profile_portal.utils.error_messages import ERROR_MESSAGES
from profile_portal.utils.helpers import validate_request
from profile_portal.utils.response import success_response, error_response

logger = logging.getLogger(__name__)

profile_blueprint = Blueprint('profile', __name__)

navigator = RequestNavigator()


def _root_path():
    return current_app.config.get('PROFILE_ROOT_PATH', '/')


def _build_editor(user_id):
    return ProfileEditor(
        auth_session=JWTAuthSession(user_id),
        navigate=navigator.push,
        balance_provider=StaticBalanceProvider(current_app.config.get('PROFILE_DEFAULT_BALANCE', 1500)),
        root_path=_root_path(),
    )


def _nothing_rendered():
    pending = RequestNavigator.pending()
    if pending:
        return redirect(pending)
    # Signed in, but the identity is not available: render nothing
    return '', 204


def _render(editor, message="Profile retrieved successfully"):
    view = editor.render()
    if view is None:
        return _nothing_rendered()
    return success_response(view, message=message)


def profile_session_required(fn):
    """
    Run the session gate before a profile view.
    Signed-out requests are redirected to the root path. Signed-in requests get
    their mounted editor (mounting one if needed) passed as the first argument.
    The editor must have rendered once so the draft exists.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        user_id = current_session_identity()
        if user_id is None:
            SessionGate(navigator.push, root_path=_root_path()).evaluate(JWTAuthSession())
            return _nothing_rendered()

        # One request at a time per editor; gthread workers serve a user's requests in parallel
        with editor_registry.session(user_id, lambda: _build_editor(user_id)) as editor:
            if editor.evaluate() is None:
                return _nothing_rendered()
            return fn(editor, *args, **kwargs)
    return wrapper


@profile_blueprint.route('/profile', methods=['GET'])
@profile_session_required
def get_profile(editor):
    return _render(editor)


@profile_blueprint.route('/profile', methods=['DELETE'])
@profile_session_required
def unmount_profile(editor):
    """Drop the mounted editor; the next GET seeds a fresh draft from the stored profile."""
    editor_registry.unmount(current_session_identity())
    return success_response(message="Profile editor closed")


@profile_blueprint.route('/profile/edit', methods=['POST'])
@profile_session_required
def toggle_edit(editor):
    editor.toggle_edit()
    return _render(editor, message="Edit mode enabled" if editor.edit_mode else "Edit mode disabled")


@profile_blueprint.route('/profile/cancel', methods=['POST'])
@profile_session_required
def cancel_edit(editor):
    editor.cancel_edit()
    return _render(editor, message="Edit cancelled")


@profile_blueprint.route('/profile/draft', methods=['PATCH'])
@profile_session_required
def set_draft_field(editor):
    try:
        validated_data = validate_request(draft_field_schema)
    except ValueError as err:
        return error_response(
            error_code='validation_error',
            message=ERROR_MESSAGES["validation"]["invalid_data"],
            details=err.args[0],
            status=400
        )

    if not editor.edit_mode:
        return error_response(error_code='not_editing', message=ERROR_MESSAGES["profile"]["not_editing"], status=409)

    applied = editor.set_field(validated_data['name'], validated_data['value'])
    if not applied:
        logger.debug(f"Ignored update for unknown profile field '{validated_data['name']}'")
    return _render(editor, message="Field updated" if applied else "Unknown field ignored")


@profile_blueprint.route('/profile/submit', methods=['POST'])
@profile_session_required
def submit_profile(editor):
    try:
        editor.submit()
    except NotEditingError:
        return error_response(error_code='not_editing', message=ERROR_MESSAGES["profile"]["not_editing"], status=409)
    # The write runs in the background; its outcome is not reported here.
    return _render(editor, message="Profile changes submitted")
