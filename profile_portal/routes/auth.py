from flask import Blueprint
from flask_jwt_extended import (
    create_access_token,
    create_refresh_token,
    jwt_required,
    get_jwt,
    get_jwt_identity,
)
from profile_portal.database.models.user import User
from profile_portal.database.token_blocklist import BLOCKLIST
from profile_portal.profile import editor_registry
from profile_portal.schemas.profile_schema import sign_in_schema
from profile_portal.services.auth_session import SignedOutSession
from profile_portal.utils.error_messages import ERROR_MESSAGES
from profile_portal.utils.helpers import validate_request
from profile_portal.utils.response import success_response, error_response

auth_blueprint = Blueprint('auth', __name__)

def end_profile_mount(user_id, signed_out=False):
    """
    Drop the user's mounted profile editor so the next visit seeds a fresh draft.
    On sign-out the editor's gate sees the signed-out state before it goes.
    """
    on_unmount = (lambda editor: editor.gate.evaluate(SignedOutSession())) if signed_out else None
    return editor_registry.unmount(user_id, on_unmount=on_unmount)

@auth_blueprint.route('/sign-in', methods=['POST'])
def sign_in():
    """
    Authenticates a user and returns JWT access and refresh tokens.
    Accepts: email/password, username/password, or identifier/password
    """
    try:
        data = validate_request(sign_in_schema)
    except ValueError as err:
        return error_response(
            error_code='validation_error',
            message=ERROR_MESSAGES["validation"]["invalid_data"],
            details=err.args[0],
            status=400
        )

    login_identifier = data.get('email') or data.get('username') or data.get('identifier')
    if not login_identifier:
        return error_response(error_code='validation_error', message=ERROR_MESSAGES["validation"]["missing_credentials"], status=400)

    user = User.find_by_username_or_email(login_identifier)

    if user and user.check_password(data['password']):
        access_token = create_access_token(identity=str(user.id))
        refresh_token = create_refresh_token(identity=str(user.id))
        # A new sign-in starts a new mount of the profile screen
        end_profile_mount(user.id)

        return success_response({
            'access_token': access_token,
            'refresh_token': refresh_token,
            'token_type': 'Bearer',
            'user': user.to_dict()
        }, message="Authentication successful.")

    return error_response(error_code='invalid_credentials', message=ERROR_MESSAGES["auth"]["invalid_credentials"], status=401)

@auth_blueprint.route('/sign-out', methods=['POST'])
@jwt_required()
def sign_out():
    """
    Signs out the user by adding the token's JTI to the blocklist
    and ending their profile editor mount.
    """
    BLOCKLIST.add(get_jwt()["jti"])
    end_profile_mount(get_jwt_identity(), signed_out=True)
    return success_response(message="Successfully signed out.")


@auth_blueprint.route('/refresh', methods=['POST'])
@jwt_required(refresh=True)
def refresh():
    """
    Issues a new access token for a valid refresh token.
    """
    try:
        identity = get_jwt_identity()
        if not User.find_by_id(identity):
            return error_response(error_code='not_found', message=ERROR_MESSAGES["not_found"]["user"], status=404)

        return success_response({
            'access_token': create_access_token(identity=identity),
            'token_type': 'Bearer',
        }, message="Token refreshed successfully.")
    except Exception as e:
        return error_response(error_code='server_error', message=ERROR_MESSAGES["server_error"]["refresh_token"], details=str(e), status=500)


@auth_blueprint.route('/me', methods=['GET'])
@jwt_required()
def get_current_user_info():
    """
    Returns the stored profile of the signed-in user.
    """
    try:
        user = User.find_by_id(get_jwt_identity())
        if not user:
            return error_response(error_code='not_found', message=ERROR_MESSAGES["not_found"]["user"], status=404)

        return success_response(user.to_dict(), message="User data retrieved successfully.")
    except Exception as e:
        return error_response(error_code='server_error', message=ERROR_MESSAGES["server_error"]["fetch_user"], details=str(e), status=500)
