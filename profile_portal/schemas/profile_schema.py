from marshmallow import Schema, fields, validate

class DraftFieldSchema(Schema):
    """
    Payload for a single draft field change.
    The field name is not restricted here: unknown names are ignored by the editor.
    The value may be any string, including an empty one.
    """
    name = fields.Str(required=True, validate=validate.Length(min=1))
    value = fields.Str(required=True)

class SignInSchema(Schema):
    """Credentials for sign-in. Any of email, username or identifier may carry the login."""
    email = fields.Str()
    username = fields.Str()
    identifier = fields.Str()
    password = fields.Str(required=True, load_only=True)

draft_field_schema = DraftFieldSchema()
sign_in_schema = SignInSchema()
