# Ordered field definitions for the profile form.
# Each entry: (field name, label, input type, default used when the identity has no value)
PROFILE_FIELDS = (
    ('name', 'Full Name', 'text', 'John Doe'),
    ('email', 'Email Address', 'email', 'john.doe@example.com'),
    ('phone', 'Phone Number', 'text', '9876543210'),
    ('houseNo', 'House No.', 'text', '123A'),
    ('areaName', 'Area Name', 'text', 'Green Park'),
    ('landmark', 'Landmark', 'text', 'Near City Mall'),
    ('postOffice', 'Post Office', 'text', 'Central PO'),
    ('state', 'State', 'text', 'Delhi'),
    ('pin', 'Pin', 'text', '110016'),
)

FIELD_NAMES = tuple(name for name, _, _, _ in PROFILE_FIELDS)

FIELD_DEFAULTS = {name: default for name, _, _, default in PROFILE_FIELDS}

FIELD_LABELS = {name: label for name, label, _, _ in PROFILE_FIELDS}

FIELD_TYPES = {name: input_type for name, _, input_type, _ in PROFILE_FIELDS}


def is_profile_field(name):
    return name in FIELD_DEFAULTS


def seed_draft(identity):
    """
    Build the initial draft from an identity mapping.
    Missing, None or empty values fall back to the field default.
    """
    identity = identity or {}
    draft = {}
    for name in FIELD_NAMES:
        value = identity.get(name)
        draft[name] = str(value) if value else FIELD_DEFAULTS[name]
    return draft
