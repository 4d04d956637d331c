PLACEHOLDER_AVATAR = '/placeholder.svg'


def resolve_avatar(image_ref=None, name=None):
    """
    Resolve the avatar shown on the profile card.
    Falls back to the placeholder image and to the first character of the name.
    """
    return {
        'src': image_ref or PLACEHOLDER_AVATAR,
        'fallback': name[0] if name else '',
    }
