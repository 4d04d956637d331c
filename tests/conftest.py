from unittest.mock import patch

import pytest
from flask_jwt_extended import create_access_token
from werkzeug.security import generate_password_hash

from profile_portal import create_app
from profile_portal.database.models.user import User
from profile_portal.database.token_blocklist import BLOCKLIST
from profile_portal.profile import editor_registry
from tests.fakes import FakeAuthSession, FakeNavigator


@pytest.fixture
def ada_identity():
    return {
        'name': 'Ada',
        'email': 'ada@x.com',
        'phone': '5550100',
        'houseNo': '12',
        'areaName': 'Old Town',
        'landmark': 'Clock Tower',
        'postOffice': 'Town PO',
        'state': 'Karnataka',
        'pin': '560001',
        'avatar': None,
    }


@pytest.fixture
def auth_session(ada_identity):
    return FakeAuthSession(user=ada_identity)


@pytest.fixture
def navigator():
    return FakeNavigator()


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "JWT_SECRET_KEY": "test-secret-key-that-is-long-enough-for-hs256",
        "PROFILE_DEFAULT_BALANCE": 1500,
    })
    yield app
    editor_registry.clear()
    BLOCKLIST.clear()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def ada_user():
    return User(
        id='user-1',
        username='ada',
        email='ada@x.com',
        password_hash=generate_password_hash('correct-horse', method='scrypt'),
        name='Ada',
        phone='5550100',
        house_no='12',
        area_name='Old Town',
        landmark=None,
        post_office='Town PO',
        state='Karnataka',
        pin=None,
    )


@pytest.fixture
def make_token(app):
    def _make(identity='user-1'):
        with app.app_context():
            return create_access_token(identity=identity)
    return _make


@pytest.fixture
def auth_headers(make_token):
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def stored_user(ada_user):
    """Serve ada_user from User.find_by_id without a database."""
    with patch.object(User, 'find_by_id', side_effect=lambda user_id, include_deleted=False: ada_user if user_id == ada_user.id else None) as finder:
        yield finder
