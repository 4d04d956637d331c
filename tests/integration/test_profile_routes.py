"""Tests for the profile screen HTTP endpoints."""

import threading
import time
from unittest.mock import patch

import pytest

from profile_portal.profile import editor_registry
from profile_portal.services.profile_service import profile_service


@pytest.fixture
def writer():
    with patch.object(profile_service, 'update_profile_async') as update:
        yield update


def results(response):
    return response.get_json()['data']['results']


class TestSessionGate:
    def test_signed_out_request_redirects_to_root(self, client):
        response = client.get('/api/profile')

        assert response.status_code == 302
        assert response.headers['Location'].endswith('/')

    def test_invalid_token_counts_as_signed_out(self, client):
        response = client.get('/api/profile', headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 302

    def test_revoked_token_counts_as_signed_out(self, client, auth_headers, stored_user):
        client.post('/api/auth/sign-out', headers=auth_headers)
        response = client.get('/api/profile', headers=auth_headers)
        assert response.status_code == 302

    def test_actions_are_gated_too(self, client):
        assert client.post('/api/profile/edit').status_code == 302
        assert client.post('/api/profile/submit').status_code == 302

    def test_custom_root_path(self, app, client):
        app.config['PROFILE_ROOT_PATH'] = '/welcome'
        response = client.get('/api/profile')
        assert response.headers['Location'].endswith('/welcome')

    def test_unknown_user_renders_nothing(self, client, make_token, stored_user):
        response = client.get('/api/profile', headers={"Authorization": f"Bearer {make_token('ghost')}"})

        assert response.status_code == 204
        assert response.data == b''


class TestProfileScreen:
    def test_get_renders_seeded_draft(self, client, auth_headers, stored_user):
        response = client.get('/api/profile', headers=auth_headers)

        assert response.status_code == 200
        view = results(response)
        values = {f['name']: f['value'] for f in view['fields']}
        assert values['name'] == 'Ada'
        assert values['areaName'] == 'Old Town'
        # Missing columns fall back to defaults
        assert values['landmark'] == 'Near City Mall'
        assert values['pin'] == '110016'
        assert view['primary_action']['label'] == 'Edit Profile'
        assert view['wallet']['balance'] == 1500

    def test_balance_comes_from_config(self, app, client, auth_headers, stored_user):
        app.config['PROFILE_DEFAULT_BALANCE'] = 20
        assert results(client.get('/api/profile', headers=auth_headers))['wallet']['label'] == '20 Coins'

    def test_toggle_and_cancel(self, client, auth_headers, stored_user):
        view = results(client.post('/api/profile/edit', headers=auth_headers))
        assert view['edit_mode'] is True
        assert view['show_save_cancel'] is True

        view = results(client.post('/api/profile/cancel', headers=auth_headers))
        assert view['edit_mode'] is False

    def test_draft_changes_require_edit_mode(self, client, auth_headers, stored_user):
        response = client.patch('/api/profile/draft', json={'name': 'areaName', 'value': 'Riverside'}, headers=auth_headers)

        assert response.status_code == 409
        assert response.get_json()['error']['code'] == 'not_editing'

    def test_draft_change_updates_single_field(self, client, auth_headers, stored_user):
        client.post('/api/profile/edit', headers=auth_headers)
        response = client.patch('/api/profile/draft', json={'name': 'areaName', 'value': 'Riverside'}, headers=auth_headers)

        assert response.status_code == 200
        values = {f['name']: f['value'] for f in results(response)['fields']}
        assert values['areaName'] == 'Riverside'
        assert values['name'] == 'Ada'

    def test_unknown_field_is_ignored(self, client, auth_headers, stored_user):
        client.post('/api/profile/edit', headers=auth_headers)
        response = client.patch('/api/profile/draft', json={'name': 'nickname', 'value': 'x'}, headers=auth_headers)

        assert response.status_code == 200
        assert response.get_json()['message'] == 'Unknown field ignored'
        assert 'nickname' not in {f['name'] for f in results(response)['fields']}

    @pytest.mark.parametrize("payload", [
        {'name': 'pin'},
        {'name': 'pin', 'value': 110016},
        {'value': 'x'},
        ['pin', 'x'],
    ])
    def test_malformed_draft_payload(self, client, auth_headers, stored_user, payload):
        client.post('/api/profile/edit', headers=auth_headers)
        response = client.patch('/api/profile/draft', json=payload, headers=auth_headers)

        assert response.status_code == 400
        assert response.get_json()['error']['code'] == 'validation_error'

    def test_submit_hands_draft_to_writer(self, client, auth_headers, stored_user, writer):
        client.post('/api/profile/edit', headers=auth_headers)
        client.patch('/api/profile/draft', json={'name': 'areaName', 'value': 'Riverside'}, headers=auth_headers)

        response = client.post('/api/profile/submit', headers=auth_headers)

        assert response.status_code == 200
        assert results(response)['edit_mode'] is False
        writer.assert_called_once()
        user_id, draft = writer.call_args.args
        assert user_id == 'user-1'
        assert draft['areaName'] == 'Riverside'
        assert len(draft) == 9

    def test_submit_in_view_mode_is_rejected(self, client, auth_headers, stored_user, writer):
        response = client.post('/api/profile/submit', headers=auth_headers)

        assert response.status_code == 409
        writer.assert_not_called()

    def test_draft_survives_between_requests(self, client, auth_headers, stored_user, ada_user):
        client.post('/api/profile/edit', headers=auth_headers)
        client.patch('/api/profile/draft', json={'name': 'state', 'value': 'Goa'}, headers=auth_headers)
        ada_user.state = 'Kerala'

        values = {f['name']: f['value'] for f in results(client.get('/api/profile', headers=auth_headers))['fields']}
        assert values['state'] == 'Goa'

    def test_unmount_reseeds_on_next_get(self, client, auth_headers, stored_user):
        client.post('/api/profile/edit', headers=auth_headers)
        client.patch('/api/profile/draft', json={'name': 'state', 'value': 'Goa'}, headers=auth_headers)

        assert client.delete('/api/profile', headers=auth_headers).status_code == 200
        assert editor_registry.get('user-1') is None

        values = {f['name']: f['value'] for f in results(client.get('/api/profile', headers=auth_headers))['fields']}
        assert values['state'] == 'Karnataka'


class TestConcurrentRequests:
    def test_parallel_submits_write_once(self, app, auth_headers, stored_user, writer):
        writer.side_effect = lambda user_id, draft: time.sleep(0.2)
        client = app.test_client()
        client.get('/api/profile', headers=auth_headers)
        client.post('/api/profile/edit', headers=auth_headers)

        statuses = []

        def submit():
            statuses.append(app.test_client().post('/api/profile/submit', headers=auth_headers).status_code)

        threads = [threading.Thread(target=submit) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10)

        assert sorted(statuses) == [200, 409]
        writer.assert_called_once()

    def test_parallel_toggles_are_not_lost(self, app, auth_headers, stored_user):
        app.test_client().get('/api/profile', headers=auth_headers)

        def toggle():
            app.test_client().post('/api/profile/edit', headers=auth_headers)

        threads = [threading.Thread(target=toggle) for _ in range(6)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10)

        assert editor_registry.get('user-1').edit_mode is False
