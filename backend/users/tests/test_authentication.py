from datetime import timedelta

import jwt
import pytest
from django.conf import settings
from django.core.management import CommandError, call_command
from io import StringIO
from rest_framework_simplejwt.tokens import AccessToken
from rest_framework_simplejwt.utils import aware_utcnow

from users.authentication import RoleTokenUser
from users.tokens import RoleAccessToken, issue_access_token
from ukm.tests.factories import UkmFactory
from .factories import AdminFactory, UserFactory

pytestmark = pytest.mark.django_db


def test_issued_token_carries_user_id_and_role():
    user = AdminFactory()
    payload = jwt.decode(issue_access_token(user), settings.JWT_SECRET, algorithms=['HS256'])

    assert payload['userId'] == user.id
    assert payload['role'] == 'admin'
    assert set(payload) == {'userId', 'role', 'iat', 'exp'}


def test_token_user_defaults_to_member_without_role_claim():
    token = AccessToken()
    token['userId'] = 42
    token_user = RoleTokenUser(token)

    assert token_user.id == 42
    assert token_user.role == 'member'


def test_missing_token_is_unauthenticated(api_client):
    resp = api_client.get('/pendaftar')

    assert resp.status_code == 401
    assert resp.json() == {'error': 'Access token required'}


def test_malformed_token_is_forbidden(api_client):
    api_client.credentials(HTTP_AUTHORIZATION='Bearer not-a-jwt')
    resp = api_client.get('/pendaftar')

    assert resp.status_code == 403
    assert resp.json() == {'error': 'Invalid token'}


def test_expired_token_is_forbidden(api_client):
    token = RoleAccessToken.for_user(AdminFactory())
    token.set_exp(from_time=aware_utcnow() - timedelta(days=1))
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')

    resp = api_client.get('/pendaftar')

    assert resp.status_code == 403
    assert resp.json() == {'error': 'Invalid token'}


def test_token_signed_with_other_secret_is_forbidden(api_client):
    forged = jwt.encode(
        {
            'userId': 1,
            'role': 'admin',
            'token_type': 'access',
            'jti': 'forged',
            'exp': aware_utcnow() + timedelta(hours=1),
        },
        settings.JWT_SECRET + '-other',
        algorithm='HS256',
    )
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {forged}')

    resp = api_client.get('/pendaftar')

    assert resp.status_code == 403
    assert resp.json() == {'error': 'Invalid token'}


def test_role_claim_decides_admin_access(client_for):
    resp = client_for(UserFactory()).get('/pendaftar')

    assert resp.status_code == 403
    assert resp.json() == {'error': 'Admin access only'}
    assert client_for(AdminFactory()).get('/pendaftar').status_code == 200


def test_public_read_ignores_bad_token(api_client):
    UkmFactory()
    api_client.credentials(HTTP_AUTHORIZATION='Bearer garbage')

    resp = api_client.get('/ukm')

    assert resp.status_code == 200
    assert len(resp.json()) == 1


def test_issue_token_command_prints_usable_token():
    user = UserFactory()
    out = StringIO()

    call_command('issue_token', str(user.id), stdout=out)

    token = AccessToken(out.getvalue().strip())
    assert token['userId'] == user.id
    assert token['role'] == 'member'


def test_issue_token_command_rejects_unknown_user():
    with pytest.raises(CommandError):
        call_command('issue_token', '999999')


def test_accepts_token_from_auth_service(api_client):
    user = UserFactory()
    ukm = UkmFactory()
    service_token = jwt.encode(
        {'userId': user.id, 'role': 'member', 'exp': aware_utcnow() + timedelta(hours=1)},
        settings.JWT_SECRET,
        algorithm='HS256',
    )
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {service_token}')

    resp = api_client.post('/pendaftar', {'ukm_id': ukm.id, 'type': 'anggota'}, format='json')

    assert resp.status_code == 201
    assert resp.json()['registration']['user_id'] == user.id


def test_token_without_user_id_is_forbidden(api_client):
    token = jwt.encode(
        {'role': 'admin', 'exp': aware_utcnow() + timedelta(hours=1)},
        settings.JWT_SECRET,
        algorithm='HS256',
    )
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')

    resp = api_client.get('/pendaftar')

    assert resp.status_code == 403
    assert resp.json() == {'error': 'Invalid token'}
