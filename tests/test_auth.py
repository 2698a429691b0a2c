import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient
from jose import jwt

from backoffice.app import create_app
from backoffice.auth import create_access_token, decode_access_token, extract_bearer_token
from backoffice.rbac import UnknownPermissionError


def test_extract_bearer_token():
    assert extract_bearer_token('Bearer abc.def') == 'abc.def'


@pytest.mark.parametrize('header', [None, '', 'Basic xyz', 'Bearer   '])
def test_extract_bearer_token_rejects(header):
    with pytest.raises(HTTPException) as exc:
        extract_bearer_token(header)
    assert exc.value.status_code == 401


def test_decode_round_trip_keeps_claims():
    payload = decode_access_token(create_access_token({'sub': 'u9', 'role': 'manager'}))
    assert payload['sub'] == 'u9'
    assert payload['role'] == 'manager'
    assert 'exp' in payload


def test_decode_rejects_foreign_signature():
    token = jwt.encode({'sub': 'u9', 'role': 'owner'}, 'someone-elses-secret', algorithm='HS256')
    with pytest.raises(HTTPException) as exc:
        decode_access_token(token)
    assert exc.value.status_code == 401


def test_integrity_errors_surface_as_500(auth_headers):
    app = create_app()

    @app.get('/api/v1/broken')
    async def broken():
        raise UnknownPermissionError('canTeleport')

    client = TestClient(app)
    resp = client.get('/api/v1/broken', headers=auth_headers('owner'))
    assert resp.status_code == 500
    body = resp.json()
    assert body['error']['type'] == 'unknown_permission'
    assert 'canTeleport' in body['error']['message']
