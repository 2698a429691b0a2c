import os, sys, pytest
# Ensure project root is on path so 'backoffice' can be imported without install
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from fastapi.testclient import TestClient
from backoffice.app import create_app
from backoffice.auth import create_access_token


@pytest.fixture(scope='session')
def app_instance():
    return create_app()


@pytest.fixture()
def client(app_instance):
    return TestClient(app_instance)


@pytest.fixture()
def auth_headers():
    def _headers(role, sub='user-1'):
        token = create_access_token({'sub': sub, 'role': role})
        return {'Authorization': f'Bearer {token}'}
    return _headers
