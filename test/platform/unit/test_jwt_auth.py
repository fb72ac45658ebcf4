from datetime import datetime, timedelta, timezone

import jwt
import pytest

from src.platform.exception.exceptions import AuthenticationError
from src.service.dining.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from test.test_constants import TEST_OWNER_ID


SECRET = 'unit_test_secret'


@pytest.fixture
def jwt_auth() -> JwtAuth:
    return JwtAuth(secret=SECRET, algorithm='HS256')


@pytest.mark.unit
class TestJwtAuth:
    def test_principal_from_bearer_header(self, jwt_auth: JwtAuth) -> None:
        token = jwt_auth.create_jwt_token(principal_id=TEST_OWNER_ID)

        assert jwt_auth.get_principal_id_from_header(f'Bearer {token}') == TEST_OWNER_ID

    def test_bare_token_accepted(self, jwt_auth: JwtAuth) -> None:
        token = jwt_auth.create_jwt_token(principal_id=TEST_OWNER_ID)

        assert jwt_auth.get_principal_id_from_header(token) == TEST_OWNER_ID

    @pytest.mark.parametrize('header', [None, '', '   '])
    def test_missing_token(self, jwt_auth: JwtAuth, header: str | None) -> None:
        with pytest.raises(AuthenticationError, match='Not authenticated'):
            jwt_auth.get_principal_id_from_header(header)

    def test_expired_token(self, jwt_auth: JwtAuth) -> None:
        token = jwt.encode(
            {'sub': TEST_OWNER_ID, 'exp': datetime.now(timezone.utc) - timedelta(minutes=1)},
            SECRET,
            algorithm='HS256',
        )

        with pytest.raises(AuthenticationError, match='Invalid token'):
            jwt_auth.get_principal_id_from_header(f'Bearer {token}')

    def test_token_without_subject(self, jwt_auth: JwtAuth) -> None:
        token = jwt.encode({'role': 'owner'}, SECRET, algorithm='HS256')

        with pytest.raises(AuthenticationError, match='Invalid token') as exc_info:
            jwt_auth.get_principal_id_from_header(f'Bearer {token}')

        assert exc_info.value.status_code == 401
