from typing import Any

from fastapi.testclient import TestClient
import pytest

from src.service.dining.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from test.service.dining.fakes import InMemoryRestaurantStore
from test.test_constants import (
    MALFORMED_ID,
    TEST_OWNER_ID,
    TEST_RESTAURANT_ID_1,
    TEST_UNKNOWN_RESTAURANT_ID,
    TEST_USER_ID_1,
)


@pytest.fixture
def restaurant_payload() -> dict[str, Any]:
    return {
        'ownerId': TEST_OWNER_ID,
        'name': 'Coastal Kitchen',
        'location': 'Marine Drive',
        'contact': '+91 22 1234 5678',
        'cuisine': 'Seafood',
        'features': ['Sea view'],
        'hours': '12:00-23:00',
        'menu': [{'name': 'Fish Curry', 'price': 350}],
        'images': ['/uploads/coastal.jpg'],
    }


class TestGetRestaurant:
    def test_found(self, client: TestClient) -> None:
        response = client.get(f'/restaurant/{TEST_RESTAURANT_ID_1}')

        assert response.status_code == 200
        body = response.json()
        assert body['id'] == TEST_RESTAURANT_ID_1
        assert body['ownerId'] == TEST_OWNER_ID
        assert body['name'] == 'Spice Route'

    def test_not_found(self, client: TestClient) -> None:
        response = client.get(f'/restaurant/{TEST_UNKNOWN_RESTAURANT_ID}')

        assert response.status_code == 404
        assert response.json() == {'detail': 'Restaurant not found'}

    def test_malformed_id(self, client: TestClient) -> None:
        response = client.get(f'/restaurant/{MALFORMED_ID}')

        assert response.status_code == 400
        assert response.json() == {'detail': 'Invalid restaurant ID'}


class TestAddRestaurant:
    def test_owner_adds_restaurant(
        self,
        client: TestClient,
        restaurant_store: InMemoryRestaurantStore,
        owner_auth_headers: dict[str, str],
        restaurant_payload: dict[str, Any],
    ) -> None:
        # Act
        response = client.post(
            '/api/restaurants/add', json=restaurant_payload, headers=owner_auth_headers
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body['message'] == 'Restaurant added successfully!'
        assert body['data']['name'] == 'Coastal Kitchen'
        assert body['data']['ownerId'] == TEST_OWNER_ID
        assert body['data']['menu'] == [{'name': 'Fish Curry', 'price': 350}]
        assert body['data']['id'] in restaurant_store.restaurants

    def test_other_owner_is_403(
        self,
        client: TestClient,
        restaurant_store: InMemoryRestaurantStore,
        jwt_auth: JwtAuth,
        restaurant_payload: dict[str, Any],
    ) -> None:
        token = jwt_auth.create_jwt_token(principal_id=TEST_USER_ID_1)

        response = client.post(
            '/api/restaurants/add',
            json=restaurant_payload,
            headers={'Authorization': f'Bearer {token}'},
        )

        assert response.status_code == 403
        assert response.json() == {'detail': 'Unauthorized: Invalid Owner ID'}
        assert len(restaurant_store.restaurants) == 2

    def test_missing_token_is_401(
        self, client: TestClient, restaurant_payload: dict[str, Any]
    ) -> None:
        response = client.post('/api/restaurants/add', json=restaurant_payload)

        assert response.status_code == 401
        assert response.json() == {'detail': 'Not authenticated'}

    def test_token_signed_with_other_key_is_401(
        self, client: TestClient, restaurant_payload: dict[str, Any]
    ) -> None:
        forged = JwtAuth(secret='some_other_secret').create_jwt_token(principal_id=TEST_OWNER_ID)

        response = client.post(
            '/api/restaurants/add',
            json=restaurant_payload,
            headers={'Authorization': f'Bearer {forged}'},
        )

        assert response.status_code == 401
        assert response.json() == {'detail': 'Invalid token'}
