from fastapi.testclient import TestClient
import pytest

from src.platform.exception.exceptions import GatewayRejectedError, GatewayUnavailableError
from test.service.dining.fakes import FakePaymentGateway


class TestCreatePaymentOrder:
    def test_order_created_in_minor_units(
        self, client: TestClient, payment_gateway: FakePaymentGateway
    ) -> None:
        # Act
        response = client.post('/api/payment', json={'amount': 500, 'currency': 'INR'})

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body['id'] == 'order_fake000001'
        assert body['amount'] == 50000
        assert body['currency'] == 'INR'
        assert body['status'] == 'created'
        assert body['receipt'].startswith('order_rcptid_')
        assert payment_gateway.calls == [
            {'amount': 50000, 'currency': 'INR', 'receipt': body['receipt']}
        ]

    def test_each_attempt_is_a_separate_order(
        self, client: TestClient, payment_gateway: FakePaymentGateway
    ) -> None:
        first = client.post('/api/payment', json={'amount': 100, 'currency': 'INR'}).json()
        second = client.post('/api/payment', json={'amount': 100, 'currency': 'INR'}).json()

        assert first['id'] != second['id']
        assert first['receipt'] != second['receipt']
        assert len(payment_gateway.calls) == 2

    @pytest.mark.parametrize(
        'payload',
        [
            {'amount': 0, 'currency': 'INR'},
            {'amount': -10, 'currency': 'INR'},
            {'amount': 100, 'currency': 'XYZ'},
            {'currency': 'INR'},
        ],
    )
    def test_invalid_request_is_400(
        self, client: TestClient, payment_gateway: FakePaymentGateway, payload: dict
    ) -> None:
        response = client.post('/api/payment', json=payload)

        assert response.status_code == 400
        assert payment_gateway.calls == []

    @pytest.mark.parametrize(
        'error',
        [
            GatewayUnavailableError('Failed to create order'),
            GatewayRejectedError('Failed to create order', reason='amount exceeds maximum'),
        ],
    )
    def test_gateway_failure_is_500(
        self, client: TestClient, payment_gateway: FakePaymentGateway, error: Exception
    ) -> None:
        payment_gateway.failure = error

        response = client.post('/api/payment', json={'amount': 500, 'currency': 'INR'})

        assert response.status_code == 500
        assert response.json() == {'detail': 'Failed to create order'}
