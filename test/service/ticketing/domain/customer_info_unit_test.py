import pytest

from src.platform.exception.exceptions import ValidationError
from src.service.ticketing.domain.value_object.customer_info import CustomerInfo


@pytest.mark.unit
class TestCustomerInfo:
    def test_normalized_strips_whitespace(self) -> None:
        customer = CustomerInfo(
            customer_id=1,
            email='  ada@example.com ',
            first_name=' Ada ',
            last_name='Lovelace',
            phone='   ',
        ).normalized()

        assert customer.email == 'ada@example.com'
        assert customer.first_name == 'Ada'
        assert customer.phone is None
        assert customer.full_name == 'Ada Lovelace'

    @pytest.mark.parametrize('email', ['', 'ada', 'ada@example', 'ada @example.com'])
    def test_invalid_email_is_rejected(self, email: str) -> None:
        with pytest.raises(ValidationError, match='email'):
            CustomerInfo(
                customer_id=1, email=email, first_name='Ada', last_name='Lovelace'
            ).normalized()

    def test_short_name_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match='first_name'):
            CustomerInfo(
                customer_id=1, email='ada@example.com', first_name='A', last_name='Lovelace'
            ).normalized()
