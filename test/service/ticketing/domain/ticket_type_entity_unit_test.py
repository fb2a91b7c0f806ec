from decimal import Decimal

import pytest

from src.platform.exception.exceptions import DomainError, ValidationError
from src.service.ticketing.domain.entity.ticket_type_entity import TicketType


@pytest.mark.unit
class TestTicketTypeCreate:
    def test_new_ticket_type_starts_fully_available(self) -> None:
        """
        Given: A ticket type created with capacity 100
        When: Inspecting its stock
        Then: available equals capacity and nothing is sold
        """
        ticket_type = TicketType.create(event_id=1, name='General', price='25.00', capacity=100)

        assert ticket_type.available == 100
        assert ticket_type.sold_count == 0
        assert ticket_type.price == Decimal('25.00')
        assert ticket_type.tracking.created_at is not None

    @pytest.mark.parametrize('capacity', [0, -5])
    def test_non_positive_capacity_is_rejected(self, capacity: int) -> None:
        with pytest.raises(ValidationError, match='capacity must be greater than 0'):
            TicketType.create(event_id=1, name='General', price='10', capacity=capacity)

    def test_negative_price_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match='price must be greater than or equal to 0'):
            TicketType.create(event_id=1, name='General', price='-0.01', capacity=10)

    def test_free_ticket_type_is_allowed(self) -> None:
        ticket_type = TicketType.create(event_id=1, name='Guest list', price=0, capacity=10)
        assert ticket_type.price == Decimal('0')

    def test_blank_name_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TicketType.create(event_id=1, name='   ', price='10', capacity=10)


@pytest.mark.unit
class TestTicketTypeInvariants:
    def test_available_above_capacity_is_rejected(self) -> None:
        with pytest.raises(DomainError):
            TicketType(event_id=1, name='VIP', price=Decimal('99'), capacity=5, available=6)

    def test_negative_available_is_rejected(self) -> None:
        with pytest.raises(DomainError):
            TicketType(event_id=1, name='VIP', price=Decimal('99'), capacity=5, available=-1)

    def test_can_fulfill_compares_against_available(self) -> None:
        ticket_type = TicketType(event_id=1, name='VIP', price=Decimal('99'), capacity=5, available=2)

        assert ticket_type.can_fulfill(2)
        assert not ticket_type.can_fulfill(3)
        assert ticket_type.sold_count == 3

    def test_with_details_never_touches_stock(self) -> None:
        """
        Given: A partially sold ticket type
        When: Renaming it and changing its price
        Then: capacity and available are unchanged and updated_at moves
        """
        ticket_type = TicketType(event_id=1, name='VIP', price=Decimal('99'), capacity=5, available=2)

        updated = ticket_type.with_details(name='VIP Lounge', price='120.50')

        assert updated.name == 'VIP Lounge'
        assert updated.price == Decimal('120.50')
        assert (updated.capacity, updated.available) == (5, 2)
        assert updated.tracking.updated_at is not None

    def test_sold_out_ticket_type_is_not_available(self) -> None:
        sold_out = TicketType(event_id=1, name='VIP', price=Decimal('99'), capacity=5, available=0)

        assert not sold_out.is_available
        assert TicketType.create(event_id=1, name='VIP', price='99', capacity=5).is_available


@pytest.mark.unit
class TestTicketTypePrice:
    @pytest.mark.parametrize('price', ['19.999', '0.001', Decimal('5.125')])
    def test_more_than_two_decimal_places_is_rejected(self, price) -> None:
        """
        Given: A price with sub-cent precision
        When: Creating the ticket type
        Then: ValidationError instead of a silently rounded price
        """
        with pytest.raises(ValidationError, match='at most 2 decimal places'):
            TicketType.create(event_id=1, name='General', price=price, capacity=10)

    def test_trailing_zeros_beyond_cents_are_exact(self) -> None:
        ticket_type = TicketType.create(event_id=1, name='General', price='19.990', capacity=10)

        assert ticket_type.price == Decimal('19.99')

    def test_price_beyond_column_range_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match='price must be less than'):
            TicketType.create(event_id=1, name='General', price='10000000000', capacity=10)

    def test_largest_storable_price_is_accepted(self) -> None:
        ticket_type = TicketType.create(
            event_id=1, name='General', price='9999999999.99', capacity=10
        )

        assert ticket_type.price == Decimal('9999999999.99')

    def test_price_update_is_validated_too(self) -> None:
        ticket_type = TicketType.create(event_id=1, name='General', price='10', capacity=10)

        with pytest.raises(ValidationError, match='at most 2 decimal places'):
            ticket_type.with_details(price='10.005')
