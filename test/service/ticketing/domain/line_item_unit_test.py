import pytest

from src.platform.exception.exceptions import ValidationError
from src.service.ticketing.domain.value_object.line_item import LineItem, merge_line_items


@pytest.mark.unit
class TestMergeLineItems:
    def test_repeated_ticket_types_are_merged_in_first_seen_order(self) -> None:
        """
        Given: Line items (7 x 2), (3 x 1), (7 x 3)
        When: Merging them
        Then: Ticket type 7 comes first with quantity 5
        """
        merged = merge_line_items(
            [LineItem(7, 2), LineItem(3, 1), LineItem(7, 3)], max_items=20, max_quantity=50
        )

        assert merged == [LineItem(7, 5), LineItem(3, 1)]

    def test_empty_request_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match='at least one line item'):
            merge_line_items([], max_items=20, max_quantity=50)

    @pytest.mark.parametrize('quantity', [0, -1])
    def test_non_positive_quantity_is_rejected(self, quantity: int) -> None:
        with pytest.raises(ValidationError, match='quantity must be greater than 0'):
            merge_line_items([LineItem(1, quantity)], max_items=20, max_quantity=50)

    def test_merged_quantity_is_checked_against_limit(self) -> None:
        with pytest.raises(ValidationError, match='exceeds the limit of 5'):
            merge_line_items([LineItem(1, 3), LineItem(1, 3)], max_items=20, max_quantity=5)

    def test_too_many_ticket_types_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match='at most 2 ticket types'):
            merge_line_items(
                [LineItem(1, 1), LineItem(2, 1), LineItem(3, 1)], max_items=2, max_quantity=5
            )
