from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.cancel_order_use_case import CancelOrderUseCase
from src.service.ticketing.app.command.change_order_status_use_case import (
    ChangeOrderStatusUseCase,
)
from src.service.ticketing.app.command.create_order_use_case import CreateOrderUseCase
from src.service.ticketing.app.query.get_order_use_case import GetOrderUseCase
from src.service.ticketing.domain.value_object.customer_info import CustomerInfo
from src.service.ticketing.domain.value_object.line_item import LineItem
from src.service.ticketing.driving_adapter.http_controller.schema.order_schema import (
    OrderCreateRequest,
    OrderDetailResponse,
    OrderResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_order(
    request: OrderCreateRequest,
    use_case: CreateOrderUseCase = Depends(CreateOrderUseCase.depends),
) -> OrderDetailResponse:
    result = await use_case.create_order(
        customer=CustomerInfo(
            customer_id=request.customer_id,
            email=request.customer_email,
            first_name=request.customer_first_name,
            last_name=request.customer_last_name,
            phone=request.customer_phone,
        ),
        line_items=[
            LineItem(ticket_type_id=item.ticket_type_id, quantity=item.quantity)
            for item in request.line_items
        ],
    )
    return OrderDetailResponse.from_details(result.unwrap())


@router.get('/customer/{customer_id}')
@Logger.io
async def list_customer_orders(
    customer_id: int,
    use_case: GetOrderUseCase = Depends(GetOrderUseCase.depends),
) -> List[OrderResponse]:
    result = await use_case.list_customer_orders(customer_id=customer_id)
    return [OrderResponse.from_entity(order) for order in result.unwrap()]


@router.get('/{order_id}')
@Logger.io
async def get_order(
    order_id: int,
    use_case: GetOrderUseCase = Depends(GetOrderUseCase.depends),
) -> OrderDetailResponse:
    result = await use_case.get_order(order_id=order_id)
    return OrderDetailResponse.from_details(result.unwrap())


@router.post('/{order_id}/confirm')
@Logger.io
async def confirm_order(
    order_id: int,
    use_case: ChangeOrderStatusUseCase = Depends(ChangeOrderStatusUseCase.depends),
) -> OrderResponse:
    result = await use_case.confirm_order(order_id=order_id)
    return OrderResponse.from_entity(result.unwrap())


@router.post('/{order_id}/pay')
@Logger.io
async def pay_order(
    order_id: int,
    use_case: ChangeOrderStatusUseCase = Depends(ChangeOrderStatusUseCase.depends),
) -> OrderResponse:
    result = await use_case.pay_order(order_id=order_id)
    return OrderResponse.from_entity(result.unwrap())


@router.post('/{order_id}/cancel')
@Logger.io
async def cancel_order(
    order_id: int,
    use_case: CancelOrderUseCase = Depends(CancelOrderUseCase.depends),
) -> OrderDetailResponse:
    result = await use_case.cancel_order(order_id=order_id)
    return OrderDetailResponse.from_details(result.unwrap())
