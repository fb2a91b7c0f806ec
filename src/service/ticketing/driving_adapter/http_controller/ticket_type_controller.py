from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.manage_ticket_type_use_case import (
    ManageTicketTypeUseCase,
)
from src.service.ticketing.app.query.get_ticket_type_use_case import GetTicketTypeUseCase
from src.service.ticketing.driving_adapter.http_controller.schema.ticket_type_schema import (
    TicketTypeCreateRequest,
    TicketTypeResponse,
    TicketTypeUpdateRequest,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_ticket_type(
    request: TicketTypeCreateRequest,
    use_case: ManageTicketTypeUseCase = Depends(ManageTicketTypeUseCase.depends),
) -> TicketTypeResponse:
    result = await use_case.create_ticket_type(
        event_id=request.event_id,
        name=request.name,
        description=request.description,
        price=request.price,
        capacity=request.capacity,
    )
    return TicketTypeResponse.from_entity(result.unwrap())


@router.get('')
@Logger.io
async def list_ticket_types(
    event_id: int,
    use_case: GetTicketTypeUseCase = Depends(GetTicketTypeUseCase.depends),
) -> List[TicketTypeResponse]:
    result = await use_case.list_ticket_types(event_id=event_id)
    return [TicketTypeResponse.from_entity(ticket_type) for ticket_type in result.unwrap()]


@router.get('/{ticket_type_id}')
@Logger.io
async def get_ticket_type(
    ticket_type_id: int,
    use_case: GetTicketTypeUseCase = Depends(GetTicketTypeUseCase.depends),
) -> TicketTypeResponse:
    result = await use_case.get_ticket_type(ticket_type_id=ticket_type_id)
    return TicketTypeResponse.from_entity(result.unwrap())


@router.patch('/{ticket_type_id}')
@Logger.io
async def update_ticket_type(
    ticket_type_id: int,
    request: TicketTypeUpdateRequest,
    use_case: ManageTicketTypeUseCase = Depends(ManageTicketTypeUseCase.depends),
) -> TicketTypeResponse:
    result = await use_case.update_ticket_type_details(
        ticket_type_id=ticket_type_id,
        name=request.name,
        description=request.description,
        price=request.price,
    )
    return TicketTypeResponse.from_entity(result.unwrap())


@router.delete('/{ticket_type_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_ticket_type(
    ticket_type_id: int,
    use_case: ManageTicketTypeUseCase = Depends(ManageTicketTypeUseCase.depends),
) -> None:
    result = await use_case.delete_ticket_type(ticket_type_id=ticket_type_id)
    result.unwrap()
