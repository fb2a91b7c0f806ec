from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_notification_sender import INotificationSender
from src.service.ticketing.domain.domain_event.order_events import OrderDomainEvent


async def dispatch_after_commit(
    notification_sender: INotificationSender, *events: OrderDomainEvent
) -> None:
    """Hand committed events to the sender. A failed send never undoes the commit."""
    for event in events:
        try:
            await notification_sender.send(event=event)
        except Exception as e:
            Logger.base.warning(
                f'⚠️ [Notification] {type(event).__name__} not delivered: {type(e).__name__}: {e}'
            )
