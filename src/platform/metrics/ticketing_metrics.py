from prometheus_client import Counter, Histogram


class TicketingMetrics:
    """
    Order and ticket business metrics.

    Counters are process-wide (default prometheus registry) and exposed at /metrics.
    """

    def __init__(self) -> None:
        # ========== Order Metrics ==========
        self.orders_created = Counter(
            'ticketify_orders_created_total',
            'Orders committed by create_order',
        )

        self.orders_cancelled = Counter(
            'ticketify_orders_cancelled_total',
            'Orders committed as cancelled by cancel_order',
        )

        self.order_transitions = Counter(
            'ticketify_order_transitions_total',
            'Order status transitions',
            ['to_status', 'result'],  # result: success/rejected
        )

        self.order_creation_duration = Histogram(
            'ticketify_order_creation_duration_seconds',
            'create_order duration including retries',
            buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
        )

        self.order_create_retries = Counter(
            'ticketify_order_create_retries_total',
            'create_order attempts retried after an integrity conflict',
        )

        # ========== Inventory Metrics ==========
        self.capacity_rejections = Counter(
            'ticketify_capacity_rejections_total',
            'Purchases rejected for insufficient stock',
            ['ticket_type_id'],
        )

        self.tickets_issued = Counter(
            'ticketify_tickets_issued_total',
            'Tickets materialized by committed orders',
        )

        self.tickets_released = Counter(
            'ticketify_tickets_released_total',
            'Tickets returned to stock by committed cancellations',
        )

        # ========== Scan Metrics ==========
        self.ticket_scans = Counter(
            'ticketify_ticket_scans_total',
            'Ticket scan attempts',
            ['result'],  # result: admitted/not_found/rejected
        )

    # ========== Helper Methods ==========

    def record_order_created(self, *, ticket_count: int, duration: float) -> None:
        self.orders_created.inc()
        self.tickets_issued.inc(ticket_count)
        self.order_creation_duration.observe(duration)

    def record_order_cancelled(self, *, released_count: int) -> None:
        self.orders_cancelled.inc()
        self.tickets_released.inc(released_count)

    def record_capacity_rejection(self, *, ticket_type_id: int) -> None:
        self.capacity_rejections.labels(ticket_type_id=str(ticket_type_id)).inc()

    def record_transition(self, *, to_status: str, success: bool) -> None:
        self.order_transitions.labels(
            to_status=to_status, result='success' if success else 'rejected'
        ).inc()

    def record_scan(self, *, result: str) -> None:
        self.ticket_scans.labels(result=result).inc()


# Global metrics instance
metrics = TicketingMetrics()
