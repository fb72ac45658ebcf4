from prometheus_client import Counter, Gauge


class BookingMetrics:
    """
    Restaurant booking core metrics

    Exposed on /metrics for Prometheus scraping.
    """

    def __init__(self) -> None:
        # ========== Booking Metrics ==========
        self.bookings_created = Counter(
            'bookings_created_total',
            'Bookings persisted',
        )

        self.booking_requests_rejected = Counter(
            'booking_requests_rejected_total',
            'Booking requests rejected before persistence',
            ['reason'],  # invalid_request / persistence_failure
        )

        self.booking_lookups = Counter(
            'booking_lookups_total',
            'Booking list lookups',
            ['expanded', 'result'],  # result: hit / empty
        )

        # ========== Payment Metrics ==========
        self.payment_orders = Counter(
            'payment_orders_total',
            'Payment orders requested from the gateway',
            ['currency', 'result'],  # result: created / rejected / unavailable
        )

        # ========== Realtime Metrics ==========
        self.realtime_connections = Gauge(
            'realtime_active_connections',
            'Connected realtime clients',
        )

        self.realtime_events_published = Counter(
            'realtime_events_published_total',
            'Notification events scheduled for fan-out',
            ['event'],
        )

    def record_booking_created(self) -> None:
        self.bookings_created.inc()

    def record_booking_rejected(self, *, reason: str) -> None:
        self.booking_requests_rejected.labels(reason=reason).inc()

    def record_booking_lookup(self, *, expanded: bool, found: bool) -> None:
        self.booking_lookups.labels(
            expanded=str(expanded).lower(), result='hit' if found else 'empty'
        ).inc()

    def record_payment_order(self, *, currency: str, result: str) -> None:
        self.payment_orders.labels(currency=currency, result=result).inc()

    def set_realtime_connections(self, count: int) -> None:
        self.realtime_connections.set(count)

    def record_realtime_event(self, *, event: str) -> None:
        self.realtime_events_published.labels(event=event).inc()


# Global metrics instance (prometheus collectors must be registered once per process)
metrics = BookingMetrics()
