from prometheus_client import Counter, Histogram


class DeskBookingMetrics:
    """Desk booking business metrics exposed on /metrics"""

    def __init__(self) -> None:
        self.desk_booking_requests = Counter(
            'desk_booking_requests_total',
            'Total desk booking requests',
            ['result'],  # result: success/no_desk_available
        )

        self.desk_booking_duration = Histogram(
            'desk_booking_duration_seconds',
            'Desk booking processing time',
            buckets=[0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 2.0],
        )

    def record_desk_booking(self, *, result: str, duration: float) -> None:
        self.desk_booking_requests.labels(result=result).inc()
        self.desk_booking_duration.observe(duration)


# Global metrics instance
metrics = DeskBookingMetrics()
