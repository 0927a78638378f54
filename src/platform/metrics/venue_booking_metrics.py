from prometheus_client import Counter, Histogram


class VenueBookingMetrics:
    """
    Venue booking core metrics

    Booking admission outcomes, venue listing cache efficiency and
    notification delivery, exposed on /metrics.
    """

    def __init__(self) -> None:
        # ========== Booking Admission ==========
        self.booking_admission = Counter(
            'booking_admission_total',
            'Booking admission attempts by outcome',
            ['result'],  # created / past_time / slot_conflict
        )

        self.booking_admission_duration = Histogram(
            'booking_admission_duration_seconds',
            'Booking admission processing time',
            buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
        )

        self.booking_deleted = Counter(
            'booking_deleted_total',
            'Deleted bookings by caller type',
            ['caller'],  # owner / admin
        )

        # ========== Venue Listing Cache ==========
        self.venue_cache_requests = Counter(
            'venue_list_cache_requests_total',
            'Venue listing cache lookups',
            ['result'],  # hit / miss
        )

        self.venue_cache_invalidations = Counter(
            'venue_list_cache_invalidations_total',
            'Blanket invalidations of the venue listing cache',
            ['reason'],  # create / update / delete
        )

        # ========== Notifications ==========
        self.email_sent = Counter(
            'email_sent_total',
            'Outgoing emails by kind and outcome',
            ['kind', 'result'],  # kind: booking_confirmation / verification / password_reset
        )

    def record_booking_admission(self, *, result: str) -> None:
        self.booking_admission.labels(result=result).inc()

    def record_booking_deleted(self, *, caller: str) -> None:
        self.booking_deleted.labels(caller=caller).inc()

    def record_venue_cache(self, *, hit: bool) -> None:
        self.venue_cache_requests.labels(result='hit' if hit else 'miss').inc()

    def record_venue_cache_invalidation(self, *, reason: str) -> None:
        self.venue_cache_invalidations.labels(reason=reason).inc()

    def record_email(self, *, kind: str, success: bool) -> None:
        self.email_sent.labels(kind=kind, result='success' if success else 'failure').inc()


# Global metrics instance
metrics = VenueBookingMetrics()
