from ratepoll.core.scheduling.schedule_clock import (
    NO_WAIT,
    ScheduleAnchor,
    ScheduleClock,
)

__all__ = ["ScheduleClock", "ScheduleAnchor", "NO_WAIT"]
