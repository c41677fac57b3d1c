from ratepoll.core.jobs.base import BaseJob
from ratepoll.core.jobs.poll_loop import PollLoop

__all__ = [
    'BaseJob',
    'PollLoop',
]
