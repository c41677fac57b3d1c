from tests.fakes.clock import FakeClock
from tests.fakes.logger import FakeLogger
from tests.fakes.notifier import RecordingNotifier
from tests.fakes.polling_state import FakePollingState
from tests.fakes.state_store import FakeStateStore
from tests.fakes.transport import ScriptedTransport, json_response

__all__ = [
    "FakeClock",
    "FakeLogger",
    "FakePollingState",
    "FakeStateStore",
    "RecordingNotifier",
    "ScriptedTransport",
    "json_response",
]
