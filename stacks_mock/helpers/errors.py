"""Exception classes raised by the generator, replay log and mock node driver."""


class MockNodeError(Exception):
    """Base exception for stacks_mock operations."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or "MOCK_NODE_ERROR"


class LogWriteError(MockNodeError):
    """A scratch directory or replay log could not be created, read or written."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "LOG_WRITE_ERROR")


class EncodeError(MockNodeError):
    """A payload could not be serialized or deserialized."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "ENCODE_ERROR")


class NetworkError(MockNodeError):
    """An HTTP call to the mock node failed at the transport level."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "NETWORK_ERROR")


class ProtocolError(MockNodeError):
    """The mock node acknowledged a chain tip other than the expected one."""

    def __init__(self, expected: str, acknowledged: str) -> None:
        message = (
            f"Mock bitcoin chain tip out of sync: expected {expected!r}, "
            f"got {acknowledged!r}"
        )
        super().__init__(message, "PROTOCOL_ERROR")
        self.expected = expected
        self.acknowledged = acknowledged


__all__ = [
    "EncodeError",
    "LogWriteError",
    "MockNodeError",
    "NetworkError",
    "ProtocolError",
]
