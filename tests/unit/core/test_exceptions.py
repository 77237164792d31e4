"""Precise unit tests for exception hierarchy."""

from pullseq.core import AbortSignal, CursorError, ProtocolViolation


def test_protocol_violation_with_context():
    """Test ProtocolViolation carries operation and offending result."""
    error = ProtocolViolation("bad result", operation="return", result={"x": 1})
    assert str(error) == "bad result"
    assert error.operation == "return"
    assert error.result == {"x": 1}
    assert isinstance(error, CursorError)


def test_abort_signal_payload():
    """Test AbortSignal wraps a non-exception abort value."""
    error = AbortSignal({"reason": "user"})
    assert error.payload == {"reason": "user"}
    assert "user" in str(error)
    assert isinstance(error, CursorError)


def test_abort_signal_without_payload():
    """Test AbortSignal message when no payload is given."""
    error = AbortSignal()
    assert error.payload is None
    assert str(error) == "cursor aborted"
