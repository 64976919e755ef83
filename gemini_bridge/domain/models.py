"""Domain data models."""

from enum import Enum


class RelayOutcome(str, Enum):
    """What was sent back to the origin channel for one invocation."""

    DELIVERED = "delivered"
    TOO_LONG_NOTICE_SENT = "too-long-notice-sent"
    EMPTY_NOTICE_SENT = "empty-notice-sent"
    ERROR_NOTICE_SENT = "error-notice-sent"
    SEND_FAILED = "send-failed"
