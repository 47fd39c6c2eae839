"""
Typed failures reported by the points core.

Every error carries a stable display message and a machine code; the HTTP
layer maps them to status codes in api/errors.py.
"""

from typing import Optional


class PointsError(Exception):
    code = "error"
    default_message = "request failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidRequest(PointsError):
    code = "invalid_request"
    default_message = "to_member_id and positive amount required"


class SelfTransfer(PointsError):
    code = "self_transfer"
    default_message = "cannot transfer to yourself"


class InsufficientFunds(PointsError):
    code = "insufficient_funds"
    default_message = "insufficient points"


class RecipientNotFound(PointsError):
    code = "recipient_not_found"
    default_message = "recipient not found"


class DuplicateError(PointsError):
    code = "duplicate"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} already registered")


class TransferFailed(PointsError):
    code = "transfer_failed"
    default_message = "failed to complete transfer"


class Unauthenticated(PointsError):
    code = "unauthenticated"
    default_message = "invalid credentials"


class NotFound(PointsError):
    code = "not_found"
    default_message = "user not found"


class SelfLookup(PointsError):
    code = "self_lookup"
    default_message = "cannot search for yourself"
