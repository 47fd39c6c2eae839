from typing import Any, Dict

from points_bank.db.models import Account
from points_bank.services.transfer import TransferResult


def serialize_profile(a: Account) -> Dict[str, Any]:
    # password_hash never leaves the service
    return {
        "id": a.id,
        "email": a.email,
        "first_name": a.first_name,
        "last_name": a.last_name,
        "phone": a.phone,
        "birthday": a.birthday,
        "member_id": a.member_id,
        "member_tier": a.member_tier,
        "points": int(a.points) if a.points is not None else 0,
        "created_at": a.created_at.isoformat() if getattr(a, "created_at", None) else None,
        "updated_at": a.updated_at.isoformat() if getattr(a, "updated_at", None) else None,
    }


def serialize_transfer(r: TransferResult) -> Dict[str, Any]:
    return {
        "message": "Transfer successful",
        "transaction_id": r.transaction_id,
        "remaining_points": r.remaining_points,
        "transferred_amount": r.transferred_amount,
        "recipient": {
            "member_id": r.recipient.member_id,
            "first_name": r.recipient.first_name,
            "last_name": r.recipient.last_name,
        },
    }
