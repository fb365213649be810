"""
Request signing for SimplyBook booking calls.

SimplyBook expects ``md5(booking_id + booking_hash + secret)`` as a hex
string. The digest is fixed by the remote API contract and is not a
security boundary; changing it breaks every signed call.
"""

import hashlib
from typing import Union


def sign_booking(booking_id: Union[int, str], booking_hash: str, secret: str) -> str:
    raw = f"{booking_id}{booking_hash}{secret}"
    return hashlib.md5(raw.encode("utf-8")).hexdigest()
