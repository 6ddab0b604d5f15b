"""
Payments API — Payment Route Handler
======================================

What:  Handles GET /users/{user_id}/payment.
Why:   Demonstrates a nested resource URL (payments belong to a user)
       with an optional query parameter for filtering.
How:   Extracts the path and query values and delegates to PaymentService,
       which renders the plain-text reply.

The user ID is one path segment, taken from the raw (still encoded)
request path and then percent-decoded. An encoded slash therefore stays
inside the ID (/users/a%2Fb/payment → "a/b"), while a literal extra
segment (/users/a/b/payment) does not match.

Examples:
    GET /users/42/payment                     → "User ID: 42, Filter: undefined"
    GET /users/42/payment?filter=recent       → "User ID: 42, Filter: recent"
    GET /users/42/payment?filter=a&filter=b   → "User ID: 42, Filter: a,b"
"""

from typing import List, Optional
from urllib.parse import unquote_to_bytes

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import PlainTextResponse

from paymentsapi.routing import LenientRoute
from paymentsapi.services.payment_service import payment_service

router = APIRouter(tags=["Payments"], route_class=LenientRoute)


def raw_user_id(request: Request) -> str:
    """
    Decode the {user_id} segment from the undecoded request path.

    Raises:
        HTTPException 404: the path does not have exactly one non-empty
                           segment between /users/ and /payment.
        HTTPException 400: the segment is not valid percent-encoded UTF-8.
    """
    raw = request.scope.get("raw_path") or request.scope["path"].encode("utf-8")
    raw = raw.split(b"?", 1)[0]

    root_path = request.scope.get("root_path", "").encode("utf-8")
    if root_path and raw.startswith(root_path):
        raw = raw[len(root_path):]
    if raw.endswith(b"/"):
        raw = raw[:-1]

    segments = raw.split(b"/")
    if len(segments) != 4 or segments[0] or not segments[2]:
        raise HTTPException(status_code=404, detail="Not Found")

    try:
        return unquote_to_bytes(segments[2]).decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(
            status_code=400,
            detail="Failed to decode param 'user_id'",
        ) from None


@router.get(
    "/users/{user_id:path}/payment",
    response_class=PlainTextResponse,
    summary="Look up a user's payments",
    description=(
        "Echoes the user ID and the optional filter back as plain text. "
        "Neither value is validated. A repeated filter is joined with commas."
    ),
)
async def get_user_payment(
    request: Request,
    filter: Optional[List[str]] = Query(
        default=None,
        description="Free-form filter, e.g. 'recent'. Omitted filters render as a placeholder.",
    ),
) -> str:
    """
    Echo a payment lookup.

    Args:
        filter:  Query values; None when absent, [""] when given empty.
    """
    return payment_service.describe_lookup(
        user_id=raw_user_id(request),
        filter=filter,
        placeholder=request.app.state.settings.missing_filter_placeholder,
    )
