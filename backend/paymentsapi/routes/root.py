"""
Payments API — Root Route
===========================

What:  GET / answers with a fixed greeting.
Who:   Used as a smoke check that the listener is up.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from paymentsapi.routing import LenientRoute

router = APIRouter(tags=["Root"], route_class=LenientRoute)


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Greeting",
)
async def hello() -> str:
    return "Hello World"
