"""
Payments API — User Router
============================

What:  Router for the user resource, mounted at the application root.
Why:   User routes are owned by another team. This stub is the default
       value of the USER_ROUTER setting and defines no routes, so paths
       such as /users answer with the framework 404 until a real router
       is configured.
"""

from fastapi import APIRouter

from paymentsapi.routing import LenientRoute

router = APIRouter(tags=["Users"], route_class=LenientRoute)
