"""
Payments API — Routing Helpers
================================

What:  Router resolution and the route class used by this service.
Why:   The user resource is owned outside this service. The app factory
       mounts whichever router the configuration points at.

Matching rules (LenientRoute):
    - Case-insensitive:  /Users/42/Payment matches /users/{user_id}/payment
    - Non-strict:        /users/42/payment/ matches without a redirect
"""

import importlib
import logging
import re
from typing import Any, Callable

from fastapi import APIRouter
from fastapi.routing import APIRoute

from paymentsapi.exceptions import RouterLoadError

logger = logging.getLogger(__name__)


class LenientRoute(APIRoute):
    """APIRoute matching case-insensitively, with one optional trailing slash."""

    def __init__(self, path: str, endpoint: Callable[..., Any], **kwargs: Any) -> None:
        super().__init__(path, endpoint, **kwargs)
        pattern = self.path_regex.pattern
        if pattern.endswith("$"):
            pattern = pattern[:-1]
        if not pattern.endswith("/"):
            pattern += "/?"
        self.path_regex = re.compile(pattern + "$", re.IGNORECASE)


def load_router(path: str) -> APIRouter:
    """
    Import and return the router named by `path`.

    Args:
        path: "module:attribute", e.g. "paymentsapi.routes.users:router".

    Raises:
        RouterLoadError: if the path cannot be resolved to an APIRouter.
    """
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise RouterLoadError(path, "expected 'module:attribute'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise RouterLoadError(path, f"module '{module_name}' not importable") from e

    router = getattr(module, attr, None)
    if router is None:
        raise RouterLoadError(path, f"module '{module_name}' has no attribute '{attr}'")
    if not isinstance(router, APIRouter):
        raise RouterLoadError(
            path,
            f"'{attr}' is a {type(router).__name__}, not an APIRouter",
        )

    logger.debug("Loaded router %s (%d routes)", path, len(router.routes))
    return router
