"""
Payments API — Payment Lookup Service
=======================================

What:  Renders the plain-text reply for a payment lookup.
Why:   Keeps the response format out of the route so it can be tested
       without HTTP.
How:   Interpolates the user ID and filter into a fixed template. No
       storage is consulted; the reply depends only on the inputs.

Absent filter:
    A missing ?filter= renders as the placeholder ("undefined" unless
    MISSING_FILTER_PLACEHOLDER says otherwise). An empty ?filter= is a
    present value and renders as an empty string. A repeated ?filter=
    renders its values joined with commas.
"""

import logging
from typing import Optional, Sequence, Union

from paymentsapi.config import settings

logger = logging.getLogger(__name__)

LOOKUP_TEMPLATE = "User ID: {user_id}, Filter: {filter}"


class PaymentService:
    """Formats payment lookups."""

    def describe_lookup(
        self,
        user_id: str,
        filter: Union[str, Sequence[str], None] = None,
        placeholder: Optional[str] = None,
    ) -> str:
        """
        Build the reply for GET /users/{user_id}/payment.

        Args:
            user_id:     Path value, used verbatim.
            filter:      Query value; None when the parameter was absent.
                         Repeated values arrive as a list and are joined
                         with commas.
            placeholder: Text for an absent filter. Defaults to
                         settings.missing_filter_placeholder.

        >>> PaymentService().describe_lookup("42", placeholder="undefined")
        'User ID: 42, Filter: undefined'
        >>> PaymentService().describe_lookup("42", "recent")
        'User ID: 42, Filter: recent'
        >>> PaymentService().describe_lookup("42", ["a", "b"])
        'User ID: 42, Filter: a,b'
        """
        if placeholder is None:
            placeholder = settings.missing_filter_placeholder
        if filter is None:
            rendered = placeholder
        elif isinstance(filter, str):
            rendered = filter
        else:
            rendered = ",".join(filter)
        logger.debug("Payment lookup user_id=%r filter=%r", user_id, filter)
        return LOOKUP_TEMPLATE.format(user_id=user_id, filter=rendered)


# Singleton instance
payment_service = PaymentService()
