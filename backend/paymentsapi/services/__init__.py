# Services package init
"""
Payments API — Services Layer
===============================

Service Inventory:
    - PaymentService: renders the reply for payment lookups
"""
