"""
Payments API — API Routes Package
===================================

Route Inventory:
    - root.py:     GET /                        (greeting)
    - payment.py:  GET /users/{id}/payment      (payment lookup echo)
    - users.py:    user resource router stub, mounted at the root

Routes are thin: they pull values out of the request and hand them to a
service. Formatting rules live in services.
"""
