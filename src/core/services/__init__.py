"""
Business services for the booking admin API.

- listing.py: merge bookings with their latest status records
- status.py: append a status record for an operator decision
- notification.py: compose and send the customer email
- actions.py: action -> step plan dispatch for POST requests
"""

__all__: list[str] = []
