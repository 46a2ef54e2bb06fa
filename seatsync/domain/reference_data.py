from __future__ import annotations

from seatsync.domain.roles import RoleCode

ROLE_DEFINITIONS = [
    {
        "name": RoleCode.ROLE_CUSTOMER.value,
        "description": "Buys tickets and holds seat reservations.",
    },
    {
        "name": RoleCode.ROLE_STAFF.value,
        "description": "Operates venues: manages events, seating and check-in.",
    },
    {
        "name": RoleCode.ROLE_ADMIN.value,
        "description": "Full administrative access, including account management.",
    },
]
