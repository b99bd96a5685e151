"""
Duty GraphQL type definitions
"""

import strawberry


@strawberry.type
class Duty:
    """Duty type for GraphQL API."""

    id: str
    name: str
