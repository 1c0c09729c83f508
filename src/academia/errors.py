"""
Errors raised by the resolver layer
"""


class NotFoundError(Exception):
    """Raised when an operation targets an identifier absent from its collection."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")
