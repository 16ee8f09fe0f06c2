"""
Domain Errors

Error taxonomy shared by every bounded context:
- InvalidInput: malformed or out-of-range field
- NotFound: referenced entity does not exist
- ConflictError: uniqueness violation or restricted deletion
- InvalidStateTransition: lifecycle transition not permitted

Each error carries structured detail so the transport layer can build
its own response without parsing messages.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all errors raised by the domain core"""

    kind = 'domain_error'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def details(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Kind, message and structured detail for the caller"""
        return {
            'error': self.kind,
            'message': self.message,
            **self.details(),
        }


class InvalidInput(DomainError):
    """A field is missing, malformed or outside its allowed range"""

    kind = 'invalid_input'

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.reason = message

    def details(self) -> dict[str, Any]:
        return {'field': self.field}


class NotFound(DomainError):
    """A referenced Customer, Booking or Package does not exist"""

    kind = 'not_found'

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id

    def details(self) -> dict[str, Any]:
        return {'entity': self.entity, 'id': self.entity_id}


class ConflictError(DomainError):
    """Uniqueness violation, duplicate membership or blocked deletion"""

    kind = 'conflict'

    def __init__(
        self,
        message: str,
        entity: str | None = None,
        entity_id: Any = None,
        field: str | None = None,
    ):
        super().__init__(message)
        self.entity = entity
        self.entity_id = entity_id
        self.field = field

    def details(self) -> dict[str, Any]:
        detail = {}
        if self.entity is not None:
            detail['entity'] = self.entity
        if self.entity_id is not None:
            detail['id'] = self.entity_id
        if self.field is not None:
            detail['field'] = self.field
        return detail


class InvalidStateTransition(DomainError):
    """Requested lifecycle action is not allowed from the current status"""

    kind = 'invalid_state_transition'

    def __init__(self, current: Any, action: Any, entity_id: Any = None):
        current_value = getattr(current, 'value', current)
        action_value = getattr(action, 'value', action)
        super().__init__(
            f"Cannot {action_value} booking in status {current_value}"
        )
        self.current = current
        self.action = action
        self.entity_id = entity_id

    def details(self) -> dict[str, Any]:
        detail = {
            'current_status': getattr(self.current, 'value', self.current),
            'action': getattr(self.action, 'value', self.action),
        }
        if self.entity_id is not None:
            detail['id'] = self.entity_id
        return detail
