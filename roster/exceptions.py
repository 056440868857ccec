"""
Exception classes for the roster service layer
"""


class ServiceError(Exception):
    """
    Base exception for all service-related errors
    """
    def __init__(self, message: str, code: str = None):
        super().__init__(message)
        self.message = message
        self.code = code or "SERVICE_ERROR"

    def to_dict(self):
        """Convert exception to dictionary for JSON responses"""
        return {
            'error': self.code,
            'message': self.message
        }


class ValidationError(ServiceError):
    """
    Raised when an incoming payload cannot be turned into a record
    """
    def __init__(self, message: str, field: str = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field

    def to_dict(self):
        result = super().to_dict()
        if self.field:
            result['field'] = self.field
        return result


class NotFoundError(ServiceError):
    """
    Raised when a write targets a record that is not stored
    """
    def __init__(self, resource: str, id: int = None):
        message = f"{resource} not found"
        if id is not None:
            message = f"{resource} with ID {id} not found"
        super().__init__(message, "NOT_FOUND")
        self.resource = resource
        self.id = id


class DuplicateError(ServiceError):
    """
    Raised when attempting to insert a record whose key is already stored
    """
    def __init__(self, resource: str, field: str = None, value: str = None):
        message = f"Duplicate {resource}"
        if field and value is not None:
            message = f"{resource} with {field}='{value}' already exists"
        super().__init__(message, "DUPLICATE_ERROR")
        self.resource = resource
        self.field = field
        self.value = value
