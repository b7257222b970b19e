"""
Custom exceptions for the Eternal Quest goal tracker.
Provides specific exception types so the service layer can map failures
to typed error results.
"""


class EternalQuestException(Exception):
    """Base exception for the goal tracker"""
    pass


class ValidationException(EternalQuestException):
    """Raised when data validation fails"""
    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Validation error for {field}: {message}")


class GoalIndexOutOfRangeException(ValidationException):
    """Raised when a 1-based goal index does not address a goal"""
    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(
            "index", f"{index} is outside the valid range [1, {size}]"
        )


class QuestIndexOutOfRangeException(ValidationException):
    """Raised when a 1-based quest index does not address a quest"""
    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(
            "quest_index", f"{index} is outside the valid range [1, {size}]"
        )


class GoalFileNotFoundException(EternalQuestException):
    """Raised when the goal file to load does not exist"""
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No saved goals found at {path}")


class GoalFileIOException(EternalQuestException):
    """Raised when the goal file cannot be read or written"""
    def __init__(self, operation: str, path: str, details: str):
        self.operation = operation
        self.path = path
        self.details = details
        super().__init__(f"Goal file {operation} failed for {path}: {details}")


class UnknownVariantException(EternalQuestException):
    """Raised when a persisted record carries an unrecognized goal type"""
    def __init__(self, tag: str, line_number: int):
        self.tag = tag
        self.line_number = line_number
        super().__init__(f"Unknown goal type '{tag}' on line {line_number}")

