"""Points store errors

Raised by the repository layer when the store rejects an operation.
Use cases translate these into Result errors.
"""


class PointsStoreError(Exception):
    """Base class for points store failures"""


class AccountNotFoundError(PointsStoreError):
    def __init__(self, user_id: str):
        super().__init__(f"Points account not found for user {user_id}")
        self.user_id = user_id


class InsufficientPointsError(PointsStoreError):
    def __init__(self, user_id: str, required: int, available: int):
        super().__init__(
            f"Insufficient points. Required: {required}, Available: {available}"
        )
        self.user_id = user_id
        self.required = required
        self.available = available
