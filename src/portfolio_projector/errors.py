from typing import Optional


class ValidationError(ValueError):
    """Raised when projection inputs are outside their documented ranges.

    ``total`` carries the actual allocation sum when the failure is an
    allocation total that does not add up to 100.
    """

    def __init__(self, message: str, total: Optional[float] = None):
        super().__init__(message)
        self.total = total
