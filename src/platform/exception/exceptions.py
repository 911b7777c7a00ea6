class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


# =============================================================================
# Map ingestion / inventory synthesis errors
# =============================================================================


class ParseError(DomainError):
    """Map document has no embedded vector markup block"""

    def __init__(self, message: str = 'No <svg> tag found in file') -> None:
        super().__init__(message, 422)


class MatchError(NotFoundError):
    """No venue in the pool satisfied any match tier"""

    def __init__(self, candidate: str) -> None:
        self.candidate = candidate
        super().__init__(f'No matching venue found for "{candidate}"')


class ReconciliationConflict(ConflictError):
    """Would produce two sections sharing one svg path within a venue"""

    def __init__(self, *, venue_id: str, svg_path: str, section_name: str) -> None:
        self.venue_id = venue_id
        self.svg_path = svg_path
        self.section_name = section_name
        super().__init__(
            f'svg path "{svg_path}" is already linked in venue {venue_id}; '
            f'skipped section "{section_name}"'
        )


class SynthesisPreconditionError(DomainError):
    """Event has no sections or no price envelope to synthesize from"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 412)
