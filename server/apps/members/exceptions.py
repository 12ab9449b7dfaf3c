"""Exceptions for members app."""


class IdentityProviderError(Exception):
    """Raised when the member directory cannot be reached or understood."""


class UnitMismatchError(Exception):
    """Raised when a member belongs to another home unit."""

    def __init__(self, unit_id: int | None, allowed_unit_id: int) -> None:
        """Initialize UnitMismatchError.

        Args:
            unit_id: Home unit reported by the directory.
            allowed_unit_id: Only home unit allowed to sign in.
        """
        self.unit_id = unit_id
        self.allowed_unit_id = allowed_unit_id
        super().__init__(
            f'Home unit {unit_id} is not allowed (expected {allowed_unit_id})',
        )


class MemberValidationError(Exception):
    """Raised when a directory profile does not make a valid member."""

    def __init__(self, email: str) -> None:
        """Initialize MemberValidationError.

        Args:
            email: E-mail address of the rejected profile.
        """
        self.email = email
        super().__init__(f'Member profile failed validation: {email!r}')
