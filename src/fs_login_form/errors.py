"""Domain errors raised by authentication gateways."""


class DomainError(Exception):
    """Base class for errors surfaced to the user as the form's main error."""

    default_message = "Algo de errado aconteceu. Tente novamente em breve."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidCredentialsError(DomainError):
    """The gateway rejected the email/password pair."""

    default_message = "Credenciais inválidas"


class UnexpectedError(DomainError):
    """Any other gateway failure, transport errors included."""
