"""Credential types attached to outgoing Printavo requests.

Printavo authenticates with long-lived tokens passed as query parameters
(``email=<email>&token=<token>``). A client holds exactly one credential for
its whole lifetime:

- `NoAuth`: requests are sent unchanged
- `TokenAuth`: every request carries one ``email`` and one ``token`` parameter

Example:
    ```python
    from printavo.auth import Credential

    credential = Credential.token("ops@example.com", "s3cr3t")
    print(credential)  # TokenAuth(email='ops@example.com', token=SecretStr('**********'))
    ```
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from pydantic import SecretStr

EMAIL_PARAM = "email"
TOKEN_PARAM = "token"


class Credential(ABC):
    """Base class for authentication material.

    Use the `none()` and `token()` constructors rather than instantiating
    subclasses directly.
    """

    @staticmethod
    def none() -> "NoAuth":
        """Credential that attaches nothing."""
        return NoAuth()

    @staticmethod
    def token(email: str, token: str | SecretStr) -> "TokenAuth":
        """Credential for Printavo's long-lived token authentication."""
        if not isinstance(token, SecretStr):
            token = SecretStr(token)
        return TokenAuth(email=email, token=token)

    @property
    def is_authenticated(self) -> bool:
        return False

    @abstractmethod
    def query_params(self) -> list[tuple[str, str]]:
        """Query parameters to append to a request.

        This is the only place where secret material leaves the credential.
        """


@dataclass(frozen=True)
class NoAuth(Credential):
    """No authentication."""

    def query_params(self) -> list[tuple[str, str]]:
        return []


@dataclass(frozen=True)
class TokenAuth(Credential):
    """Email + token authentication.

    Attributes:
        email: Account email, sent as the ``email`` query parameter.
        token: API token, redacted in ``repr()`` and ``str()``.
    """

    email: str
    # field() keeps the inherited Credential.token constructor from becoming the default.
    token: SecretStr = field()

    @property
    def is_authenticated(self) -> bool:
        return True

    def query_params(self) -> list[tuple[str, str]]:
        return [(EMAIL_PARAM, self.email), (TOKEN_PARAM, self.token.get_secret_value())]
