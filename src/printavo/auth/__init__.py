"""Authentication for the Printavo client.

Example:
    ```python
    from printavo.auth import Credential, CredentialResolver

    credential = Credential.token("ops@example.com", "s3cr3t")

    # or from PRINTAVO_EMAIL / PRINTAVO_TOKEN (environment or .env)
    credential = CredentialResolver().resolve_token_auth(required=True)
    ```
"""

from printavo.auth.credentials import Credential, NoAuth, TokenAuth
from printavo.auth.exceptions import CredentialError, CredentialNotFoundError
from printavo.auth.resolver import CredentialResolver

__all__ = [
    "Credential",
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "NoAuth",
    "TokenAuth",
]
