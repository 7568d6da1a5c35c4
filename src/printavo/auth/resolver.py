"""Resolve Printavo credentials from explicit values, the environment or a .env file.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable (``PRINTAVO_EMAIL`` / ``PRINTAVO_TOKEN`` by default)
3. .env file (python-dotenv, loaded into the environment without overriding it)
4. Default value

Example:
    ```python
    from printavo import Printavo
    from printavo.auth import CredentialResolver

    credential = CredentialResolver().resolve_token_auth(required=True)
    client = Printavo.builder().credential(credential).build()
    ```

Security Considerations:
    - Credential values are never logged; only their source is
    - Thread-safe dotenv loading with lock
"""

import logging
import os
from threading import Lock

from dotenv import load_dotenv

from printavo.auth.credentials import Credential
from printavo.auth.exceptions import CredentialNotFoundError

logger = logging.getLogger(__name__)

EMAIL_ENV_VAR = "PRINTAVO_EMAIL"
TOKEN_ENV_VAR = "PRINTAVO_TOKEN"


class CredentialResolver:
    """Resolve credentials from multiple sources with priority ordering.

    Attributes:
        _dotenv_loaded: Whether the .env file has been loaded.
        _dotenv_lock: Thread lock for safe dotenv loading.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize credential resolver.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories for one.
            load_dotenv: Whether to load the .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path

        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                found = load_dotenv(dotenv_path=self._dotenv_path)
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
                found = False
            self._dotenv_loaded = True
            if found:
                logger.debug("Loaded .env file for credential resolution")

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Resolve a single value.

        Args:
            value: Explicit value; wins over every other source.
            env_var_name: Environment variable to check (includes values
                loaded from .env).
            default: Fallback when nothing else is set.
            required: Raise instead of returning None when unresolved.

        Returns:
            The resolved value, or None.

        Raises:
            CredentialNotFoundError: If required and not found.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            logger.debug(f"Resolved credential from {source}: ***")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_token_auth(
        self,
        *,
        email: str | None = None,
        token: str | None = None,
        email_env_var: str = EMAIL_ENV_VAR,
        token_env_var: str = TOKEN_ENV_VAR,
        required: bool = False,
    ) -> Credential:
        """Resolve an email/token pair into a credential.

        Returns `NoAuth` when neither half is configured and ``required`` is
        False. A half-configured pair is always an error.

        Raises:
            CredentialNotFoundError: If a required pair, or one half of a
                pair, cannot be resolved.
        """
        resolved_email = self.resolve(value=email, env_var_name=email_env_var)
        resolved_token = self.resolve(value=token, env_var_name=token_env_var)

        if resolved_email is None and resolved_token is None and not required:
            return Credential.none()

        if resolved_email is None:
            raise CredentialNotFoundError(
                f"Printavo email not found (checked env var: {email_env_var})", env_var_name=email_env_var
            )
        if resolved_token is None:
            raise CredentialNotFoundError(
                f"Printavo token not found (checked env var: {token_env_var})", env_var_name=token_env_var
            )

        return Credential.token(resolved_email, resolved_token)
