"""Sign-in against the fixed credential set, and the persisted current session."""

import logging

from pydantic import ValidationError as PydanticValidationError

from commodities.core.config import SESSION_KEY
from commodities.core.errors import AuthError
from commodities.core.security import CREDENTIALS, CredentialVerifier, PlaintextVerifier
from commodities.core.storage import PersistenceAdapter
from commodities.schemas.auth import Credential, Role, Session

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Holds the current Session and mirrors it to storage.

    Each successful login writes exactly one record and each logout removes it.
    """

    def __init__(
        self,
        storage: PersistenceAdapter,
        credentials: tuple[Credential, ...] = CREDENTIALS,
        verifier: CredentialVerifier | None = None,
        verify_on_restore: bool = False,
    ) -> None:
        self._storage = storage
        self._credentials = credentials
        self._verifier = verifier or PlaintextVerifier()
        self._verify_on_restore = verify_on_restore
        self._current: Session | None = None

    @property
    def current(self) -> Session | None:
        return self._current

    @property
    def role(self) -> Role | None:
        return self._current.role if self._current else None

    def login(self, username: str, password: str) -> Session:
        """
        Match (username, password) exactly against the credential set.

        On success the password-free Session is persisted, made current and returned.
        Raises AuthError (invalid_credentials) when nothing matches.
        """
        match = None
        for cred in self._credentials:
            if cred.username == username and self._verifier.verify(password, cred.secret):
                match = cred
                break
        if match is None:
            logger.warning("Login failed: username=%s", username)
            raise AuthError(AuthError.INVALID_CREDENTIALS)

        session = match.to_session()
        self._storage.write_json(SESSION_KEY, session.to_record())
        self._current = session
        logger.info("Login succeeded: username=%s role=%s", session.username, session.role)
        return session

    def logout(self) -> None:
        username = self._current.username if self._current else None
        self._storage.remove(SESSION_KEY)
        self._current = None
        logger.info("Logged out: username=%s", username)

    def restore_session(self) -> Session | None:
        """
        Load the persisted session at startup.

        The record is trusted as-is (no password re-check) unless verify_on_restore is set, in
        which case it must still match a credential by username and role. Records that fail to
        decode or verify are removed and treated as absent.
        """
        data = self._storage.read_json(SESSION_KEY)
        if data is None:
            self._current = None
            return None
        try:
            session = Session.model_validate(data)
        except PydanticValidationError:
            logger.warning("Persisted session is malformed; discarding.")
            self._discard()
            return None
        if self._verify_on_restore and not self._matches_credential(session):
            logger.warning(
                "Persisted session does not match a known credential: username=%s role=%s",
                session.username,
                session.role,
            )
            self._discard()
            return None
        self._current = session
        logger.info("Session restored: username=%s role=%s", session.username, session.role)
        return session

    def _matches_credential(self, session: Session) -> bool:
        return any(
            c.username == session.username and c.role == session.role
            for c in self._credentials
        )

    def _discard(self) -> None:
        self._storage.remove(SESSION_KEY)
        self._current = None
