import logging
from typing import Optional

from rich.console import Console

from .constants import DEFAULT_REQUEST_ID
from .errors import PromoteError, TransportError
from .errors_catalog import operator_message
from .models import OutcomeKind, PromotionOutcome, StatusCode, Target
from .services.authenticator import AuthenticatorService
from .services.connection import ServerConnection
from .services.credentials import CredentialSource
from .services.promotion import PromotionDriver

console = Console()
logger = logging.getLogger("shadowpromote")


class ShadowPromoter:
    """Authenticates to a shadow metadata server, promotes it and verifies the result."""

    def __init__(
        self,
        target: Target,
        credential_source: Optional[CredentialSource] = None,
        timeout: Optional[float] = None,
        request_id: int = DEFAULT_REQUEST_ID,
        connection_factory=ServerConnection,
    ):
        self.target = target
        self.credential_source = credential_source or CredentialSource()
        self.timeout = self._normalize_timeout(timeout)
        self.request_id = self._normalize_request_id(request_id)
        self.connection_factory = connection_factory

        self.authenticator = AuthenticatorService(logger=logger)
        self.promotion_driver = PromotionDriver(logger=logger, console=console)

    @staticmethod
    def _normalize_timeout(value) -> Optional[float]:
        if value is None:
            return None
        try:
            timeout = float(value)
        except (TypeError, ValueError) as exc:
            raise PromoteError(f"timeout must be a number of seconds, got {value!r}.") from exc

        if timeout <= 0:
            raise PromoteError("timeout must be greater than zero.")
        return timeout

    @staticmethod
    def _normalize_request_id(value) -> int:
        try:
            request_id = int(value)
        except (TypeError, ValueError) as exc:
            raise PromoteError(f"request_id must be an integer, got {value!r}.") from exc

        if not 0 <= request_id <= 0xFFFFFFFF:
            raise PromoteError("request_id must fit in an unsigned 32-bit integer.")
        return request_id

    def _open_connection(self):
        return self.connection_factory(
            self.target.host,
            self.target.port,
            timeout=self.timeout,
            logger=logger,
        )

    def run(self) -> PromotionOutcome:
        password = self.credential_source.get()

        logger.info("Promoting metadata server %s", self.target)
        try:
            with self._open_connection() as connection:
                console.print(f"[blue]Authenticating to {self.target}...[/blue]")
                status = self.authenticator.register(connection, password)
                del password
                if status != StatusCode.OK:
                    return PromotionOutcome(
                        kind=OutcomeKind.AUTH_FAILED,
                        message=operator_message("wrong_password"),
                        details={"status": int(status)},
                    )

                return self.promotion_driver.promote(connection, self.request_id)

        except TransportError as exc:
            logger.debug("Transport failure talking to %s: %s", self.target, exc)
            return PromotionOutcome(
                kind=OutcomeKind.TRANSPORT_FAILED,
                message=operator_message(
                    "cannot_communicate",
                    target=str(self.target),
                    reason=str(exc),
                ),
            )
