"""Promotion driver: issue become-master, then confirm it with a status read."""

from shadowpromote.constants import (
    DEFAULT_REQUEST_ID,
    MATOCL_ADMIN_BECOME_MASTER,
    MATOCL_METADATASERVER_STATUS,
)
from shadowpromote.errors import ProtocolError
from shadowpromote.errors_catalog import describe_status, operator_message
from shadowpromote.models import (
    MetadataServerStatus,
    OutcomeKind,
    PromotionOutcome,
    Role,
    StatusCode,
)
from shadowpromote.services import messages


class PromotionDriver:
    """Drives the two ordered exchanges over an authenticated connection."""

    def __init__(self, logger, console):
        self.logger = logger
        self.console = console

    def become_master(self, connection) -> int:
        payload = connection.send_and_receive(
            messages.build_become_master(),
            MATOCL_ADMIN_BECOME_MASTER,
        )
        return messages.parse_status(payload, "become master")

    def query_status(self, connection, request_id: int = DEFAULT_REQUEST_ID) -> MetadataServerStatus:
        payload = connection.send_and_receive(
            messages.build_metadataserver_status(request_id),
            MATOCL_METADATASERVER_STATUS,
        )
        server_status = messages.parse_metadataserver_status(payload)
        if server_status.request_id != request_id:
            raise ProtocolError(
                f"Status reply does not match request: sent id {request_id}, "
                f"got {server_status.request_id}."
            )
        return server_status

    def promote(self, connection, request_id: int = DEFAULT_REQUEST_ID) -> PromotionOutcome:
        self.console.print("[blue]Requesting promotion to master...[/blue]")
        status = self.become_master(connection)
        if status != StatusCode.OK:
            reason = describe_status(status)
            self.logger.debug("Promotion rejected with status %s (%s)", status, reason)
            return PromotionOutcome(
                kind=OutcomeKind.COMMAND_REJECTED,
                message=reason,
                details={"status": int(status)},
            )

        # A successful reply is not enough; the role read back decides.
        self.console.print("[blue]Verifying metadata server role...[/blue]")
        server_status = self.query_status(connection, request_id)
        details = {
            "role": server_status.role.name,
            "metadata_version": server_status.metadata_version,
        }
        if server_status.role is not Role.MASTER:
            self.logger.debug(
                "Metadata server reports role %s at metadata version %s",
                server_status.role.name,
                server_status.metadata_version,
            )
            return PromotionOutcome(
                kind=OutcomeKind.VERIFICATION_MISMATCH,
                message=operator_message("promotion_unverified"),
                details=details,
            )

        self.logger.info(
            "Metadata server is now master (metadata version %s).",
            server_status.metadata_version,
        )
        return PromotionOutcome(kind=OutcomeKind.CONFIRMED, details=details)
