"""Challenge/response authentication against a metadata server."""

from shadowpromote.constants import MATOCL_ADMIN_REGISTER_CHALLENGE, MATOCL_ADMIN_REGISTER_RESPONSE
from shadowpromote.errors_catalog import describe_status
from shadowpromote.services import messages


class AuthenticatorService:
    """Registers an admin session; the password itself never leaves the process."""

    def __init__(self, logger):
        self.logger = logger

    def register(self, connection, password: str) -> int:
        self.logger.debug("Requesting admin challenge from %s:%s", connection.host, connection.port)
        payload = connection.send_and_receive(
            messages.build_register_challenge(),
            MATOCL_ADMIN_REGISTER_CHALLENGE,
        )
        challenge = messages.parse_register_challenge(payload)

        payload = connection.send_and_receive(
            messages.build_register_response(messages.challenge_digest(challenge, password)),
            MATOCL_ADMIN_REGISTER_RESPONSE,
        )
        status = messages.parse_status(payload, "register response")
        self.logger.debug("Admin registration status: %s", describe_status(status))
        return status
