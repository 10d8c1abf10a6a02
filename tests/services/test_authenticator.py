import hashlib
import struct

import pytest

from shadowpromote.constants import (
    CLTOMA_ADMIN_REGISTER_CHALLENGE,
    CLTOMA_ADMIN_REGISTER_RESPONSE,
    MATOCL_ADMIN_REGISTER_CHALLENGE,
    MATOCL_ADMIN_REGISTER_RESPONSE,
)
from shadowpromote.errors import TransportError
from shadowpromote.models import StatusCode
from shadowpromote.services.authenticator import AuthenticatorService

CHALLENGE = bytes(range(100, 132))


class DummyLogger:
    def debug(self, *_args, **_kwargs):
        return None


class FakeConnection:
    host = "10.0.0.5"
    port = 9420

    def __init__(self, replies):
        self.replies = replies
        self.requests = []

    def send_and_receive(self, request, expected_type):
        self.requests.append(request)
        reply = self.replies[expected_type]
        if isinstance(reply, Exception):
            raise reply
        return reply


def _replies(status):
    return {
        MATOCL_ADMIN_REGISTER_CHALLENGE: struct.pack(">I", 0) + CHALLENGE,
        MATOCL_ADMIN_REGISTER_RESPONSE: struct.pack(">IB", 0, status),
    }


def test_register_sends_digest_and_returns_ok():
    connection = FakeConnection(_replies(StatusCode.OK))

    status = AuthenticatorService(logger=DummyLogger()).register(connection, "secret")

    assert status == StatusCode.OK
    challenge_request, response_request = connection.requests
    assert struct.unpack(">I", challenge_request[:4])[0] == CLTOMA_ADMIN_REGISTER_CHALLENGE
    assert struct.unpack(">I", response_request[:4])[0] == CLTOMA_ADMIN_REGISTER_RESPONSE
    expected_digest = hashlib.md5(CHALLENGE[:16] + b"secret" + CHALLENGE[16:]).digest()
    assert response_request.endswith(expected_digest)
    assert all(b"secret" not in request for request in connection.requests)


def test_register_returns_rejection_status():
    connection = FakeConnection(_replies(StatusCode.BADPASSWORD))

    status = AuthenticatorService(logger=DummyLogger()).register(connection, "wrong")

    assert status == StatusCode.BADPASSWORD


def test_register_propagates_transport_errors():
    connection = FakeConnection(
        {MATOCL_ADMIN_REGISTER_CHALLENGE: TransportError("Connection closed by server.")}
    )

    with pytest.raises(TransportError):
        AuthenticatorService(logger=DummyLogger()).register(connection, "secret")

    assert len(connection.requests) == 1
