import hashlib
import struct

import pytest

from shadowpromote.constants import CLTOMA_METADATASERVER_STATUS
from shadowpromote.errors import ProtocolError
from shadowpromote.models import Role
from shadowpromote.services import messages


def test_challenge_digest_wraps_password_with_challenge_halves():
    challenge = bytes(range(32))

    digest = messages.challenge_digest(challenge, "secret")

    expected = hashlib.md5(challenge[:16] + b"secret" + challenge[16:]).digest()
    assert digest == expected
    assert b"secret" not in messages.build_register_response(digest)


def test_challenge_digest_rejects_short_challenge():
    with pytest.raises(ProtocolError, match="32 bytes"):
        messages.challenge_digest(b"short", "secret")


def test_build_metadataserver_status_carries_request_id():
    packet = messages.build_metadataserver_status(7)

    message_type, length = struct.unpack(">II", packet[:8])
    assert message_type == CLTOMA_METADATASERVER_STATUS
    assert length == 8
    assert struct.unpack(">II", packet[8:]) == (0, 7)


def test_parse_metadataserver_status_maps_unknown_role():
    payload = struct.pack(">IIBQ", 0, 3, 42, 1234)

    status = messages.parse_metadataserver_status(payload)

    assert status.request_id == 3
    assert status.role is Role.UNKNOWN
    assert status.metadata_version == 1234


def test_parse_status_rejects_unexpected_version():
    with pytest.raises(ProtocolError, match="version"):
        messages.parse_status(struct.pack(">IB", 1, 0), "become master")


def test_parse_status_rejects_truncated_payload():
    with pytest.raises(ProtocolError, match="Truncated"):
        messages.parse_status(b"\x00\x00", "become master")
