"""Builders and parsers for the admin channel packets."""

import hashlib
import struct

from shadowpromote.constants import (
    CHALLENGE_SIZE,
    CLTOMA_ADMIN_BECOME_MASTER,
    CLTOMA_ADMIN_REGISTER_CHALLENGE,
    CLTOMA_ADMIN_REGISTER_RESPONSE,
    CLTOMA_METADATASERVER_STATUS,
    DIGEST_SIZE,
    MESSAGE_VERSION,
    VERSION_SIZE,
)
from shadowpromote.errors import ProtocolError
from shadowpromote.models import MetadataServerStatus, Role

_HEADER = struct.Struct(">II")
_VERSION = struct.Struct(">I")
_STATUS = struct.Struct(">B")
_REQUEST_ID = struct.Struct(">I")
_METADATASERVER_STATUS = struct.Struct(">IBQ")


def pack_packet(message_type: int, payload: bytes = b"") -> bytes:
    return _HEADER.pack(message_type, len(payload)) + payload


def unpack_header(header: bytes):
    return _HEADER.unpack(header)


def _versioned(message_type: int, body: bytes = b"") -> bytes:
    return pack_packet(message_type, _VERSION.pack(MESSAGE_VERSION) + body)


def _strip_version(payload: bytes, expected_size: int, name: str) -> bytes:
    if len(payload) < VERSION_SIZE:
        raise ProtocolError(f"Truncated {name} reply ({len(payload)} bytes).")

    (version,) = _VERSION.unpack_from(payload)
    if version != MESSAGE_VERSION:
        raise ProtocolError(f"Unsupported {name} reply version: {version}")

    body = payload[VERSION_SIZE:]
    if len(body) != expected_size:
        raise ProtocolError(
            f"Malformed {name} reply: expected {expected_size} bytes, got {len(body)}."
        )
    return body


def build_register_challenge() -> bytes:
    return _versioned(CLTOMA_ADMIN_REGISTER_CHALLENGE)


def parse_register_challenge(payload: bytes) -> bytes:
    return _strip_version(payload, CHALLENGE_SIZE, "register challenge")


def challenge_digest(challenge: bytes, password: str) -> bytes:
    """MD5 of the password wrapped by the two halves of the challenge."""
    if len(challenge) != CHALLENGE_SIZE:
        raise ProtocolError(f"Challenge must be {CHALLENGE_SIZE} bytes, got {len(challenge)}.")

    half = CHALLENGE_SIZE // 2
    md5 = hashlib.md5()
    md5.update(challenge[:half])
    md5.update(password.encode("utf-8"))
    md5.update(challenge[half:])
    return md5.digest()


def build_register_response(digest: bytes) -> bytes:
    if len(digest) != DIGEST_SIZE:
        raise ProtocolError(f"Digest must be {DIGEST_SIZE} bytes, got {len(digest)}.")
    return _versioned(CLTOMA_ADMIN_REGISTER_RESPONSE, digest)


def parse_status(payload: bytes, name: str) -> int:
    body = _strip_version(payload, _STATUS.size, name)
    (status,) = _STATUS.unpack(body)
    return status


def build_become_master() -> bytes:
    return _versioned(CLTOMA_ADMIN_BECOME_MASTER)


def build_metadataserver_status(request_id: int) -> bytes:
    return _versioned(CLTOMA_METADATASERVER_STATUS, _REQUEST_ID.pack(request_id))


def parse_metadataserver_status(payload: bytes) -> MetadataServerStatus:
    body = _strip_version(payload, _METADATASERVER_STATUS.size, "metadata server status")
    request_id, role, metadata_version = _METADATASERVER_STATUS.unpack(body)
    return MetadataServerStatus(
        request_id=request_id,
        role=Role.from_byte(role),
        metadata_version=metadata_version,
    )
