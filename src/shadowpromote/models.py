"""Shared domain models for shadowpromote."""

import enum
from dataclasses import dataclass, field
from typing import Any, Dict

from .errors import PromoteError


class StatusCode(enum.IntEnum):
    """Status byte returned by the metadata server for a single exchange."""

    OK = 0
    EPERM = 1
    ENOTDIR = 2
    ENOENT = 3
    EACCES = 4
    EEXIST = 5
    EINVAL = 6
    ENOTEMPTY = 7
    CHUNKLOST = 8
    OUTOFMEMORY = 9
    INDEXTOOBIG = 10
    LOCKED = 11
    NOCHUNKSERVERS = 12
    NOCHUNK = 13
    CHUNKBUSY = 14
    REGISTER = 15
    WRONGVERSION = 16
    CHUNKEXIST = 17
    NOSPACE = 18
    IO = 19
    BNUMTOOBIG = 20
    WRONGSIZE = 21
    WRONGOFFSET = 22
    CANTCONNECT = 23
    WRONGCHUNKID = 24
    DISCONNECTED = 25
    CRC = 26
    DELAYED = 27
    CANTCREATEPATH = 28
    MISMATCH = 29
    EROFS = 30
    QUOTA = 31
    BADSESSIONID = 32
    NOPASSWORD = 33
    BADPASSWORD = 34
    ENOATTR = 35
    ENOTSUP = 36
    ERANGE = 37
    NOTPOSSIBLE = 38


class Role(enum.IntEnum):
    """Metadata server role as reported by a status query."""

    UNKNOWN = 0
    MASTER = 1
    FOLLOWER = 2
    DISCONNECTED = 3

    @classmethod
    def from_byte(cls, value: int) -> "Role":
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class OutcomeKind(enum.Enum):
    AUTH_FAILED = "auth_failed"
    TRANSPORT_FAILED = "transport_failed"
    COMMAND_REJECTED = "command_rejected"
    VERIFICATION_MISMATCH = "verification_mismatch"
    CONFIRMED = "confirmed"


@dataclass(frozen=True)
class Target:
    """Address of the metadata server to promote."""

    host: str
    port: int

    @classmethod
    def parse(cls, host: str, port: str) -> "Target":
        clean_host = (host or "").strip()
        if not clean_host:
            raise PromoteError("Shadow host must not be empty.")

        try:
            port_number = int(str(port).strip())
        except ValueError as exc:
            raise PromoteError(f"Invalid shadow port: {port}") from exc

        if not 0 < port_number < 65536:
            raise PromoteError(f"Shadow port out of range (1-65535): {port_number}")
        return cls(host=clean_host, port=port_number)

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class MetadataServerStatus:
    request_id: int
    role: Role
    metadata_version: int


@dataclass(frozen=True)
class PromotionOutcome:
    """Final result of a promotion run, translated to exit codes by the CLI."""

    kind: OutcomeKind
    message: str = ""
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.kind is OutcomeKind.CONFIRMED

    @property
    def exit_code(self) -> int:
        return 0 if self.succeeded else 1
