"""Status descriptions and operator messages for shadowpromote."""

from typing import Dict

from .models import StatusCode

_STATUS_DESCRIPTIONS: Dict[int, str] = {
    StatusCode.OK: "OK",
    StatusCode.EPERM: "Operation not permitted",
    StatusCode.ENOTDIR: "Not a directory",
    StatusCode.ENOENT: "No such file or directory",
    StatusCode.EACCES: "Permission denied",
    StatusCode.EEXIST: "File exists",
    StatusCode.EINVAL: "Invalid argument",
    StatusCode.ENOTEMPTY: "Directory not empty",
    StatusCode.CHUNKLOST: "Chunk lost",
    StatusCode.OUTOFMEMORY: "Out of memory",
    StatusCode.INDEXTOOBIG: "Index too big",
    StatusCode.LOCKED: "Chunk locked",
    StatusCode.NOCHUNKSERVERS: "No chunk servers",
    StatusCode.NOCHUNK: "No such chunk",
    StatusCode.CHUNKBUSY: "Chunk is busy",
    StatusCode.REGISTER: "Incorrect register BLOB",
    StatusCode.WRONGVERSION: "None of chunk servers performed requested operation",
    StatusCode.CHUNKEXIST: "Chunk already exists",
    StatusCode.NOSPACE: "No space left",
    StatusCode.IO: "IO error",
    StatusCode.BNUMTOOBIG: "Incorrect block number",
    StatusCode.WRONGSIZE: "Incorrect size",
    StatusCode.WRONGOFFSET: "Incorrect offset",
    StatusCode.CANTCONNECT: "Can't connect",
    StatusCode.WRONGCHUNKID: "Incorrect chunk id",
    StatusCode.DISCONNECTED: "Disconnected",
    StatusCode.CRC: "CRC error",
    StatusCode.DELAYED: "Operation delayed",
    StatusCode.CANTCREATEPATH: "Can't create path",
    StatusCode.MISMATCH: "Data mismatch",
    StatusCode.EROFS: "Read-only file system",
    StatusCode.QUOTA: "Quota exceeded",
    StatusCode.BADSESSIONID: "Bad session id",
    StatusCode.NOPASSWORD: "Password is needed",
    StatusCode.BADPASSWORD: "Incorrect password",
    StatusCode.ENOATTR: "Attribute not found",
    StatusCode.ENOTSUP: "Operation not supported",
    StatusCode.ERANGE: "Result too large",
    StatusCode.NOTPOSSIBLE: "Operation not possible",
}

_OPERATOR_MESSAGES: Dict[str, str] = {
    "wrong_password": "Wrong password",
    "promotion_unverified": "Metadata server promotion failed for unknown reason",
    "cannot_communicate": "Cannot communicate with {target}: {reason}",
}


def describe_status(status: int) -> str:
    """Human readable text for a status byte, unknown codes included."""
    if status in _STATUS_DESCRIPTIONS:
        return _STATUS_DESCRIPTIONS[status]
    return f"Unknown error ({status})"


def operator_message(code: str, **kwargs: str) -> str:
    if code not in _OPERATOR_MESSAGES:
        raise KeyError(f"Unknown operator message key: {code}")
    return _OPERATOR_MESSAGES[code].format(**kwargs)
