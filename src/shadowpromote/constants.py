"""Wire protocol constants for the metadata server admin channel."""

HEADER_SIZE = 8
VERSION_SIZE = 4
MAX_PACKET_SIZE = 1024 * 1024

MESSAGE_VERSION = 0

CHALLENGE_SIZE = 32
DIGEST_SIZE = 16

ANTOAN_NOP = 0

CLTOMA_ADMIN_REGISTER_CHALLENGE = 1500
MATOCL_ADMIN_REGISTER_CHALLENGE = 1501
CLTOMA_ADMIN_REGISTER_RESPONSE = 1502
MATOCL_ADMIN_REGISTER_RESPONSE = 1503
CLTOMA_ADMIN_BECOME_MASTER = 1504
MATOCL_ADMIN_BECOME_MASTER = 1505
CLTOMA_METADATASERVER_STATUS = 1452
MATOCL_METADATASERVER_STATUS = 1453

DEFAULT_REQUEST_ID = 1
