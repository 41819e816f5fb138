"""Read-side collaborators: consensus node queries and mirror node REST."""

from sdk_tck.services.consensus import ConsensusInfoClient, build_sdk_client
from sdk_tck.services.mirror import MirrorNodeClient, MirrorNodeError, decode_json

__all__ = [
    "ConsensusInfoClient",
    "MirrorNodeClient",
    "MirrorNodeError",
    "build_sdk_client",
    "decode_json",
]
