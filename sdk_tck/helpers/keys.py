"""Key material generated by the server under test (``generateKey``)."""

from __future__ import annotations

from typing import Any

from sdk_tck.rpc.request import json_rpc_request

ED25519_PRIVATE_KEY = "ed25519PrivateKey"
ED25519_PUBLIC_KEY = "ed25519PublicKey"
ECDSA_SECP256K1_PRIVATE_KEY = "ecdsaSecp256k1PrivateKey"
ECDSA_SECP256K1_PUBLIC_KEY = "ecdsaSecp256k1PublicKey"
KEY_LIST = "keyList"
THRESHOLD_KEY = "thresholdKey"
EVM_ADDRESS = "evmAddress"

FOUR_KEYS_KEY_LIST = {
    "type": KEY_LIST,
    "keys": [
        {"type": ED25519_PUBLIC_KEY},
        {"type": ED25519_PRIVATE_KEY},
        {"type": ECDSA_SECP256K1_PRIVATE_KEY},
        {"type": ECDSA_SECP256K1_PUBLIC_KEY},
    ],
}

TWO_LEVELS_NESTED_KEY_LIST = {
    "type": KEY_LIST,
    "keys": [
        {"type": KEY_LIST, "keys": [{"type": ECDSA_SECP256K1_PUBLIC_KEY}, {"type": ECDSA_SECP256K1_PRIVATE_KEY}]},
        {"type": KEY_LIST, "keys": [{"type": ECDSA_SECP256K1_PUBLIC_KEY}, {"type": ED25519_PUBLIC_KEY}]},
        {"type": KEY_LIST, "keys": [{"type": ED25519_PRIVATE_KEY}, {"type": ECDSA_SECP256K1_PUBLIC_KEY}]},
    ],
}

TWO_THRESHOLD_KEY = {
    "type": THRESHOLD_KEY,
    "threshold": 2,
    "keys": [
        {"type": ED25519_PRIVATE_KEY},
        {"type": ECDSA_SECP256K1_PUBLIC_KEY},
        {"type": ED25519_PUBLIC_KEY},
    ],
}

# Well-formed hex that is not a valid key.
INVALID_KEY = (
    "d4f2e7b1a3c8f9021de7bb39fd0c88e92a1f7c5e3b0029facdd4e138c7a499e290bd4f87c5ea11e0c4d7123bfe8a23"
    "d7ef3c5a98d9b004e7ff6d2e99a1bc5f3ce8a144bbce901f00f1d6a00e2fddc3ae93f1cd0016ed00a2c41e"
)
INVALID_ALIAS = "0xa74b6c63e4f5b497f48f77baaf96280e9e58c494"


async def generate_key(scope: Any, key_type: str, from_key: str | None = None) -> str:
    params: dict[str, Any] = {"type": key_type}
    if from_key is not None:
        params["fromKey"] = from_key
    return (await json_rpc_request(scope, "generateKey", params))["key"]


async def generate_ed25519_private_key(scope: Any) -> str:
    return await generate_key(scope, ED25519_PRIVATE_KEY)


async def generate_ecdsa_secp256k1_private_key(scope: Any) -> str:
    return await generate_key(scope, ECDSA_SECP256K1_PRIVATE_KEY)


async def generate_ed25519_public_key(scope: Any, from_key: str | None = None) -> str:
    return await generate_key(scope, ED25519_PUBLIC_KEY, from_key)


async def generate_ecdsa_secp256k1_public_key(scope: Any, from_key: str | None = None) -> str:
    return await generate_key(scope, ECDSA_SECP256K1_PUBLIC_KEY, from_key)


async def generate_evm_address(scope: Any, from_key: str | None = None) -> str:
    return await generate_key(scope, EVM_ADDRESS, from_key)


async def generate_key_list(scope: Any, params: dict[str, Any]) -> dict[str, Any]:
    """Generate a key list or threshold key.

    Returns the full reply: ``key`` holds the encoded list and
    ``privateKeys`` the private keys needed to sign for it.
    """
    return await json_rpc_request(scope, "generateKey", params)
