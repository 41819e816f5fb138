"""Helpers that drive the server under test through the request façade."""

from sdk_tck.helpers.account import create_account, delete_account, signers
from sdk_tck.helpers.keys import (
    generate_ecdsa_secp256k1_private_key,
    generate_ecdsa_secp256k1_public_key,
    generate_ed25519_private_key,
    generate_ed25519_public_key,
    generate_evm_address,
    generate_key,
    generate_key_list,
)
from sdk_tck.helpers.setup import reset, set_operator
from sdk_tck.helpers.token import create_ft_token, create_token, get_new_fungible_token_id, mint_token

__all__ = [
    "create_account",
    "delete_account",
    "signers",
    "generate_ecdsa_secp256k1_private_key",
    "generate_ecdsa_secp256k1_public_key",
    "generate_ed25519_private_key",
    "generate_ed25519_public_key",
    "generate_evm_address",
    "generate_key",
    "generate_key_list",
    "reset",
    "set_operator",
    "create_ft_token",
    "create_token",
    "get_new_fungible_token_id",
    "mint_token",
]
