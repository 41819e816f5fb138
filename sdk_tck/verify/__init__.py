"""Dual-source verifiers: assert a fact on the consensus node and the mirror node."""

from sdk_tck.verify.account import (
    verify_account_deleted,
    verify_account_memo,
    verify_airdrop,
    verify_approved_for_all_allowance,
    verify_hbar_allowance,
    verify_hbar_balance,
    verify_nft_allowance,
    verify_nft_ownership,
    verify_no_token_associations,
    verify_token_allowance,
    verify_token_association,
    verify_token_balance,
)
from sdk_tck.verify.contract import (
    verify_contract_admin_key_null,
    verify_contract_bytecode,
    verify_contract_function_result,
    verify_contract_memo,
)
from sdk_tck.verify.dual_source import (
    DualSource,
    assert_source_value,
    get_default_sources,
    set_default_sources,
    verify_dual_source,
)
from sdk_tck.verify.fees import verify_token_fixed_fee, verify_token_fractional_fee, verify_token_royalty_fee
from sdk_tck.verify.file import verify_file_contents, verify_file_deleted, verify_file_keys, verify_file_memo
from sdk_tck.verify.keys import verify_key, verify_key_list, verify_null_key
from sdk_tck.verify.node import verify_node_in_address_book
from sdk_tck.verify.schedule import verify_schedule_exists
from sdk_tck.verify.token import (
    verify_fungible_token_burn,
    verify_non_fungible_token_burn,
    verify_token_deleted,
    verify_token_expiration_time,
    verify_token_field,
    verify_token_freeze_status,
    verify_token_kyc_status,
    verify_token_pause_status,
)
from sdk_tck.verify.topic import verify_topic_deleted, verify_topic_memo

__all__ = [
    "DualSource",
    "assert_source_value",
    "get_default_sources",
    "set_default_sources",
    "verify_dual_source",
    "verify_account_deleted",
    "verify_account_memo",
    "verify_airdrop",
    "verify_approved_for_all_allowance",
    "verify_hbar_allowance",
    "verify_hbar_balance",
    "verify_nft_allowance",
    "verify_nft_ownership",
    "verify_no_token_associations",
    "verify_token_allowance",
    "verify_token_association",
    "verify_token_balance",
    "verify_contract_admin_key_null",
    "verify_contract_bytecode",
    "verify_contract_function_result",
    "verify_contract_memo",
    "verify_file_contents",
    "verify_file_deleted",
    "verify_file_keys",
    "verify_file_memo",
    "verify_key",
    "verify_key_list",
    "verify_null_key",
    "verify_node_in_address_book",
    "verify_schedule_exists",
    "verify_fungible_token_burn",
    "verify_non_fungible_token_burn",
    "verify_token_fixed_fee",
    "verify_token_fractional_fee",
    "verify_token_royalty_fee",
    "verify_token_deleted",
    "verify_token_expiration_time",
    "verify_token_field",
    "verify_token_freeze_status",
    "verify_token_kyc_status",
    "verify_token_pause_status",
    "verify_topic_deleted",
    "verify_topic_memo",
]
