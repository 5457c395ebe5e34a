from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List

from .client import OwnershipSource


@dataclass(frozen=True)
class OwnerBalance:
    owner_address: str
    token_id: int
    balance: int


def parse_token_id(token_id: str) -> int:
    # Alchemy returns token ids as 0x-prefixed hex
    return int(token_id, 16)


def iter_owner_balances(owners: Iterable[Dict[str, Any]]) -> Iterator[OwnerBalance]:
    for owner in owners:
        address = owner["ownerAddress"]
        for token_balance in owner.get("tokenBalances", []):
            yield OwnerBalance(
                owner_address=address,
                token_id=parse_token_id(token_balance["tokenId"]),
                balance=int(token_balance["balance"]),
            )


def entries_for_token(
    balances: Iterable[OwnerBalance], token_id: int
) -> Dict[str, int]:
    """Owner -> count of `token_id` held, in the order owners were seen."""
    entries: Dict[str, int] = {}
    for rec in balances:
        if rec.token_id != token_id:
            continue
        # Duplicate records overwrite, they are never summed.
        entries[rec.owner_address] = rec.balance
    return {owner: count for owner, count in entries.items() if count > 0}


def get_entries_by_owner(
    source: OwnershipSource, contract_address: str, token_id: int
) -> Dict[str, int]:
    owners: List[Dict[str, Any]] = source.get_owners_for_contract(
        contract_address, with_token_balances=True
    )
    return entries_for_token(iter_owner_balances(owners), token_id)
