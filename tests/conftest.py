from __future__ import annotations

from typing import Any, Dict, List


class FakeSource:
    def __init__(self, owners: List[Dict[str, Any]] | None = None, error: Exception | None = None) -> None:
        self.owners = owners or []
        self.error = error
        self.calls: List[tuple] = []
        self.closed = False

    def get_owners_for_contract(self, contract_address: str, with_token_balances: bool = True):
        self.calls.append((contract_address, with_token_balances))
        if self.error is not None:
            raise self.error
        return self.owners

    def close(self) -> None:
        self.closed = True


def owner(address: str, *balances: tuple) -> Dict[str, Any]:
    return {
        "ownerAddress": address,
        "tokenBalances": [{"tokenId": t, "balance": b} for t, b in balances],
    }
