from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Protocol

import httpx

from .config import Settings

log = logging.getLogger(__name__)


class OwnershipSource(Protocol):
    def get_owners_for_contract(
        self, contract_address: str, with_token_balances: bool = True
    ) -> List[Dict[str, Any]]:
        ...


class AlchemyNftClient:
    def __init__(
        self,
        settings: Settings,
        timeout_s: float = 60.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = settings.nft_api_url
        self.client = httpx.Client(timeout=timeout_s, transport=transport)

    def close(self) -> None:
        self.client.close()

    def _get(self, method: str, params: Dict[str, Any]) -> Dict[str, Any]:
        resp = self.client.get(f"{self.base_url}/{method}", params=params)
        if resp.is_error:
            # The request URL carries the API key, keep it out of the message.
            raise RuntimeError(
                f"Alchemy HTTP {resp.status_code} on {method}: {resp.text[:200]}"
            )
        data = resp.json()
        if "error" in data:
            raise RuntimeError(f"Alchemy error: {data['error']}")
        return data

    def get_owners_for_contract(
        self, contract_address: str, with_token_balances: bool = True
    ) -> List[Dict[str, Any]]:
        """
        Returns every owner record for the contract, following pageKey until exhausted.
        Each record looks like:
            {"ownerAddress": "0x...", "tokenBalances": [{"tokenId": "0x05", "balance": 1}]}
        """
        params: Dict[str, Any] = {
            "contractAddress": contract_address,
            "withTokenBalances": "true" if with_token_balances else "false",
        }
        owners: List[Dict[str, Any]] = []
        page = 0
        while True:
            data = self._get("getOwnersForCollection", params)
            batch = data.get("ownerAddresses", [])
            owners.extend(batch)
            page += 1
            log.debug("Page %d: %d owners", page, len(batch))

            page_key = data.get("pageKey")
            if not page_key:
                break
            params["pageKey"] = page_key
        return owners
