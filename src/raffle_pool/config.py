from __future__ import annotations

import os
from dataclasses import dataclass
from dotenv import load_dotenv

from .project_constants import DEFAULT_NETWORK


@dataclass(frozen=True)
class Settings:
    api_key: str
    network: str = DEFAULT_NETWORK

    @property
    def nft_api_url(self) -> str:
        return f"https://{self.network}.g.alchemy.com/nft/v2/{self.api_key}"

    @staticmethod
    def from_env(
        api_key_override: str | None = None,
        network_override: str | None = None,
    ) -> "Settings":
        load_dotenv()

        network = (
            network_override
            or os.getenv("ALCHEMY_NETWORK", "").strip()
            or DEFAULT_NETWORK
        )

        # If user provides --api-key, trust it.
        if api_key_override:
            return Settings(api_key=api_key_override, network=network)

        # Older .env files use the frontend-style name.
        api_key = (
            os.getenv("ALCHEMY_API_KEY", "").strip()
            or os.getenv("NEXT_PUBLIC_ALCHEMY_API_KEY", "").strip()
        )
        if not api_key:
            raise RuntimeError(
                "Missing ALCHEMY_API_KEY. Put it in .env or export it."
            )

        return Settings(api_key=api_key, network=network)
