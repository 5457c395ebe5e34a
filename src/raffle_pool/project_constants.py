"""
Project-wide immutable parameters for the Every 30 Days raffle pool.

These values define who is entered into the pool.
Changing them changes eligibility and MUST be publicly announced.
"""

# E30D contract (ETH MAINNET)
CONTRACT_ADDRESS = "0x5ab44d97b0504ed90b8c5b8a325aa61376703c88"

# Token within the contract whose holders enter the pool
TOKEN_ID = 5

# Pool output, one address per unit held
POOL_FILE = "./participants"

# Alchemy network identifier
DEFAULT_NETWORK = "eth-mainnet"
