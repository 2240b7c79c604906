"""Chain priority configuration.

Display priority per chain: higher values are listed first. Chains without an
entry fall back to MIN_PRIORITY. Never hardcode priorities in the normalizer;
callers pass a table explicitly.
"""

MIN_PRIORITY = -99

DEFAULT_CHAIN_PRIORITIES: dict[str, int] = {
    "Osmosis": 100,
    "Ethereum": 50,
    "Arbitrum": 30,
    "Zilliqa": 20,
    "Neo": 20,
}
