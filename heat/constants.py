"""
Wire Constants
==============

Fixed values shared with every other implementation of the HEAT mint
contract. They must match bit-for-bit; none of them is configurable.

Amounts are integers in base units:
- XFG amounts in atomic units (7 decimals)
- HEAT amounts in base units (18 decimals)

Version: 0.1.0
"""

# Source chain (Fuego / XFG)
XFG_DECIMALS = 7
XFG_ATOMIC_UNITS = 10**XFG_DECIMALS
XFG_MAX_SUPPLY = 80_000_088_000_008  # 8,000,008.8000008 XFG

# Destination ledger (HEAT)
HEAT_DECIMALS = 18
HEAT_PER_XFG = 10_000_000

# HEAT base units minted per XFG atomic unit burned
CONVERSION_RATE = HEAT_PER_XFG * 10**HEAT_DECIMALS // XFG_ATOMIC_UNITS

# Tiers: 0.8 XFG -> 8M HEAT, 800 XFG -> 8B HEAT
STANDARD_BURN_AMOUNT = 8_000_000
LARGE_BURN_AMOUNT = 8_000_000_000
STANDARD_MINT_AMOUNT = STANDARD_BURN_AMOUNT * CONVERSION_RATE
LARGE_MINT_AMOUNT = LARGE_BURN_AMOUNT * CONVERSION_RATE

# Backstop ceiling: the whole XFG supply burned and converted
MAX_SUPPLY = XFG_MAX_SUPPLY * CONVERSION_RATE

# Identifies the Fuego mainnet in proof public inputs
FUEGO_NETWORK_ID = 93385046440755750514194170694064996624

# Public inputs, in circuit order
PUBLIC_INPUT_COUNT = 4
NULLIFIER_INDEX = 0
COMMITMENT_INDEX = 1
RECIPIENT_HASH_INDEX = 2
NETWORK_ID_INDEX = 3

# Fee-collection split (percent of the collected total)
FEE_BURN_PERCENT = 8
FEE_TREASURY_PERCENT = 2
FEE_DISTRIBUTION_PERCENT = 90

# Upper bound (exclusive) for bytes32 / uint256 values
UINT256_LIMIT = 2**256

