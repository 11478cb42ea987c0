from __future__ import annotations

import pytest

from warp_amounts.core import TokenDecimalsConfig


# -----------------------------
# Test helpers (pure functions)
# -----------------------------


def encode_warp_body(recipient: int, amount: int, metadata: bytes = b"", *, prefix: str = "0x") -> str:
    """Build a hex warp body: bytes32 recipient + uint256 amount + metadata."""
    raw = recipient.to_bytes(32, "big") + amount.to_bytes(32, "big") + metadata
    return prefix + raw.hex()


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def evm_usdc() -> TokenDecimalsConfig:
    """6-decimal EVM collateral on a route whose widest token has 18 decimals."""
    return TokenDecimalsConfig(decimals=6, standard="EvmHypCollateral", wire_decimals=18)


@pytest.fixture()
def evm_synthetic() -> TokenDecimalsConfig:
    return TokenDecimalsConfig(decimals=18, standard="EvmHypSynthetic", wire_decimals=18)


@pytest.fixture()
def cosmos_cw20() -> TokenDecimalsConfig:
    return TokenDecimalsConfig(decimals=6, standard="CW20", wire_decimals=18)


@pytest.fixture()
def scaled_bsc() -> TokenDecimalsConfig:
    """Route with an explicit router scale (amounts multiplied by 10 before encoding)."""
    return TokenDecimalsConfig(decimals=18, scale=10, standard="EvmHypCollateral", wire_decimals=18)


@pytest.fixture()
def registry_yaml() -> str:
    return """
USDC/ethereum-neutron:
  tokens:
    - addressOrDenom: "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
      chainName: ethereum
      decimals: 6
      symbol: USDC
      name: USD Coin
      standard: EvmHypCollateral
      logoURI: /deployments/warp_routes/USDC/logo.svg
    - addressOrDenom: "neutron1ch7x3xgpnj62weyes8vfada35zff6z59kt2psqhnx9gjnt2ttqdqtva3pa"
      chainName: neutron
      decimals: 6
      symbol: USDC
      name: USD Coin
      standard: CwHypSynthetic
VRA/bsc-ethereum:
  tokens:
    - addressOrDenom: "0x1111111111111111111111111111111111111111"
      chainName: bsc
      decimals: 18
      symbol: VRA
      standard: EvmHypCollateral
      scale: 10
    - addressOrDenom: "0x2222222222222222222222222222222222222222"
      chainName: ethereum
      decimals: 18
      symbol: VRA
      scale: 1
      logoURI: https://example.org/vra.svg
SOL/solana-ethereum:
  tokens:
    - addressOrDenom: "So11111111111111111111111111111111111111112"
      chainName: solanamainnet
      decimals: 9
      symbol: SOL
      standard: SealevelHypNative
    - addressOrDenom: "0x3333333333333333333333333333333333333333"
      chainName: ethereum
      decimals: 18
      symbol: SOL
      standard: EvmHypSynthetic
    - chainName: ethereum
      decimals: 18
      symbol: BROKEN
EMPTY/route:
  description: no tokens list
"""


@pytest.fixture()
def warp_body():
    return encode_warp_body
