"""Demo: warp route amount resolution across route families.

Scenarios covered:
S1a) EVM→EVM, normalised route (USDC 6 → synthetic 18, wire 18)
S1b) EVM→EVM, equal decimals (wire = native, no normalisation visible)
S2a) Cosmos (CW20) → EVM: origin native decimals on the wire
S2b) EVM → Cosmos (CosmosIcs20 destination): origin native decimals
S3a) Explicit router scale (BSC scale=10)
S3b) String scale from loosely-typed config ("1000")
S4a) Malformed scale (0, negative, fractional, non-numeric) → scale 1
S5a) Registry YAML → lookup → transfer (SOL 9 → ethereum 18)

Output is the raw (amount, decimals) pair; presentation is left to callers.
"""
from __future__ import annotations

from typing import Callable, List, Optional
import argparse
import sys

from warp_amounts import (
    TokenDecimalsConfig,
    WarpTransfer,
    lookup_warp_token,
    parse_warp_route_config_yaml,
    resolve_warp_transfer,
)

RECIPIENT = 0x00000000000000000000000071C7656EC7AB88B098DEFB751B7401B5F6D8976F

# ---------- pretty printers ----------

def encode_body(amount: int, recipient: int = RECIPIENT) -> str:
    return "0x" + recipient.to_bytes(32, "big").hex() + amount.to_bytes(32, "big").hex()


def brief_token(cfg: Optional[TokenDecimalsConfig]) -> str:
    if cfg is None:
        return "(none)"
    parts = [f"{k}={v!r}" for k, v in vars(cfg).items() if v is not None]
    return ", ".join(parts) or "(empty)"


def print_result(title: str, wire_amount: int, origin, destination, res: WarpTransfer) -> None:
    print(f"\n=== {title} ===")
    print(f"- origin:      {brief_token(origin)}")
    print(f"- destination: {brief_token(destination)}")
    print(f"- wire amount: {wire_amount}")
    print(f"- resolved:    amount={res.amount}, decimals={res.decimals}")


def run_scenario(title: str, wire_amount: int, origin: TokenDecimalsConfig, destination: Optional[TokenDecimalsConfig] = None) -> None:
    res = resolve_warp_transfer(encode_body(wire_amount), origin, destination)
    print_result(title, wire_amount, origin, destination, res)


REGISTRY_YAML = """
SOL/solanamainnet-ethereum:
  tokens:
    - addressOrDenom: So11111111111111111111111111111111111111112
      chainName: solanamainnet
      decimals: 9
      symbol: SOL
      standard: SealevelHypNative
    - addressOrDenom: "0x3333333333333333333333333333333333333333"
      chainName: ethereum
      decimals: 18
      symbol: SOL
      standard: EvmHypSynthetic
"""


def run_registry_scenario(title: str, wire_amount: int) -> None:
    route_map = parse_warp_route_config_yaml(REGISTRY_YAML)
    origin = lookup_warp_token(route_map, "solanamainnet", "So11111111111111111111111111111111111111112")
    destination = lookup_warp_token(route_map, "ethereum", "0x3333333333333333333333333333333333333333")
    if origin is None or destination is None:
        print(f"\n=== {title} ===\nregistry lookup failed")
        return
    run_scenario(title, wire_amount, origin.to_decimals_config(), destination.to_decimals_config())


#
# -------- scenario registry helpers --------
class Scenario:
    def __init__(self, sid: str, fn: Callable[[], None]):
        self.sid = sid
        self.fn = fn

scenarios: List[Scenario] = []

def add(sid: str, fn: Callable[[], None]) -> None:
    scenarios.append(Scenario(sid, fn))

# ---------- run scenarios ----------
if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Warp route amount resolution demo")
    parser.add_argument("--only", type=str, default=None, help="Comma-separated scenario ids to run (e.g., S1a,S3a)")
    parser.add_argument("--skip", type=str, default=None, help="Comma-separated scenario ids to skip")
    args = parser.parse_args(sys.argv[1:])

    # --------------- Register scenarios ---------------
    evm_usdc = TokenDecimalsConfig(decimals=6, standard="EvmHypCollateral", wire_decimals=18)
    evm_synth = TokenDecimalsConfig(decimals=18, standard="EvmHypSynthetic", wire_decimals=18)
    add("S1a", lambda: run_scenario(
        "S1a) EVM→EVM normalised (1 USDC on an 18-wire route)",
        10 ** 18, evm_usdc, evm_synth,
    ))

    evm_usdc6 = TokenDecimalsConfig(decimals=6, standard="EvmHypCollateral", wire_decimals=6)
    add("S1b", lambda: run_scenario(
        "S1b) EVM→EVM equal decimals (1 USDC, wire 6)",
        1_000_000, evm_usdc6, TokenDecimalsConfig(decimals=6, standard="EvmHypSynthetic", wire_decimals=6),
    ))

    # S2a / S2b
    cw20 = TokenDecimalsConfig(decimals=6, standard="CW20", wire_decimals=18)
    add("S2a", lambda: run_scenario(
        "S2a) Cosmos CW20 → EVM (native 6 decimals on the wire)",
        1_020_000, cw20, evm_synth,
    ))
    add("S2b", lambda: run_scenario(
        "S2b) EVM → CosmosIcs20 (origin native 18 decimals on the wire)",
        1_020_000_000_000_000_000, evm_synth, TokenDecimalsConfig(standard="CosmosIcs20"),
    ))

    # S3a / S3b
    add("S3a", lambda: run_scenario(
        "S3a) Explicit router scale=10",
        10_200_000_000_000_000_000,
        TokenDecimalsConfig(decimals=18, scale=10, standard="EvmHypCollateral", wire_decimals=18),
        evm_synth,
    ))
    add("S3b", lambda: run_scenario(
        "S3b) String scale '1000'",
        1_000_000_000,
        TokenDecimalsConfig(decimals=6, scale="1000"),
    ))

    # S4a
    for i, bad in enumerate((0, -10, 1.5, "abc")):
        add(f"S4a.{i + 1}", lambda bad=bad: run_scenario(
            f"S4a) Malformed scale {bad!r} → treated as 1",
            1_000_000,
            TokenDecimalsConfig(decimals=6, scale=bad),
        ))

    # S5a
    add("S5a", lambda: run_registry_scenario(
        "S5a) Registry: SOL (9) → ethereum (18), wire decimals from route max",
        25 * 10 ** 17,
    ))

    # --------------- Filter & run ---------------
    only_set = None
    skip_set = None
    if args.only:
        only_set = set([s.strip() for s in args.only.split(',') if s.strip()])
    if args.skip:
        skip_set = set([s.strip() for s in args.skip.split(',') if s.strip()])

    for sc in scenarios:
        if only_set is not None and sc.sid not in only_set:
            continue
        if skip_set is not None and sc.sid in skip_set:
            continue
        sc.fn()
