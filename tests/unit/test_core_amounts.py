import math
from decimal import Decimal

import pytest

from warp_amounts.core.amounts import (
    WarpRouteAmountParts,
    extract_amount_parts,
    parse_scale,
    _floor_div,
)
from warp_amounts.core.constants import MAX_SAFE_INTEGER
from warp_amounts.core.decimals import TokenDecimalsConfig
from warp_amounts.core.exc import AmountDomainError


# -----------------------------
# parse_scale
# -----------------------------

@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, None),
        (10, 10),
        (1, 1),
        ("1000", 1000),
        (" 42 ", 42),
        ("100000000000000000000000000000", 10 ** 29),
        (10.0, 10),
        (Decimal("1000"), 1000),
        (MAX_SAFE_INTEGER, MAX_SAFE_INTEGER),
        ("+7", 7),
        ("0x10", 16),
        ("0XfF", 255),
        ("0o17", 15),
        ("0b101", 5),
    ],
)
def test_parse_scale_valid(raw, expected):
    print(f"[parse_scale-valid] {raw!r} -> expect {expected!r}")
    assert parse_scale(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        0,
        -10,
        1.5,
        "0",
        "-5",
        "abc",
        "",
        "1.5",
        "1_000",
        "\u0661\u0662\u0663",
        "-0x10",
        "0x",
        "1 000",
        "   ",
        "1e3",
        math.inf,
        math.nan,
        Decimal("NaN"),
        Decimal("2.5"),
        MAX_SAFE_INTEGER + 1,
        float(2 ** 60),
        True,
        [10],
    ],
)
def test_parse_scale_invalid_is_none(raw):
    print(f"[parse_scale-invalid] {raw!r} -> expect None (no error)")
    assert parse_scale(raw) is None


def test_string_scale_is_unbounded():
    print("[parse_scale-bigstr] string scale above 2**53 stays valid (arbitrary precision)")
    assert parse_scale(str(MAX_SAFE_INTEGER + 1)) == MAX_SAFE_INTEGER + 1


def test_very_long_string_scale():
    print("[parse_scale-5000digits] '1' + 5000 zeros -> 10**5000 (no int() digit limit)")
    assert parse_scale("1" + "0" * 5000) == 10 ** 5000
    parts = extract_amount_parts(10 ** 5001 + 3, {"decimals": 6, "scale": "1" + "0" * 5000})
    assert parts == WarpRouteAmountParts(10, 6)


@pytest.mark.parametrize("huge", [Decimal("1e1000000"), Decimal("1e20"), Decimal("9007199254740992.0"), 1e300])
def test_huge_numeric_scale_rejected_without_materialising(huge):
    print(f"[parse_scale-huge] {huge!r} above MAX_SAFE_INTEGER -> None, returned immediately")
    assert parse_scale(huge) is None
    assert extract_amount_parts(1_000_000, {"decimals": 6, "scale": huge}).amount == 1_000_000


# -----------------------------
# extract_amount_parts: canonical scenarios
# -----------------------------

def test_no_scale_is_identity():
    print("[extract-noscale] 1_000_000 with decimals=6 -> (1_000_000, 6)")
    assert extract_amount_parts(1_000_000, {"decimals": 6}) == WarpRouteAmountParts(1_000_000, 6)


def test_explicit_integer_scale():
    print("[extract-scale] 10**19 / 10 with decimals=18 -> (10**18, 18)")
    assert extract_amount_parts(10 ** 19, {"decimals": 18, "scale": 10}) == WarpRouteAmountParts(10 ** 18, 18)


def test_string_scale():
    print("[extract-strscale] 1_000_000_000 / '1000' with decimals=6 -> (1_000_000, 6)")
    assert extract_amount_parts(1_000_000_000, {"decimals": 6, "scale": "1000"}) == WarpRouteAmountParts(1_000_000, 6)


@pytest.mark.parametrize("config", [{}, None, TokenDecimalsConfig()])
def test_default_decimals_is_18(config):
    print(f"[extract-default] config={config!r} -> decimals 18")
    assert extract_amount_parts(1_000_000, config) == WarpRouteAmountParts(1_000_000, 18)


@pytest.mark.parametrize("bad_scale", [0, -10, 1.5, "abc", "-1", "0"])
def test_invalid_scale_matches_absent_scale(bad_scale):
    print(f"[extract-badscale] scale={bad_scale!r} -> same as no scale")
    with_bad = extract_amount_parts(1_000_000, {"decimals": 6, "scale": bad_scale})
    without = extract_amount_parts(1_000_000, {"decimals": 6})
    assert with_bad == without == WarpRouteAmountParts(1_000_000, 6)


def test_floor_division_drops_remainder():
    print("[extract-floor] 1_000_009 / 10 -> 100_000 (remainder discarded)")
    parts = extract_amount_parts(1_000_009, TokenDecimalsConfig(decimals=6, scale=10))
    assert parts.amount == 100_000
    assert parts.decimals == 6


def test_amount_smaller_than_scale_is_zero():
    print("[extract-dust] 9 / 10 -> 0")
    assert extract_amount_parts(9, {"decimals": 18, "scale": 10}).amount == 0


def test_uint256_max_amount_stays_exact():
    print("[extract-uint256] 2**256-1 / 10 is exact big-int floor division")
    big = 2 ** 256 - 1
    parts = extract_amount_parts(big, {"decimals": 18, "scale": 10})
    assert parts.amount == big // 10
    assert isinstance(parts.amount, int)


def test_caller_scenarios():
    print("[extract-callers] Cosmos->EVM, EVM->Cosmos, normalised EVM and scaled routes")
    assert extract_amount_parts(1_020_000, {"decimals": 6}) == WarpRouteAmountParts(1_020_000, 6)
    assert extract_amount_parts(1_020_000_000_000_000_000, {"decimals": 18}) == WarpRouteAmountParts(1_020_000_000_000_000_000, 18)
    assert extract_amount_parts(10_200_000_000_000_000_000, {"decimals": 18, "scale": 10}) == WarpRouteAmountParts(1_020_000_000_000_000_000, 18)


# -----------------------------
# Domain guards (message amount only)
# -----------------------------

@pytest.mark.parametrize("bad", [-1, 1.0, "100", None, True])
def test_bad_message_amount_rejected(bad):
    print(f"[extract-badamount] message_amount={bad!r} -> expect AmountDomainError")
    with pytest.raises(AmountDomainError):
        extract_amount_parts(bad, {"decimals": 6})


def test_floor_div_preconditions():
    assert _floor_div(7, 2) == 3
    with pytest.raises(AmountDomainError):
        _floor_div(-1, 2)
    with pytest.raises(AmountDomainError):
        _floor_div(1, 0)
