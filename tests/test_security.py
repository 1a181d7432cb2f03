# =============================================================================
# tests/test_security.py - Password hashing and JWT helpers
# =============================================================================

from datetime import timezone

import pytest
from jose import JWTError

from crudhub.core.security import (
    REFRESH_TOKEN,
    create_access_token,
    create_refresh_token,
    create_token_pair,
    decode_token,
    get_password_hash,
    verify_password,
    verify_token,
)


def test_password_hash_round_trip():
    hashed = get_password_hash("s3cret-password")

    assert hashed != "s3cret-password"
    assert verify_password("s3cret-password", hashed)
    assert not verify_password("other-password", hashed)


def test_token_pair_claims():
    pair = create_token_pair("abc", "seller")

    access = decode_token(pair["access"])
    refresh = decode_token(pair["refresh"], REFRESH_TOKEN)

    assert (access["id"], access["type"], access["token_type"]) == ("abc", "seller", "access")
    assert refresh["token_type"] == "refresh"
    assert pair["refreshable_until"] > pair["expired_at"]


def test_token_type_is_enforced():
    pair = create_token_pair("abc", "member")

    with pytest.raises(JWTError):
        decode_token(pair["refresh"])
    assert verify_token(pair["refresh"]) is None


def test_tampered_token_is_rejected():
    header, _, signature = create_access_token("abc", "member").split(".")
    forged_payload = create_access_token("abc", "admin").split(".")[1]

    assert verify_token(".".join([header, forged_payload, signature])) is None


def _epoch(moment):
    return int(moment.replace(tzinfo=timezone.utc).timestamp())


def test_token_pair_expiries_match_claims():
    pair = create_token_pair("abc", "customer")

    assert decode_token(pair["access"])["exp"] == _epoch(pair["expired_at"])
    assert decode_token(pair["refresh"], REFRESH_TOKEN)["exp"] == _epoch(pair["refreshable_until"])


def test_refresh_token_defaults_to_refresh_lifetime():
    claims = decode_token(create_refresh_token("abc", "moderator"), REFRESH_TOKEN)

    assert claims["type"] == "moderator"
    assert claims["exp"] > decode_token(create_access_token("abc", "moderator"))["exp"]
