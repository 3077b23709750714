"""Keypair and Message Routes: end-to-end over HTTP.

Tests:
    - POST /keypair returns a fresh base58 pubkey and 64-byte secret in the envelope
    - a generated secret signs, and the signature verifies via /message/verify
    - wrong signature → 200 valid=false; malformed signature → 400
    - malformed / wrong-length secrets → 400 with "Invalid input" message
    - messages carrying lone surrogate escapes → 400, never 500
"""

import base64

import base58
import pytest


async def test_keypair_returns_envelope(client):
    res = await client.post("/keypair")
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert len(base58.b58decode(body["data"]["pubkey"])) == 32
    assert len(base58.b58decode(body["data"]["secret"])) == 64


async def test_keypair_is_fresh_each_call(client):
    first = (await client.post("/keypair")).json()["data"]
    second = (await client.post("/keypair")).json()["data"]
    assert first["secret"] != second["secret"]


async def test_sign_then_verify_round_trip(client):
    kp = (await client.post("/keypair")).json()["data"]

    res = await client.post(
        "/message/sign", json={"secret": kp["secret"], "message": "Hello, Solana!"},
    )
    assert res.status_code == 200
    signed = res.json()["data"]
    assert signed["public_key"] == kp["pubkey"]
    assert signed["message"] == "Hello, Solana!"
    assert len(base64.b64decode(signed["signature"])) == 64

    res = await client.post("/message/verify", json={
        "pubkey": kp["pubkey"],
        "signature": signed["signature"],
        "message": "Hello, Solana!",
    })
    assert res.status_code == 200
    assert res.json() == {
        "success": True,
        "data": {"valid": True, "message": "Hello, Solana!", "pubkey": kp["pubkey"]},
    }


async def test_verify_tampered_message_is_false_not_error(client):
    kp = (await client.post("/keypair")).json()["data"]
    signed = (await client.post(
        "/message/sign", json={"secret": kp["secret"], "message": "pay 1"},
    )).json()["data"]

    res = await client.post("/message/verify", json={
        "pubkey": kp["pubkey"], "signature": signed["signature"], "message": "pay 9",
    })
    assert res.status_code == 200
    assert res.json()["data"]["valid"] is False


@pytest.mark.parametrize("signature, error", [
    ("%%%not-base64%%%", "Invalid input: Invalid base64 signature"),
    (base64.b64encode(bytes(63)).decode(), "Invalid input: Invalid signature format"),
])
async def test_verify_malformed_signature_is_400(client, address, signature, error):
    res = await client.post("/message/verify", json={
        "pubkey": address, "signature": signature, "message": "m",
    })
    assert res.status_code == 400
    assert res.json() == {"success": False, "error": error}


async def test_verify_invalid_pubkey_is_400(client):
    res = await client.post("/message/verify", json={
        "pubkey": "O0O0", "signature": base64.b64encode(bytes(64)).decode(), "message": "m",
    })
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid input: Invalid public key: O0O0"


async def test_sign_rejects_non_base58_secret(client):
    res = await client.post("/message/sign", json={"secret": "l0l", "message": "m"})
    assert res.status_code == 400
    assert res.json() == {
        "success": False, "error": "Invalid input: Invalid base58 secret key",
    }


async def test_sign_rejects_short_secret(client):
    short = base58.b58encode(bytes([9]) * 32).decode()
    res = await client.post("/message/sign", json={"secret": short, "message": "m"})
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid input: Secret key must be 64 bytes, got 32"


async def test_sign_is_deterministic_over_http(client):
    kp = (await client.post("/keypair")).json()["data"]
    body = {"secret": kp["secret"], "message": "same"}
    first = (await client.post("/message/sign", json=body)).json()["data"]
    second = (await client.post("/message/sign", json=body)).json()["data"]
    assert first["signature"] == second["signature"]


async def test_sign_lone_surrogate_message_is_400(client):
    kp = (await client.post("/keypair")).json()["data"]
    raw = '{"secret": "%s", "message": "\\ud800"}' % kp["secret"]
    res = await client.post(
        "/message/sign", content=raw.encode(),
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {
        "success": False, "error": "Invalid input: Message must be valid UTF-8",
    }


async def test_verify_lone_surrogate_message_is_400(client, address):
    zero = base64.b64encode(bytes(64)).decode()
    raw = '{"pubkey": "%s", "signature": "%s", "message": "\\udfff"}' % (address, zero)
    res = await client.post(
        "/message/verify", content=raw.encode(),
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {
        "success": False, "error": "Invalid input: Message must be valid UTF-8",
    }
