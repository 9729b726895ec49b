"""Unit tests for JWTCodec."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from myhome_auth import (
    AppJwt,
    InvalidTokenError,
    JWTCodec,
    TokenExpiredError,
    WeakSecretError,
)
from tests.shared.fakes import TEST_SECRET

T0 = datetime(2030, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestEncodeDecode:
    """Tests for the encode/decode round trip."""

    def setup_method(self):
        self.codec = JWTCodec()
        self.claim = AppJwt(user_id="user-1", expiration=T0 + timedelta(hours=1))

    def test_round_trip_returns_equal_claim(self):
        token = self.codec.encode(self.claim, TEST_SECRET)

        assert self.codec.decode(token, TEST_SECRET, now=T0) == self.claim

    def test_token_is_compact_hs512_jws(self):
        token = self.codec.encode(self.claim, TEST_SECRET)

        assert token.count(".") == 2
        assert jwt.get_unverified_header(token)["alg"] == "HS512"

    def test_claims_are_sub_and_integer_exp(self):
        token = self.codec.encode(self.claim, TEST_SECRET)

        payload = jwt.decode(token, options={"verify_signature": False})
        assert payload == {"sub": "user-1", "exp": int(self.claim.expiration.timestamp())}

    def test_accepts_bytes_secret(self):
        secret = TEST_SECRET.encode()
        token = self.codec.encode(self.claim, secret)

        assert self.codec.decode(token, secret, now=T0).user_id == "user-1"

    def test_sub_second_expiration_is_truncated(self):
        claim = AppJwt(user_id="user-1", expiration=T0.replace(microsecond=999_999))
        token = self.codec.encode(claim, TEST_SECRET)

        decoded = self.codec.decode(token, TEST_SECRET, now=T0 - timedelta(seconds=1))
        assert decoded.expiration == T0
        assert decoded == claim


class TestDecodeFailures:
    """Tests for rejected tokens."""

    def setup_method(self):
        self.codec = JWTCodec()
        self.claim = AppJwt(user_id="user-1", expiration=T0 + timedelta(hours=1))
        self.token = self.codec.encode(self.claim, TEST_SECRET)

    def test_wrong_secret_raises_invalid_token(self):
        other_secret = TEST_SECRET[::-1]

        with pytest.raises(InvalidTokenError):
            self.codec.decode(self.token, other_secret, now=T0)

    def test_tampered_payload_raises_invalid_token(self):
        header, _, signature = self.token.split(".")
        forged_payload = jwt.utils.base64url_encode(
            b'{"sub":"someone-else","exp":1893499200}',
        ).decode()

        with pytest.raises(InvalidTokenError):
            self.codec.decode(f"{header}.{forged_payload}.{signature}", TEST_SECRET, now=T0)

    def test_tampered_signature_raises_invalid_token(self):
        header, payload, signature = self.token.split(".")
        first = "A" if signature[0] != "A" else "B"
        forged = f"{header}.{payload}.{first}{signature[1:]}"

        with pytest.raises(InvalidTokenError):
            self.codec.decode(forged, TEST_SECRET, now=T0)

    @pytest.mark.parametrize("garbage", ["", "not-a-token", "a.b.c", "a.b"])
    def test_malformed_token_raises_invalid_token(self, garbage):
        with pytest.raises(InvalidTokenError):
            self.codec.decode(garbage, TEST_SECRET, now=T0)

    def test_missing_sub_raises_invalid_token(self):
        token = jwt.encode({"exp": int(T0.timestamp()) + 60}, TEST_SECRET, algorithm="HS512")

        with pytest.raises(InvalidTokenError):
            self.codec.decode(token, TEST_SECRET, now=T0)

    def test_missing_exp_raises_invalid_token(self):
        token = jwt.encode({"sub": "user-1"}, TEST_SECRET, algorithm="HS512")

        with pytest.raises(InvalidTokenError):
            self.codec.decode(token, TEST_SECRET, now=T0)

    def test_other_algorithm_raises_invalid_token(self):
        token = jwt.encode(
            {"sub": "user-1", "exp": int(T0.timestamp()) + 60},
            TEST_SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            self.codec.decode(token, TEST_SECRET, now=T0)

    def test_expired_token_raises_token_expired(self):
        with pytest.raises(TokenExpiredError):
            self.codec.decode(self.token, TEST_SECRET, now=T0 + timedelta(hours=2))

    def test_expired_is_an_invalid_token(self):
        assert issubclass(TokenExpiredError, InvalidTokenError)

    def test_token_is_invalid_at_exact_expiration(self):
        with pytest.raises(TokenExpiredError):
            self.codec.decode(self.token, TEST_SECRET, now=self.claim.expiration)

    def test_token_is_valid_one_second_before_expiration(self):
        now = self.claim.expiration - timedelta(seconds=1)

        assert self.codec.decode(self.token, TEST_SECRET, now=now) == self.claim

    def test_decode_without_now_uses_current_time(self):
        past = AppJwt(
            user_id="user-1",
            expiration=datetime.now(tz=timezone.utc) - timedelta(minutes=1),
        )
        token = self.codec.encode(past, TEST_SECRET)

        with pytest.raises(TokenExpiredError):
            self.codec.decode(token, TEST_SECRET)


class TestSecretStrength:
    def test_short_secret_raises_weak_secret(self):
        claim = AppJwt(user_id="user-1", expiration=T0)

        with pytest.raises(WeakSecretError):
            JWTCodec().encode(claim, "x" * 63)

    def test_weak_secret_is_a_value_error(self):
        claim = AppJwt(user_id="user-1", expiration=T0)

        with pytest.raises(ValueError):
            JWTCodec().encode(claim, "short")

    def test_secret_length_is_counted_in_bytes(self):
        claim = AppJwt(user_id="user-1", expiration=T0)

        # 32 two-byte characters are 64 bytes
        token = JWTCodec().encode(claim, "ä" * 32)
        assert JWTCodec().decode(token, "ä" * 32, now=T0 - timedelta(seconds=1)) == claim


class TestOneHourTokenLifetime:
    """A token issued with a one hour lifetime, decoded over time."""

    def setup_method(self):
        self.codec = JWTCodec()
        claim = AppJwt(user_id="user-1", expiration=T0 + timedelta(hours=1))
        self.token = self.codec.encode(claim, TEST_SECRET)

    def test_decodes_after_thirty_minutes(self):
        claim = self.codec.decode(self.token, TEST_SECRET, now=T0 + timedelta(minutes=30))

        assert claim.user_id == "user-1"

    def test_expired_after_sixty_one_minutes(self):
        with pytest.raises(TokenExpiredError):
            self.codec.decode(self.token, TEST_SECRET, now=T0 + timedelta(minutes=61))
