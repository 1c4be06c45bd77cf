"""
Test suite per EcDsaPublicKey e EcDsaKeyPair

Focus su:
- Serializzazione (blob e forma testuale) sul vettore nistp256
- Costruzione da group/point e casi di rifiuto
- Uguaglianza tra chiavi
- Firma / verifica per tutte le curve, SHA-1 come digest di default
- Distinzione tra firma non valida (False) e firma malformata (CryptoError)
"""

import base64

import pytest

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, ed25519
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature

from interfaces import PrivKey, PubKey
from sshkeys import (
    CryptoError,
    EcCurve,
    EcDsaKeyPair,
    EcDsaPublicKey,
    InvalidFormatError,
    UnsupportedCurveError,
)

from conftest import P256_POINT, P256_TEXT


MESSAGES = [b"a", b"hello world", b"\x00" * 64, bytes(range(256)) * 8]


class TestPublicKeySerialization:
    """Test blob e forma testuale"""

    def test_known_text_form(self, p256_public_key):
        assert str(p256_public_key) == P256_TEXT

    def test_known_blob(self, p256_public_key):
        encoded = P256_TEXT.split(" ", 1)[1]
        assert p256_public_key.blob() == base64.b64decode(encoded)

    def test_size_and_keytype(self, p256_public_key):
        assert p256_public_key.size() == 256
        assert p256_public_key.keytype() == "ecdsa-sha2-nistp256"
        assert p256_public_key.curve is EcCurve.NISTP256

    def test_size_per_curve(self, key_pair):
        public_key = key_pair.clone_public_key()
        assert public_key.size() in (256, 384, 521)
        assert public_key.size() == key_pair.curve.size
        assert public_key.keytype() == key_pair.curve.algorithm_name

    def test_text_form_prefix(self, key_pair):
        text = str(key_pair.clone_public_key())
        name, body = text.split(" ")
        assert name == key_pair.keytype()
        assert base64.b64decode(body) == key_pair.blob()

    def test_repr_hides_key_material(self, p256_public_key):
        assert repr(p256_public_key) == "EcDsaPublicKey(curve=nistp256)"


class TestPublicKeyParsing:
    """Test from_string / from_blob / from_public_key"""

    def test_from_string(self, p256_public_key):
        assert EcDsaPublicKey.from_string(P256_TEXT) == p256_public_key

    def test_from_string_with_comment(self, p256_public_key):
        assert EcDsaPublicKey.from_string(P256_TEXT + " user@host") == p256_public_key

    def test_from_blob_round_trip(self, key_pair):
        public_key = key_pair.clone_public_key()
        assert EcDsaPublicKey.from_blob(public_key.blob()) == public_key

    def test_from_string_name_mismatch(self):
        body = P256_TEXT.split(" ", 1)[1]
        with pytest.raises(InvalidFormatError, match="does not match"):
            EcDsaPublicKey.from_string("ecdsa-sha2-nistp384 " + body)

    def test_from_string_unknown_type(self):
        body = P256_TEXT.split(" ", 1)[1]
        with pytest.raises(UnsupportedCurveError):
            EcDsaPublicKey.from_string("ssh-ed25519 " + body)

    def test_from_string_bad_base64(self):
        with pytest.raises(InvalidFormatError):
            EcDsaPublicKey.from_string("ecdsa-sha2-nistp256 not*base64")

    def test_from_string_missing_body(self):
        with pytest.raises(InvalidFormatError):
            EcDsaPublicKey.from_string("ecdsa-sha2-nistp256")

    def test_from_public_key(self):
        private_key = ec.generate_private_key(ec.SECP384R1())
        public_key = EcDsaPublicKey.from_public_key(private_key.public_key())

        assert public_key.curve is EcCurve.NISTP384
        assert public_key == EcDsaKeyPair(private_key).clone_public_key()

    def test_from_public_key_rejects_other_types(self):
        with pytest.raises(InvalidFormatError):
            EcDsaPublicKey.from_public_key(ed25519.Ed25519PrivateKey.generate().public_key())


class TestPublicKeyConstruction:
    """Test validazione group/point"""

    def test_unsupported_group(self):
        with pytest.raises(InvalidFormatError):
            EcDsaPublicKey(ec.SECP256K1(), P256_POINT)

    def test_group_without_designation(self):
        with pytest.raises(InvalidFormatError):
            EcDsaPublicKey(object(), P256_POINT)

    def test_point_not_on_curve(self):
        bad_point = P256_POINT[:-1] + bytes([P256_POINT[-1] ^ 0x01])
        with pytest.raises(InvalidFormatError):
            EcDsaPublicKey(ec.SECP256R1(), bad_point)

    def test_point_for_other_curve(self):
        with pytest.raises(InvalidFormatError):
            EcDsaPublicKey(ec.SECP384R1(), P256_POINT)

    def test_empty_point(self):
        with pytest.raises(InvalidFormatError):
            EcDsaPublicKey(ec.SECP256R1(), b"")

    def test_invalid_format_is_value_error(self):
        with pytest.raises(ValueError):
            EcDsaPublicKey(ec.SECP256R1(), b"\x04\x00")

    def test_unknown_digest_policy(self):
        with pytest.raises(ValueError, match="digest policy"):
            EcDsaPublicKey(ec.SECP256R1(), P256_POINT, digest_policy="md5")


class TestPublicKeyEquality:
    """Test uguaglianza"""

    def test_same_input_is_equal(self):
        first = EcDsaPublicKey(ec.SECP256R1(), P256_POINT)
        second = EcDsaPublicKey(ec.SECP256R1(), P256_POINT)

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_different_points(self, p256_public_key):
        other = EcDsaKeyPair.generate(EcCurve.NISTP256).clone_public_key()
        assert p256_public_key != other

    def test_different_curves(self):
        p256 = EcDsaKeyPair.generate(EcCurve.NISTP256).clone_public_key()
        p384 = EcDsaKeyPair.generate(EcCurve.NISTP384).clone_public_key()
        assert p256 != p384

    def test_prime256v1_alias_is_same_group(self, p256_public_key):
        class Prime256v1:
            name = "prime256v1"
            key_size = 256

        assert EcDsaPublicKey(Prime256v1(), P256_POINT) == p256_public_key

    def test_not_equal_to_other_types(self, p256_public_key):
        assert p256_public_key != P256_TEXT
        assert p256_public_key != P256_POINT


class TestKeyPair:
    """Test EcDsaKeyPair"""

    def test_capabilities(self, key_pair):
        assert isinstance(key_pair, PubKey)
        assert isinstance(key_pair, PrivKey)
        assert not isinstance(key_pair.clone_public_key(), PrivKey)

    def test_size_and_keytype(self, key_pair):
        assert key_pair.size() == key_pair.curve.size
        assert key_pair.keytype() == key_pair.curve.algorithm_name

    def test_blob_matches_public_key(self, key_pair):
        assert key_pair.blob() == key_pair.clone_public_key().blob()

    def test_clone_is_stable(self, key_pair):
        assert key_pair.clone_public_key() == key_pair.clone_public_key()

    def test_from_private_value(self):
        pair = EcDsaKeyPair.from_private_value(EcCurve.NISTP256, 0x1234567890ABCDEF)
        expected = ec.derive_private_key(0x1234567890ABCDEF, ec.SECP256R1()).public_key()

        assert pair.clone_public_key() == EcDsaPublicKey.from_public_key(expected)

    @pytest.mark.parametrize("value", [0, -1])
    def test_from_private_value_out_of_range(self, value):
        with pytest.raises(InvalidFormatError):
            EcDsaKeyPair.from_private_value(EcCurve.NISTP384, value)

    def test_rejects_unsupported_curve(self):
        with pytest.raises(InvalidFormatError):
            EcDsaKeyPair(ec.generate_private_key(ec.SECP256K1()))

    def test_rejects_non_ec_key(self):
        with pytest.raises(InvalidFormatError):
            EcDsaKeyPair(ed25519.Ed25519PrivateKey.generate())

    def test_repr_hides_key_material(self):
        pair = EcDsaKeyPair.generate(EcCurve.NISTP521)
        assert repr(pair) == "EcDsaKeyPair(curve=nistp521)"


class TestSignVerify:
    """Test firma e verifica"""

    @pytest.mark.parametrize("message", MESSAGES, ids=["1B", "text", "zeros", "2KiB"])
    def test_sign_then_verify(self, key_pair, message):
        signature = key_pair.sign(message)

        assert key_pair.clone_public_key().verify(message, signature) is True
        assert key_pair.verify(message, signature) is True

    def test_signature_is_der(self, key_pair):
        r, s = decode_dss_signature(key_pair.sign(b"message"))
        assert r > 0 and s > 0

    @pytest.mark.parametrize("group", [ec.SECP256R1(), ec.SECP384R1(), ec.SECP521R1()])
    def test_digest_is_sha1_for_every_curve(self, group):
        private_key = ec.generate_private_key(group)
        signature = EcDsaKeyPair(private_key).sign(b"message")

        private_key.public_key().verify(signature, b"message", ec.ECDSA(hashes.SHA1()))

    def test_curve_digest_policy(self):
        private_key = ec.generate_private_key(ec.SECP384R1())
        pair = EcDsaKeyPair(private_key, digest_policy="curve")
        signature = pair.sign(b"message")

        private_key.public_key().verify(signature, b"message", ec.ECDSA(hashes.SHA384()))
        assert pair.verify(b"message", signature) is True
        with pytest.raises(InvalidSignature):
            private_key.public_key().verify(signature, b"message", ec.ECDSA(hashes.SHA1()))

    def test_digest_policy_mismatch_is_false(self):
        private_key = ec.generate_private_key(ec.SECP256R1())
        signature = EcDsaKeyPair(private_key, digest_policy="curve").sign(b"message")

        assert EcDsaKeyPair(private_key).verify(b"message", signature) is False

    def test_wrong_message_is_false(self, key_pair):
        signature = key_pair.sign(b"original")
        assert key_pair.verify(b"tampered", signature) is False

    def test_other_key_is_false(self, key_pair):
        other = EcDsaKeyPair.generate(key_pair.curve)
        signature = other.sign(b"message")
        assert key_pair.verify(b"message", signature) is False

    @pytest.mark.parametrize("signature", [b"", b"not a signature", b"\x30\x03\x02\x01"])
    def test_malformed_signature_raises(self, key_pair, signature):
        with pytest.raises(CryptoError):
            key_pair.verify(b"message", signature)

    def test_non_bytes_signature_raises(self, p256_public_key):
        with pytest.raises(CryptoError):
            p256_public_key.verify(b"message", "signature")

    def test_sign_non_bytes_raises(self, key_pair):
        with pytest.raises(CryptoError):
            key_pair.sign("message")
