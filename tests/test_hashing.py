"""
Tests for the synchronous hashing and verification engines.
"""

import pytest

import hashy
from hashy import (
    InvalidHashFormat,
    PrimitiveFailure,
    UnsupportedAlgorithm,
    get_info,
    hash_password_sync,
    verify_password_sync,
)


class TestHashPassword:
    """Tests for hashing."""
    
    def test_default_algorithm_is_bcrypt(self):
        """Should hash with bcrypt and the canonical 2y tag by default."""
        hashed = hash_password_sync("secret")
        
        info = get_info(hashed)
        assert hashed.startswith("$2y$04$")
        assert len(hashed) == 60
        assert info.algorithm == "bcrypt"
        assert info.tag == "2y"
    
    def test_follows_default_algorithm(self):
        """Changing the policy default should change the produced algorithm."""
        hashy.configure(default_algorithm="argon2")
        
        hashed = hash_password_sync("secret")
        
        assert get_info(hashed).algorithm == "argon2"
    
    def test_format_round_trip(self):
        """The cost passed in should be recoverable when policy sets none."""
        hashy.options.defaults["bcrypt"] = {}
        
        hashed = hash_password_sync("secret", "bcrypt", {"cost": 12})
        
        assert get_info(hashed).options["cost"] == 12
    
    def test_policy_overrides_call_options(self):
        """Policy defaults should win over a weaker per-call cost."""
        hashy.configure(bcrypt={"cost": 12})
        
        hashed = hash_password_sync("secret", "bcrypt", {"cost": 8})
        
        assert get_info(hashed).options["cost"] == 12
    
    def test_call_options_fill_gaps(self):
        """Per-call keys absent from policy should be used."""
        hashy.options.defaults["argon2"].pop("time_cost")
        
        hashed = hash_password_sync("secret", "argon2", {"time_cost": 2})
        
        assert get_info(hashed).options["time_cost"] == 2
    
    def test_unsupported_algorithm(self):
        """Unregistered algorithms should raise UnsupportedAlgorithm."""
        with pytest.raises(UnsupportedAlgorithm):
            hash_password_sync("secret", "scrypt")
    
    def test_primitive_failure(self):
        """Rejected input should surface as PrimitiveFailure with the original error."""
        with pytest.raises(PrimitiveFailure) as exc_info:
            hash_password_sync(None)
        
        assert exc_info.value.algorithm == "bcrypt"
        assert isinstance(exc_info.value.original, AttributeError)
    
    def test_salted(self):
        """Hashing the same password twice should give different hashes."""
        assert hash_password_sync("secret") != hash_password_sync("secret")


class TestVerifyPassword:
    """Tests for verification."""
    
    @pytest.mark.parametrize("algorithm", ["bcrypt", "argon2"])
    def test_round_trip(self, algorithm):
        """A password should verify against its own hash."""
        hashed = hash_password_sync("correct horse", algorithm)
        
        assert verify_password_sync("correct horse", hashed) is True
    
    @pytest.mark.parametrize("algorithm", ["bcrypt", "argon2"])
    def test_wrong_password(self, algorithm):
        """A different password should not verify."""
        hashed = hash_password_sync("correct horse", algorithm)
        
        assert verify_password_sync("battery staple", hashed) is False
    
    def test_no_normalization(self):
        """Passwords should be compared byte-for-byte as given."""
        hashed = hash_password_sync("secret")
        
        assert verify_password_sync(" secret", hashed) is False
        assert verify_password_sync("Secret", hashed) is False
    
    def test_unicode_password(self):
        """Non-ASCII passwords should round-trip."""
        hashed = hash_password_sync("pässwörd✓")
        
        assert verify_password_sync("pässwörd✓", hashed) is True
    
    def test_legacy_bcrypt_tag(self, legacy_bcrypt_hash):
        """Hashes with older bcrypt tags should still verify."""
        assert verify_password_sync("secret", legacy_bcrypt_hash) is True
        assert verify_password_sync("nope", legacy_bcrypt_hash) is False
    
    def test_argon2i_hash(self):
        """Argon2i hashes should verify although new hashes use Argon2id."""
        from argon2 import PasswordHasher, Type
        
        hasher = PasswordHasher(time_cost=1, memory_cost=1024, parallelism=1, type=Type.I)
        hashed = hasher.hash("secret")
        
        assert get_info(hashed).tag == "argon2i"
        assert verify_password_sync("secret", hashed) is True
    
    def test_unknown_algorithm(self):
        """Unknown tags should raise UnsupportedAlgorithm."""
        with pytest.raises(UnsupportedAlgorithm):
            verify_password_sync("secret", "$unknown$10$abcdef")
    
    def test_invalid_hash(self):
        """Malformed hashes should raise InvalidHashFormat."""
        with pytest.raises(InvalidHashFormat):
            verify_password_sync("secret", "not-a-hash")
    
    def test_primitive_failure(self):
        """A bcrypt-tagged hash with a corrupt body should fail in the primitive."""
        with pytest.raises(PrimitiveFailure):
            verify_password_sync("secret", "$2y$04$short")
    
    def test_non_string_password(self):
        """Non-string passwords should surface as PrimitiveFailure."""
        hashed = hash_password_sync("secret")
        
        with pytest.raises(PrimitiveFailure):
            verify_password_sync(None, hashed)


class TestVerifyAndUpgrade:
    """Tests for the login-flow helper."""
    
    def test_fresh_hash(self):
        """A valid, current hash should not be replaced."""
        hashed = hash_password_sync("secret")
        
        assert hashy.verify_and_upgrade_sync("secret", hashed) == (True, None)
    
    def test_wrong_password(self):
        """An invalid password should never produce a new hash."""
        hashed = hash_password_sync("secret", "argon2")
        
        assert hashy.verify_and_upgrade_sync("nope", hashed) == (False, None)
    
    def test_upgrades_to_default_algorithm(self, legacy_bcrypt_hash):
        """A stale hash should be replaced with one under current policy."""
        hashy.configure(default_algorithm="argon2")
        
        valid, new_hash = hashy.verify_and_upgrade_sync("secret", legacy_bcrypt_hash)
        
        assert valid is True
        assert get_info(new_hash).algorithm == "argon2"
        assert verify_password_sync("secret", new_hash) is True
