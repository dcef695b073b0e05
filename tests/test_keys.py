# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Tests for key references and signing key resolution."""

import pytest

from ecoflow_authentication import Algorithm, StaticConfigProvider, resolve_signing_key
from ecoflow_authentication.jwks import RemoteKeyProvider
from ecoflow_authentication.keys import EnvironmentKey, FileKey, InlineKey, RemoteKey, key_reference


class TestAlgorithm:
    """Tests for the Algorithm enum."""

    @pytest.mark.parametrize("algorithm", [Algorithm.HS256, Algorithm.HS384])
    def test_hmac_algorithms_are_symmetric(self, algorithm):
        assert algorithm.is_symmetric
        assert algorithm.symmetric_counterpart is algorithm

    @pytest.mark.parametrize(
        "algorithm,expected",
        [(Algorithm.RS256, Algorithm.HS256), (Algorithm.RS384, Algorithm.HS384)],
    )
    def test_rsa_algorithms_map_to_hmac_counterpart(self, algorithm, expected):
        assert not algorithm.is_symmetric
        assert algorithm.symmetric_counterpart is expected

    def test_unknown_algorithm_rejected(self):
        with pytest.raises(ValueError):
            Algorithm("ES256")


class TestKeyReferences:
    """Tests for the key reference variants."""

    def test_inline_key_resolves_to_value(self, env):
        assert InlineKey("abc").resolve(env) == "abc"

    def test_empty_inline_key_resolves_to_none(self, env):
        assert InlineKey("").resolve(env) is None

    def test_environment_key_reads_variable_at_call_time(self):
        variables = {}
        env = StaticConfigProvider(variables)
        reference = EnvironmentKey("ECOFLOW_USER_SECRET")

        assert reference.resolve(env) is None

        variables["ECOFLOW_USER_SECRET"] = "from-env"
        assert reference.resolve(env) == "from-env"

    def test_empty_environment_name_resolves_to_none(self):
        assert EnvironmentKey("").resolve(StaticConfigProvider({"": "x"})) is None

    def test_file_key_reads_bytes(self, tmp_path, env):
        key_file = tmp_path / "key.pem"
        key_file.write_bytes(b"key-bytes")

        assert FileKey(str(key_file)).resolve(env) == b"key-bytes"

    def test_file_key_missing_file_resolves_to_none(self, tmp_path, env):
        assert FileKey(str(tmp_path / "missing.pem")).resolve(env) is None

    def test_file_key_directory_is_not_a_key(self, tmp_path, env):
        assert not FileKey(str(tmp_path)).exists()

    def test_remote_key_with_valid_url_returns_provider(self, env):
        provider = RemoteKey(InlineKey("https://issuer.example.com/.well-known/jwks.json")).resolve(env)

        assert isinstance(provider, RemoteKeyProvider)
        assert provider.url == "https://issuer.example.com/.well-known/jwks.json"

    def test_remote_key_with_invalid_url_returns_none(self, env):
        assert RemoteKey(InlineKey("not a url")).resolve(env) is None

    def test_remote_key_url_from_environment(self):
        env = StaticConfigProvider({"ECOFLOW_USER_JWKS": "https://issuer.example.com/jwks"})

        provider = RemoteKey(EnvironmentKey("ECOFLOW_USER_JWKS")).resolve(env)

        assert provider.url == "https://issuer.example.com/jwks"

    def test_key_reference_from_inputs(self):
        assert key_reference("value") == InlineKey("value")
        assert key_reference("NAME", True) == EnvironmentKey("NAME")
        assert key_reference(None) == InlineKey("")


class TestResolveSigningKey:
    """Tests for resolve_signing_key."""

    @pytest.mark.parametrize("algorithm", ["HS256", "HS384"])
    def test_symmetric_returns_key_unchanged(self, algorithm, env):
        key, effective = resolve_signing_key(algorithm, "my-secret", env)

        assert key == "my-secret"
        assert effective == Algorithm(algorithm)

    @pytest.mark.parametrize(
        "algorithm,expected",
        [("RS256", Algorithm.HS256), ("RS384", Algorithm.HS384)],
    )
    def test_asymmetric_without_key_file_falls_back_to_shared_secret(
        self, algorithm, expected, tmp_path, env, token_salt
    ):
        key, effective = resolve_signing_key(algorithm, str(tmp_path / "missing.pem"), env)

        assert key == token_salt
        assert effective is expected

    def test_fallback_is_logged(self, tmp_path, env, logger):
        resolve_signing_key("RS256", str(tmp_path / "missing.pem"), env, logger=logger)

        assert logger.has_log("Private key file not found", level="WARNING")

    def test_fallback_without_configured_salt_returns_none(self, tmp_path):
        key, effective = resolve_signing_key("RS256", str(tmp_path / "missing.pem"), StaticConfigProvider())

        assert key is None
        assert effective is Algorithm.HS256

    @pytest.mark.parametrize("algorithm", ["RS256", "RS384"])
    def test_asymmetric_with_key_file_reads_file(self, algorithm, rsa_key_files, env):
        private_key_path, _ = rsa_key_files

        key, effective = resolve_signing_key(algorithm, str(private_key_path), env)

        assert key == private_key_path.read_bytes()
        assert effective == Algorithm(algorithm)

    def test_unsupported_algorithm_raises(self, env):
        with pytest.raises(ValueError):
            resolve_signing_key("none", "secret", env)
