# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Tests for the module manifest."""

from ecoflow_authentication import CONTROLLERS, build_manifest
from ecoflow_authentication.manifest import ENV_HINT


def step(manifest, name):
    return next(spec for spec in manifest["specs"] if spec["name"] == name)


def input_names(spec):
    return [item["name"] for item in spec["inputs"]]


class TestBuildManifest:
    """Tests for build_manifest."""

    def test_lists_every_step(self):
        manifest = build_manifest().to_dict()

        assert manifest["name"] == "Authentication"
        assert [spec["name"] for spec in manifest["specs"]] == [
            "ApiCredentials",
            "SignJWT",
            "JWT JWKS Public Key",
            "Authenticate JWT",
            "Generate Google Auth URL",
            "Get Token From Code",
            "Get User Details",
            "Google Authenticate",
        ]

    def test_every_controller_is_registered(self):
        manifest = build_manifest().to_dict()

        for spec in manifest["specs"]:
            assert callable(CONTROLLERS[spec["controller"]])

    def test_step_types(self):
        manifest = build_manifest().to_dict()

        assert step(manifest, "ApiCredentials")["type"] == "Configuration"
        assert all(spec["type"] == "Middleware" for spec in manifest["specs"][1:])

    def test_sign_jwt_inputs(self):
        sign = step(build_manifest().to_dict(), "SignJWT")

        assert input_names(sign) == [
            "payloadKey",
            "responseKey",
            "expiresIn",
            "algorithm",
            "secretORprivateKey",
            "secretORprivateKeyFromEnvironment",
        ]
        algorithm = sign["inputs"][3]
        assert algorithm["pickerOptions"] == ["HS256", "HS384", "RS256", "RS384"]
        assert sign["inputs"][2]["defaultValue"] == "1hr"
        assert sign["inputs"][5]["hint"] == ENV_HINT

    def test_authenticate_selector_is_radio(self):
        authenticate = step(build_manifest().to_dict(), "Authenticate JWT")

        selector = authenticate["inputs"][2]
        assert selector["type"] == "Radio"
        assert selector["radioValues"] == ["secret", "publicKey"]
        assert selector["defaultValue"] == "secret"

    def test_google_steps_share_credential_inputs(self):
        manifest = build_manifest().to_dict()
        expected = ["clientId", "clientIdFromEnv", "clientSecret", "clientSecretFromEnv", "redirectUri", "redirectUriFromEnv"]

        assert input_names(step(manifest, "Google Authenticate")) == expected
        assert input_names(step(manifest, "Generate Google Auth URL"))[:6] == expected

    def test_unset_fields_are_omitted(self):
        api_credentials = step(build_manifest().to_dict(), "ApiCredentials")

        assert api_credentials["inputs"][0] == {
            "name": "clientId",
            "label": "Client Id",
            "type": "String",
            "required": True,
        }

    def test_client_picker_lists_registered_clients(self, module_configs):
        configs = module_configs.package("ecoflow-authentication")
        configs.register("google-prod", "Production", object())
        configs.register("google-dev", "Development", object())

        manifest = build_manifest(module_configs).to_dict()

        for name in ("Get Token From Code", "Get User Details"):
            client = step(manifest, name)["inputs"][0]
            assert client["pickerOptions"] == [
                {"label": "Production (google-prod)", "value": "google-prod"},
                {"label": "Development (google-dev)", "value": "google-dev"},
            ]

    def test_client_picker_empty_without_configs(self):
        client = step(build_manifest().to_dict(), "Get Token From Code")["inputs"][0]

        assert client["pickerOptions"] == []
