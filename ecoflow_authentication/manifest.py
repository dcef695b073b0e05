# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Module manifest read by the host when the package is loaded.

Describes each step, the inputs its editor shows, and the controller that runs
it. ``controller`` values are keys of ``controllers.CONTROLLERS``.
"""

from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .config import PACKAGE_NAME
from .keys import Algorithm
from .module_configs import ModuleConfigs

InputType = Literal["String", "HiddenString", "Checkbox", "Radio", "SelectPicker", "ListBox"]

ENV_HINT = 'For environment variables provide EcoFlow prefix. example:"ECOFLOW_USER_"'
ALGORITHMS = [algorithm.value for algorithm in Algorithm]


class PickerOption(BaseModel):
    label: str
    value: str


class InputSpec(BaseModel):
    """A configurable input of a step."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    label: str
    type: InputType
    required: Optional[bool] = None
    default_value: Any = Field(default=None, alias="defaultValue")
    hint: Optional[str] = None
    picker_options: Optional[List[Union[str, PickerOption]]] = Field(default=None, alias="pickerOptions")
    radio_values: Optional[List[str]] = Field(default=None, alias="radioValues")


class StepSpec(BaseModel):
    name: str
    type: Literal["Configuration", "Middleware"]
    inputs: List[InputSpec]
    controller: str


class ModuleManifest(BaseModel):
    name: str
    specs: List[StepSpec]

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the camelCase keys the host expects."""
        return self.model_dump(by_alias=True, exclude_none=True)


def _client_options(module_configs: Optional[ModuleConfigs]) -> List[PickerOption]:
    config_manager = module_configs.select_package(PACKAGE_NAME) if module_configs else None
    if config_manager is None:
        return []
    return [
        PickerOption(label=f"{config.label} ({name})", value=name)
        for name, config in config_manager
    ]


def _response_key() -> InputSpec:
    return InputSpec(name="responseKey", label="Response Key", type="String", required=True, default_value="msg")


def _algorithm() -> InputSpec:
    return InputSpec(name="algorithm", label="Algorithm", type="SelectPicker", picker_options=ALGORITHMS, required=True)


def _client_credentials() -> List[InputSpec]:
    inputs = []
    fields = (
        ("clientId", "Client ID", "client ID"),
        ("clientSecret", "Client Secret", "client secret"),
        ("redirectUri", "Redirect URI", "redirect URI"),
    )
    for name, label, noun in fields:
        inputs.append(InputSpec(name=name, label=label, type="String", required=True, hint=ENV_HINT))
        inputs.append(InputSpec(
            name=f"{name}FromEnv",
            label=f"{label} from Environment",
            type="Checkbox",
            hint=f"Use environment variable for {noun}",
        ))
    return inputs


def build_manifest(module_configs: Optional[ModuleConfigs] = None) -> ModuleManifest:
    """Build the manifest, listing clients registered in ``module_configs``."""
    client_options = _client_options(module_configs)

    return ModuleManifest(
        name="Authentication",
        specs=[
            StepSpec(
                name="ApiCredentials",
                type="Configuration",
                inputs=[
                    InputSpec(name="clientId", label="Client Id", type="String", required=True),
                    InputSpec(name="clientSecret", label="Client Secret", type="HiddenString", required=True),
                    InputSpec(name="redirectUri", label="Redirect URI", type="String", required=False),
                ],
                controller="ApiCredentialsController",
            ),
            StepSpec(
                name="SignJWT",
                type="Middleware",
                inputs=[
                    InputSpec(name="payloadKey", label="Payload Key", type="String", required=True, default_value="msg"),
                    _response_key(),
                    InputSpec(name="expiresIn", label="Expiration Time", type="String", required=True, default_value="1hr"),
                    _algorithm(),
                    InputSpec(
                        name="secretORprivateKey",
                        label="Enter the secret or private key",
                        type="String",
                        hint="Private key works only with RS256 and RS384",
                        required=True,
                    ),
                    InputSpec(
                        name="secretORprivateKeyFromEnvironment",
                        label="Fetch the secret or private key from Environment",
                        type="Checkbox",
                        hint=ENV_HINT,
                    ),
                ],
                controller="signJWTController",
            ),
            StepSpec(
                name="JWT JWKS Public Key",
                type="Middleware",
                inputs=[
                    _response_key(),
                    InputSpec(
                        name="publicKey",
                        label="Enter the Public Key",
                        type="String",
                        hint="RS256 and RS384 public key",
                        required=True,
                    ),
                    InputSpec(
                        name="fromEnvironmentVariable",
                        label="Fetch the public key from Environment",
                        type="Checkbox",
                        hint=ENV_HINT,
                    ),
                ],
                controller="jwtJWKSController",
            ),
            StepSpec(
                name="Authenticate JWT",
                type="Middleware",
                inputs=[
                    _response_key(),
                    _algorithm(),
                    InputSpec(
                        name="secretORprivateKeySelector",
                        label="Select the secret or private key",
                        type="Radio",
                        radio_values=["secret", "publicKey"],
                        default_value="secret",
                        required=True,
                    ),
                    InputSpec(
                        name="secretORpublicKey",
                        label="Enter the secret or public key",
                        type="String",
                        hint="Public key works only with RS256 and RS384",
                        required=True,
                    ),
                    InputSpec(
                        name="fromEnvironmentVariable",
                        label="Fetch the secret or public key from Environment",
                        type="Checkbox",
                        hint=ENV_HINT,
                    ),
                ],
                controller="authenticateTokenController",
            ),
            StepSpec(
                name="Generate Google Auth URL",
                type="Middleware",
                inputs=[
                    *_client_credentials(),
                    InputSpec(
                        name="access_type",
                        label="Auth URL Access Type",
                        type="SelectPicker",
                        picker_options=["online", "offline"],
                        required=True,
                        default_value="online",
                    ),
                    InputSpec(
                        name="prompt",
                        label="Auth URL Prompt",
                        type="SelectPicker",
                        picker_options=["select_account", "consent", "none"],
                        required=True,
                        default_value="consent",
                    ),
                    InputSpec(name="scope", label="Scopes", type="ListBox"),
                    InputSpec(
                        name="state",
                        label="State",
                        type="String",
                        hint="An optional state parameter to maintain state between the request and the callback",
                    ),
                    InputSpec(
                        name="login_hint",
                        label="Login Hint",
                        type="String",
                        hint="An optional login hint to pre-fill the email field in the consent screen",
                    ),
                ],
                controller="generateGoogleAuthUrl",
            ),
            StepSpec(
                name="Get Token From Code",
                type="Middleware",
                inputs=[
                    InputSpec(name="client", label="client", type="SelectPicker", picker_options=client_options, required=True),
                    InputSpec(
                        name="code",
                        label="code",
                        type="String",
                        hint="The authorization code received from the authorization endpoint",
                        required=False,
                    ),
                    InputSpec(
                        name="passByPayload",
                        label="Pass By Payload",
                        type="Checkbox",
                        hint="If true, the code is read from the payload, otherwise from the code input or query parameter",
                        default_value=False,
                        required=False,
                    ),
                    InputSpec(
                        name="payloadKey",
                        label="Payload Key",
                        type="String",
                        hint="The key to use when passing the code by payload",
                        default_value="msg",
                        required=False,
                    ),
                ],
                controller="getTokenFromCode",
            ),
            StepSpec(
                name="Get User Details",
                type="Middleware",
                inputs=[
                    InputSpec(name="client", label="client", type="SelectPicker", picker_options=client_options, required=True),
                    InputSpec(
                        name="refreshToken",
                        label="Refresh Token",
                        type="String",
                        hint="The refresh token obtained from the authorization code or the access token",
                        required=False,
                    ),
                    InputSpec(
                        name="passByQuery",
                        label="Pass By Query String",
                        type="Checkbox",
                        hint="If true, the token is read from the query string, otherwise from the refresh token input",
                        default_value=False,
                        required=False,
                    ),
                    InputSpec(
                        name="queryKey",
                        label="Query Key",
                        type="String",
                        hint="The key to use when passing the token by query string",
                        default_value="token",
                        required=False,
                    ),
                ],
                controller="getUserDetails",
            ),
            StepSpec(
                name="Google Authenticate",
                type="Middleware",
                inputs=_client_credentials(),
                controller="googleOAuthAuthenticate",
            ),
        ],
    )
