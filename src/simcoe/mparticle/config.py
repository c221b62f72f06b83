"""Configuration model for the mParticle tracker."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from simcoe.core.config.models import LoggingConfig
from simcoe.mparticle.models import MPEnvironment, MPInstallationType

ENV_PREFIX = "MPARTICLE_"
DEFAULT_CONFIG_FILE = "mparticle.yaml"


class MParticleConfig(BaseModel):
    """mParticle SDK start-up configuration.

    Attributes:
        key: Workspace API key
        secret: Workspace API secret
        installation_type: How the SDK classifies the installation
        environment: Target mParticle environment
        proxy_app_delegate: Whether the SDK proxies the application delegate
        logging: Optional logging configuration applied when the tracker is
            built from this model
    """

    key: str = Field(..., description="mParticle API key")
    secret: SecretStr = Field(..., description="mParticle API secret")
    installation_type: MPInstallationType = Field(
        MPInstallationType.AUTODETECT, description="Installation type"
    )
    environment: MPEnvironment = Field(
        MPEnvironment.AUTO_DETECT, description="mParticle environment"
    )
    proxy_app_delegate: bool = Field(True, description="Proxy the app delegate")
    logging: Optional[LoggingConfig] = Field(None, description="Logging settings")

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Reject blank API keys."""
        if not v or not v.strip():
            raise ValueError("mParticle key cannot be empty")
        return v.strip()

    @field_validator("secret")
    @classmethod
    def validate_secret(cls, v: SecretStr) -> SecretStr:
        """Reject blank API secrets."""
        if not v.get_secret_value().strip():
            raise ValueError("mParticle secret cannot be empty")
        return v

    model_config = ConfigDict(extra="forbid")
