"""Default locations for configuration."""

DEFAULT_CONFIG_PATH = "config/surfcast.yaml"
TOKEN_ENV_VAR = "STORMGLASS_API_TOKEN"
