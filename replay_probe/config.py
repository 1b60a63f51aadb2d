"""Environment-driven configuration for replay-probe."""

import os
from collections.abc import Mapping
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from replay_probe.exceptions import ConfigurationError

load_dotenv()

# env var name -> config field
ENV_FIELDS = {
	'KERNEL_API_KEY': 'kernel_api_key',
	'KERNEL_BASE_URL': 'kernel_base_url',
	'REPLAY_PROBE_SESSION_TIMEOUT_SECONDS': 'session_timeout_seconds',
	'REPLAY_PROBE_SETTLE_DELAY_MS': 'settle_delay_ms',
	'REPLAY_PROBE_ACTIVITY_PAUSE_MS': 'activity_pause_ms',
	'REPLAY_PROBE_TARGET_URL': 'target_url',
	'REPLAY_PROBE_LOGGING_LEVEL': 'logging_level',
}


class ProbeConfig(BaseModel):
	"""Settings for one probe run"""

	model_config = ConfigDict(extra='forbid', frozen=True)

	kernel_api_key: str | None = Field(default=None, repr=False)
	kernel_base_url: str | None = None

	# lifetime ceiling handed to the remote session on creation
	session_timeout_seconds: int = Field(default=300, gt=0)
	# wait after delete before listing replays; empirical, not a proven bound
	settle_delay_ms: int = Field(default=3000, ge=0)
	activity_pause_ms: int = Field(default=1000, ge=0)
	target_url: str = 'https://example.com'
	logging_level: Literal['debug', 'info', 'warning', 'error', 'critical'] = 'info'

	@field_validator('logging_level', mode='before')
	@classmethod
	def normalize_logging_level(cls, value: object) -> object:
		return value.strip().lower() if isinstance(value, str) else value

	@classmethod
	def from_env(cls, environ: Mapping[str, str] | None = None) -> 'ProbeConfig':
		"""Build a config from environment variables, ignoring unset or empty ones"""
		environ = os.environ if environ is None else environ
		values = {field: environ[var] for var, field in ENV_FIELDS.items() if environ.get(var)}
		try:
			return cls(**values)
		except ValidationError as e:
			first = e.errors()[0]
			field = first['loc'][0] if first['loc'] else ''
			var = next((name for name, f in ENV_FIELDS.items() if f == field), str(field))
			raise ConfigurationError(f'Invalid value for {var}: {first["msg"]}') from e
