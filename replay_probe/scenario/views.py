from pydantic import BaseModel, ConfigDict, Field

from replay_probe.remote.views import ReplayInfo


class ScenarioSpec(BaseModel):
	"""One timing combination to probe"""

	model_config = ConfigDict(extra='forbid', frozen=True)

	name: str
	stop_before_delete: bool
	wait_before_delete_ms: int = Field(default=0, ge=0)


class ScenarioResult(BaseModel):
	"""Outcome of one scenario, filled in step by step as the scenario runs"""

	model_config = ConfigDict(validate_assignment=True)

	name: str
	session_id: str = ''
	live_view_url: str | None = None
	replay_id: str | None = None
	stop_called: bool
	wait_ms: int
	replay_found: bool = False
	replay_status: str | None = None  # found | not_found | list_error: <message>
	replay_file_size: int | None = None  # only set once a download was attempted
	replays: list[ReplayInfo] = Field(default_factory=list)
	error: str | None = None

	@classmethod
	def from_spec(cls, spec: ScenarioSpec) -> 'ScenarioResult':
		return cls(name=spec.name, stop_called=spec.stop_before_delete, wait_ms=spec.wait_before_delete_ms)
