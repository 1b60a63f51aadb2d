from pydantic import BaseModel, ConfigDict


class ReplayAnalysis(BaseModel):
	"""Conclusions drawn from a run's results"""

	model_config = ConfigDict(frozen=True)

	# None when no scenario of that shape ran
	auto_stop: bool | None = None
	immediate_delete: bool | None = None
	min_reliable_delay_ms: int | None = None
	delayed_attempted: bool = False
