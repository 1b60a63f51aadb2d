from pydantic import BaseModel, ConfigDict


class RemoteSession(BaseModel):
	"""A provisioned remote browser"""

	model_config = ConfigDict(frozen=True)

	session_id: str
	cdp_ws_url: str
	live_view_url: str | None = None


class ReplayInfo(BaseModel):
	"""A replay recording tied to a remote session"""

	model_config = ConfigDict(frozen=True)

	replay_id: str
	view_url: str | None = None
