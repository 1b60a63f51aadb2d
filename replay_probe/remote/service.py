"""Async adapter over the Kernel SDK for browser sessions and their replays."""

import logging
from typing import Any

from kernel import AsyncKernel

from replay_probe.config import ProbeConfig
from replay_probe.exceptions import ConfigurationError
from replay_probe.remote.views import RemoteSession, ReplayInfo

logger = logging.getLogger(__name__)


class RemoteSessionClient:
	"""Creates and deletes remote browsers and drives their replay recordings.

	Wraps an ``AsyncKernel`` (or anything shaped like it) that the caller
	constructs, so one client instance is shared explicitly by a whole run.
	SDK errors are not caught here.
	"""

	def __init__(self, kernel: Any):
		self.kernel = kernel

	@classmethod
	def from_config(cls, config: ProbeConfig) -> 'RemoteSessionClient':
		if not config.kernel_api_key:
			raise ConfigurationError('KERNEL_API_KEY must be set')

		kwargs: dict[str, Any] = {'api_key': config.kernel_api_key}
		if config.kernel_base_url:
			kwargs['base_url'] = config.kernel_base_url
		return cls(AsyncKernel(**kwargs))

	async def create_session(self, timeout_seconds: int) -> RemoteSession:
		browser = await self.kernel.browsers.create(timeout_seconds=timeout_seconds)
		logger.debug(f'Created browser {browser.session_id} (timeout {timeout_seconds}s)')
		return RemoteSession(
			session_id=browser.session_id,
			cdp_ws_url=browser.cdp_ws_url,
			live_view_url=getattr(browser, 'browser_live_view_url', None),
		)

	async def delete_session(self, session_id: str) -> None:
		await self.kernel.browsers.delete_by_id(session_id)

	async def start_replay(self, session_id: str) -> ReplayInfo:
		replay = await self.kernel.browsers.replays.start(session_id)
		return ReplayInfo(replay_id=replay.replay_id, view_url=getattr(replay, 'replay_view_url', None))

	async def stop_replay(self, replay_id: str, session_id: str) -> None:
		await self.kernel.browsers.replays.stop(replay_id, id=session_id)

	async def list_replays(self, session_id: str) -> list[ReplayInfo]:
		replays = await self.kernel.browsers.replays.list(session_id)
		return [ReplayInfo(replay_id=r.replay_id, view_url=getattr(r, 'replay_view_url', None)) for r in replays]

	async def download_replay(self, replay_id: str, session_id: str) -> bytes:
		response = await self.kernel.browsers.replays.download(replay_id, id=session_id)
		return await response.read()

	async def close(self) -> None:
		close = getattr(self.kernel, 'close', None)
		if close is not None:
			await close()
