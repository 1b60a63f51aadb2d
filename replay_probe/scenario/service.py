"""
Scenario execution.

Runs one timing scenario against the remote service end to end: create a
browser, record some activity, optionally stop the replay, optionally wait,
delete the browser, then check whether the replay survived. Every failure is
folded into the returned ScenarioResult.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from replay_probe.config import ProbeConfig
from replay_probe.driver.service import PlaywrightDriver
from replay_probe.remote.service import RemoteSessionClient
from replay_probe.scenario.views import ScenarioResult, ScenarioSpec

logger = logging.getLogger(__name__)

AttachDriver = Callable[[str], Awaitable[Any]]


def _error_message(error: BaseException) -> str:
	return str(error) or type(error).__name__


class ScenarioExecutor:
	"""Runs ScenarioSpecs one at a time against a shared RemoteSessionClient"""

	def __init__(
		self,
		client: RemoteSessionClient,
		config: ProbeConfig,
		attach_driver: AttachDriver = PlaywrightDriver.attach,
		sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
	):
		self.client = client
		self.config = config
		self.attach_driver = attach_driver
		self.sleep = sleep

	async def run(self, spec: ScenarioSpec) -> ScenarioResult:
		"""Run one scenario. Never raises; the first failure ends up in ``result.error``."""
		logger.info('=' * 60)
		logger.info(f'🧪 Starting scenario: {spec.name}')
		logger.info(f'   Stop replay: {spec.stop_before_delete}')
		logger.info(f'   Wait before delete: {spec.wait_before_delete_ms}ms')
		logger.info('=' * 60)

		result = ScenarioResult.from_spec(spec)
		try:
			await self._run_steps(spec, result)
		except Exception as e:
			self._record_error(spec, result, e)
		return result

	def _record_error(self, spec: ScenarioSpec, result: ScenarioResult, error: Exception) -> None:
		logger.error(f'❌ Scenario "{spec.name}" failed: {type(error).__name__}: {error}')
		if result.error is None:
			result.error = _error_message(error)

	async def _run_steps(self, spec: ScenarioSpec, result: ScenarioResult) -> None:
		logger.info('🌐 Creating browser...')
		session = await self.client.create_session(timeout_seconds=self.config.session_timeout_seconds)
		result.session_id = session.session_id
		result.live_view_url = session.live_view_url
		logger.info(f'   Browser created: {session.session_id}')
		logger.info(f'   Live view: {session.live_view_url or "N/A"}')

		# once the browser exists it is always deleted and checked for replays
		try:
			await self._record_activity(session.cdp_ws_url, result)

			if spec.stop_before_delete:
				logger.info('⏹️ Stopping replay...')
				await self.client.stop_replay(result.replay_id, session_id=session.session_id)
				logger.info('   Replay stopped')
			else:
				logger.info('⏭️ Skipping replay stop (relying on auto-stop)')

			if spec.wait_before_delete_ms > 0:
				logger.info(f'⏳ Waiting {spec.wait_before_delete_ms}ms before delete...')
				await self.sleep(spec.wait_before_delete_ms / 1000)
		except Exception as e:
			self._record_error(spec, result, e)

		logger.info('🗑️ Deleting browser...')
		await self.client.delete_session(session.session_id)
		logger.info('   Browser deleted')

		logger.info(f'⏳ Waiting {self.config.settle_delay_ms}ms for replay processing...')
		await self.sleep(self.config.settle_delay_ms / 1000)

		await self._verify_replay(result)

	async def _record_activity(self, cdp_ws_url: str, result: ScenarioResult) -> None:
		"""Load a page, start the replay, and generate a couple of seconds of activity on it"""
		logger.info('🔌 Connecting Playwright...')
		driver = await self.attach_driver(cdp_ws_url)
		pause = self.config.activity_pause_ms / 1000
		try:
			logger.info(f'🔗 Navigating to {self.config.target_url}...')
			await driver.navigate(self.config.target_url)
			await driver.wait_for_idle()

			logger.info('🎬 Starting replay recording...')
			replay = await self.client.start_replay(result.session_id)
			result.replay_id = replay.replay_id
			logger.info(f'   Replay started: {replay.replay_id}')

			logger.info('🖱️ Generating recorded activity...')
			await driver.click('body')
			await self.sleep(pause)
			await driver.navigate(self.config.target_url)
			await self.sleep(pause)
		except Exception:
			await self._detach_after_failure(driver)
			raise

		logger.info('🔌 Closing Playwright connection...')
		await driver.detach()

	async def _detach_after_failure(self, driver: Any) -> None:
		"""Detach without letting a detach error mask the failure already in flight"""
		logger.info('🔌 Closing Playwright connection...')
		try:
			await driver.detach()
		except Exception as e:
			logger.warning(f'⚠️ Playwright detach failed: {type(e).__name__}: {e}')

	async def _verify_replay(self, result: ScenarioResult) -> None:
		logger.info('🔍 Checking for replays...')
		try:
			replays = await self.client.list_replays(result.session_id)
		except Exception as e:
			message = _error_message(e)
			logger.warning(f'⚠️ Error listing replays: {message}')
			result.replay_found = False
			result.replay_status = f'list_error: {message}'
			return

		result.replays = replays
		logger.info(f'   Found {len(replays)} replay(s)')
		for replay in replays:
			logger.info(f'    - Replay ID: {replay.replay_id}')
			logger.info(f'      View URL: {replay.view_url or "N/A"}')

		match = next((r for r in replays if r.replay_id == result.replay_id), None)
		if match is None:
			result.replay_found = False
			result.replay_status = 'not_found'
			return

		result.replay_found = True
		result.replay_status = 'found'

		logger.info('📥 Downloading replay to verify file size...')
		try:
			data = await self.client.download_replay(match.replay_id, session_id=result.session_id)
		except Exception as e:
			logger.warning(f'⚠️ Download error: {_error_message(e)}')
			result.replay_file_size = 0
			return

		result.replay_file_size = len(data)
		logger.info(f'   File size: {len(data)} bytes ({len(data) / 1024:.2f} KB)')
