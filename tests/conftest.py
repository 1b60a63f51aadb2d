import time

import pytest

from replay_probe.config import ProbeConfig
from replay_probe.remote.views import RemoteSession, ReplayInfo


class FakeRemoteClient:
	"""Records every call with a monotonic timestamp; failures are injected per method"""

	def __init__(self, replays=None, download_data=b'x' * 2048, fail=None):
		self.calls: list[tuple[str, float, tuple]] = []
		self.replays = replays
		self.download_data = download_data
		self.fail = fail or {}
		self.session_counter = 0

	def _record(self, name, *args):
		self.calls.append((name, time.monotonic(), args))
		if name in self.fail:
			raise self.fail[name]

	def call_names(self):
		return [name for name, _, _ in self.calls]

	def call_time(self, name):
		return next(t for n, t, _ in self.calls if n == name)

	async def create_session(self, timeout_seconds):
		self._record('create_session', timeout_seconds)
		self.session_counter += 1
		return RemoteSession(
			session_id=f'session-{self.session_counter}',
			cdp_ws_url=f'wss://remote.test/cdp/{self.session_counter}',
			live_view_url=f'https://remote.test/live/{self.session_counter}',
		)

	async def start_replay(self, session_id):
		self._record('start_replay', session_id)
		return ReplayInfo(replay_id=f'replay-{session_id}')

	async def stop_replay(self, replay_id, session_id):
		self._record('stop_replay', replay_id, session_id)

	async def delete_session(self, session_id):
		self._record('delete_session', session_id)

	async def list_replays(self, session_id):
		self._record('list_replays', session_id)
		if self.replays is not None:
			return self.replays
		return [ReplayInfo(replay_id=f'replay-{session_id}', view_url=f'https://remote.test/replays/{session_id}')]

	async def download_replay(self, replay_id, session_id):
		self._record('download_replay', replay_id, session_id)
		return self.download_data


class FakeDriver:
	def __init__(self, log, fail_on=()):
		self.log = log
		self.fail_on = fail_on

	def _record(self, action, *args):
		self.log.append((action, *args))
		if action in self.fail_on:
			raise RuntimeError(f'{action} failed')

	async def navigate(self, url):
		self._record('navigate', url)

	async def wait_for_idle(self):
		self._record('wait_for_idle')

	async def click(self, selector):
		self._record('click', selector)

	async def detach(self):
		self._record('detach')


class FakeDriverFactory:
	def __init__(self, fail_on=()):
		self.log: list[tuple] = []
		self.fail_on = fail_on
		self.attached_urls: list[str] = []

	async def __call__(self, cdp_ws_url):
		self.attached_urls.append(cdp_ws_url)
		return FakeDriver(self.log, self.fail_on)

	def actions(self):
		return [entry[0] for entry in self.log]


@pytest.fixture
def config():
	"""Config with no settling or activity pauses so tests stay fast"""
	return ProbeConfig(kernel_api_key='test-key', settle_delay_ms=0, activity_pause_ms=0, target_url='https://example.test')


@pytest.fixture
def remote_client():
	return FakeRemoteClient()


@pytest.fixture
def driver_factory():
	return FakeDriverFactory()
