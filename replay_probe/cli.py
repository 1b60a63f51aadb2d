import asyncio
import logging
import sys

from replay_probe.config import ProbeConfig
from replay_probe.logging_config import setup_logging
from replay_probe.remote.service import RemoteSessionClient
from replay_probe.report.service import render_report
from replay_probe.runner import DEFAULT_SCENARIOS, run_scenarios
from replay_probe.scenario.service import ScenarioExecutor

logger = logging.getLogger(__name__)

BANNER = """\
╔════════════════════════════════════════════════════════════╗
║               Kernel Replay Behavior Probe                 ║
╚════════════════════════════════════════════════════════════╝

Probing video replay behavior when browser sessions are deleted.
This answers:
  1. Are replays stopped automatically when the browser is deleted?
  2. How long must we wait between stop and delete?
"""


async def run(config: ProbeConfig) -> str:
	"""Run the default scenarios and return the rendered report"""
	client = RemoteSessionClient.from_config(config)
	try:
		executor = ScenarioExecutor(client, config)
		results = await run_scenarios(executor, DEFAULT_SCENARIOS)
	finally:
		await client.close()
	return render_report(results)


def main() -> None:
	try:
		config = ProbeConfig.from_env()
		setup_logging(config.logging_level)
		print(BANNER)
		report = asyncio.run(run(config))
	except Exception as e:
		setup_logging()
		logger.error(f'💥 Probe run failed: {type(e).__name__}: {e}', exc_info=True)
		sys.exit(1)
	print()
	print(report)


if __name__ == '__main__':
	main()
