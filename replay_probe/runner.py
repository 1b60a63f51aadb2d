import logging
from collections.abc import Sequence

from replay_probe.scenario.service import ScenarioExecutor
from replay_probe.scenario.views import ScenarioResult, ScenarioSpec

logger = logging.getLogger(__name__)

DEFAULT_SCENARIOS: tuple[ScenarioSpec, ...] = (
	ScenarioSpec(name='No stop, immediate delete', stop_before_delete=False, wait_before_delete_ms=0),
	ScenarioSpec(name='Stop, 0ms wait, delete', stop_before_delete=True, wait_before_delete_ms=0),
	ScenarioSpec(name='Stop, 250ms wait, delete', stop_before_delete=True, wait_before_delete_ms=250),
	ScenarioSpec(name='Stop, 500ms wait, delete', stop_before_delete=True, wait_before_delete_ms=500),
	ScenarioSpec(name='Stop, 1000ms wait, delete', stop_before_delete=True, wait_before_delete_ms=1000),
)


async def run_scenarios(
	executor: ScenarioExecutor, specs: Sequence[ScenarioSpec] = DEFAULT_SCENARIOS
) -> list[ScenarioResult]:
	"""Run each spec to completion before starting the next one.

	Each scenario, teardown included, finishes before the next one starts.
	"""
	results: list[ScenarioResult] = []
	for index, spec in enumerate(specs, start=1):
		logger.debug(f'Scenario {index}/{len(specs)}: {spec.name}')
		result = await executor.run(spec)
		results.append(result)
		logger.info(f'📌 {spec.name}: session {result.session_id or "N/A"}')
	return results
