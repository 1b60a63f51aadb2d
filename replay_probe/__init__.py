from replay_probe.config import ProbeConfig
from replay_probe.report.service import analyze, render_report
from replay_probe.runner import DEFAULT_SCENARIOS, run_scenarios
from replay_probe.scenario.service import ScenarioExecutor
from replay_probe.scenario.views import ScenarioResult, ScenarioSpec

__all__ = [
	'DEFAULT_SCENARIOS',
	'ProbeConfig',
	'ScenarioExecutor',
	'ScenarioResult',
	'ScenarioSpec',
	'analyze',
	'render_report',
	'run_scenarios',
]
