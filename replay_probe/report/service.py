"""
Summary rendering for a probe run.

Everything here is a pure function of the result list: no I/O, no clocks.
"""

from collections.abc import Sequence

from replay_probe.report.views import ReplayAnalysis
from replay_probe.scenario.views import ScenarioResult

NAME_WIDTH = 30
WAIT_WIDTH = 8
SIZE_WIDTH = 12
STATUS_WIDTH = 12

RULE = '═' * 75


def format_file_size(size: int | None) -> str:
	if size is None:
		return 'N/A'
	if size == 0:
		return '0 bytes'
	return f'{size / 1024:.1f} KB'


def format_status(result: ScenarioResult) -> str:
	status = result.error or result.replay_status or 'unknown'
	return status[:STATUS_WIDTH]


def render_row(result: ScenarioResult) -> str:
	name = result.name[:NAME_WIDTH].ljust(NAME_WIDTH)
	stop = ('Yes' if result.stop_called else 'No').ljust(4)
	wait = str(result.wait_ms).rjust(WAIT_WIDTH)
	found = '✅' if result.replay_found else '❌'
	size = format_file_size(result.replay_file_size).rjust(SIZE_WIDTH)
	status = format_status(result).ljust(STATUS_WIDTH)
	return f'║ {name} │ {stop} │ {wait} │   {found}   │ {size} │ {status} ║'


def render_table(results: Sequence[ScenarioResult]) -> str:
	header = f'║ {"Scenario".ljust(NAME_WIDTH)} │ Stop │ {"Wait(ms)".rjust(WAIT_WIDTH)} │ Replay │ {"File Size".rjust(SIZE_WIDTH)} │ {"Status".ljust(STATUS_WIDTH)} ║'
	# the emoji column is rendered double width, so borders follow the header
	inner = len(header) - 2
	title = 'SCENARIO RESULTS SUMMARY'.center(inner)

	lines = [
		f'╔{"═" * inner}╗',
		f'║{title}║',
		f'╠{"═" * inner}╣',
		header,
		f'╠{"═" * inner}╣',
	]
	lines.extend(render_row(result) for result in results)
	lines.append(f'╚{"═" * inner}╝')
	return '\n'.join(lines)


def analyze(results: Sequence[ScenarioResult]) -> ReplayAnalysis:
	"""Derive the auto-stop, immediate-delete and minimum-delay conclusions"""
	no_stop = [r for r in results if not r.stop_called]
	immediate = [r for r in results if r.stop_called and r.wait_ms == 0]
	delayed = [r for r in results if r.stop_called and r.wait_ms > 0]
	successful_delays = [r.wait_ms for r in delayed if r.replay_found]

	return ReplayAnalysis(
		auto_stop=any(r.replay_found for r in no_stop) if no_stop else None,
		immediate_delete=immediate[0].replay_found if immediate else None,
		min_reliable_delay_ms=min(successful_delays) if successful_delays else None,
		delayed_attempted=bool(delayed),
	)


def render_analysis(analysis: ReplayAnalysis) -> str:
	lines = [RULE, 'ANALYSIS:', RULE]

	if analysis.auto_stop is not None:
		lines.append('')
		lines.append('1. Auto-stop behavior (no stop called before delete):')
		lines.append(f'   Replay generated: {"YES" if analysis.auto_stop else "NO"}')
		if analysis.auto_stop:
			lines.append('   → Replays ARE stopped automatically when the browser is deleted')
		else:
			lines.append('   → Replays are NOT stopped automatically; stop() must be called')

	if analysis.immediate_delete is not None:
		lines.append('')
		lines.append('2. Immediate delete after stop (0ms wait):')
		lines.append(f'   Replay generated: {"YES" if analysis.immediate_delete else "NO"}')

	if analysis.min_reliable_delay_ms is not None:
		lines.append('')
		lines.append('3. Minimum wait time for reliable replay generation:')
		lines.append(f'   Smallest successful delay: {analysis.min_reliable_delay_ms}ms')
	elif analysis.delayed_attempted:
		lines.append('')
		lines.append('3. No delayed scenario succeeded. Longer delays may be needed.')

	return '\n'.join(lines)


def render_session_ids(results: Sequence[ScenarioResult]) -> str:
	lines = [RULE, 'Session IDs for reference:']
	lines.extend(f'  {r.name}: {r.session_id or "N/A"}' for r in results)
	lines.append(RULE)
	return '\n'.join(lines)


def render_report(results: Sequence[ScenarioResult]) -> str:
	return '\n\n'.join([render_table(results), render_analysis(analyze(results)), render_session_ids(results)])
