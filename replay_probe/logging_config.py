import logging
import sys

THIRD_PARTY_LOGGERS = ('httpx', 'httpcore', 'kernel', 'asyncio', 'playwright')


class ProbeFormatter(logging.Formatter):
	"""Shows `replay_probe.scenario.service` as just `scenario`"""

	def format(self, record: logging.LogRecord) -> str:
		parts = [part for part in record.name.split('.') if part not in ('replay_probe', 'service', 'views')]
		record.short_name = parts[-1] if parts else record.name
		return super().format(record)


def setup_logging(level: str = 'info') -> logging.Logger:
	"""Attach a single stdout handler to the replay_probe logger.

	Calling this more than once only updates the level.
	"""
	log_level = getattr(logging, level.upper(), None)
	if not isinstance(log_level, int):
		log_level = logging.INFO

	logger = logging.getLogger('replay_probe')
	logger.setLevel(log_level)
	logger.propagate = False

	if not logger.handlers:
		handler = logging.StreamHandler(sys.stdout)
		handler.setFormatter(ProbeFormatter('%(levelname)-8s [%(short_name)s] %(message)s'))
		logger.addHandler(handler)

	for name in THIRD_PARTY_LOGGERS:
		third_party = logging.getLogger(name)
		third_party.setLevel(logging.ERROR)
		third_party.propagate = False

	return logger
