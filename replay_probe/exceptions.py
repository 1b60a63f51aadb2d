class ReplayProbeError(Exception):
	"""Base class for errors raised by replay-probe itself"""


class ConfigurationError(ReplayProbeError):
	"""Raised when an environment setting is missing or malformed"""
