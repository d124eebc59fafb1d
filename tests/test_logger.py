"""
Tests for the stream log writer.
"""

import datetime
import io

import pytest

from CoveMath import Exceptions
from CoveMath.Logger import Logger


@pytest.fixture
def stream():
	return io.StringIO()


class TestLogger:

	def test_open_banner(self, stream):
		Logger(stream)
		assert stream.getvalue().startswith('==========[ Log Opened ]==========')

	@pytest.mark.parametrize('method, level', [
		('debug', 'DEBUG'),
		('info', 'INFO'),
		('warn', 'WARN'),
		('error', 'ERROR'),
		('critical', 'CRITICAL'),
	])
	def test_levels(self, stream, method, level):
		logger = Logger(stream)
		assert getattr(logger, method)('  hello  ') is logger
		assert f'[ {level} ]: hello\n' in stream.getvalue()

	def test_timezone_in_line(self, stream):
		logger = Logger(stream, datetime.timezone.utc)
		logger.info('x')
		assert '[ UTC ]' in stream.getvalue()

	def test_minimum_level_filters(self, stream):
		logger = Logger(stream, level='warn')
		logger.debug('quiet').info('quiet').warn('loud')
		output = stream.getvalue()
		assert 'quiet' not in output
		assert '[ WARN ]: loud' in output
		assert logger.level == 'WARN'

	def test_unknown_level(self, stream):
		with pytest.raises(ValueError):
			Logger(stream, level='verbose')

	def test_rejects_non_stream(self):
		with pytest.raises(Exceptions.InvalidArgumentException):
			Logger('not a stream')

	def test_rejects_closed_stream(self, stream):
		stream.close()

		with pytest.raises(IOError):
			Logger(stream)

	def test_detach_keeps_stream_open(self, stream):
		logger = Logger(stream)
		logger.detach()
		assert not stream.closed
		assert logger.closed
		assert stream.getvalue().endswith('==========[ Log Closed ]==========')

	def test_close_closes_stream(self, stream):
		logger = Logger(stream)
		logger.close()
		assert stream.closed
		assert logger.closed

	def test_write_after_close(self, stream):
		logger = Logger(stream)
		logger.detach()

		with pytest.raises(IOError):
			logger.info('late')

		with pytest.raises(IOError):
			logger.detach()
