"""Tests for logging helpers."""
import logging

from placeadmin import setup_logging
from placeadmin.core.logging import get_logger


class TestGetLogger:

    def test_returns_named_logger(self):
        logger = get_logger('placeadmin.test')

        assert logger.name == 'placeadmin.test'
        assert logger.propagate is True

    def test_same_instance(self):
        assert get_logger('placeadmin.api') is logging.getLogger('placeadmin.api')


class TestSetupLogging:

    def test_sets_levels(self):
        setup_logging(logging.DEBUG)

        for name in ('placeadmin', 'placeadmin.api', 'placeadmin.auth', 'placeadmin.client'):
            assert logging.getLogger(name).level == logging.DEBUG

        setup_logging(logging.WARNING)
