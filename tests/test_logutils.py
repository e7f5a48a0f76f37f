import logging

from makepw.logutils import LOGGER, loglevel, tabbed


def test_tabbed(caplog):
    caplog.set_level(logging.INFO, logger = 'makepw')
    LOGGER.info('outer')
    with tabbed():
        LOGGER.info('inner')
        with tabbed(2):
            LOGGER.info('innermost')
    LOGGER.info('outer again')
    assert [record.getMessage() for record in caplog.records] == ['outer', '\tinner', '\t\t\tinnermost', 'outer again']

def test_tabbed_restores_on_error(caplog):
    caplog.set_level(logging.INFO, logger = 'makepw')
    try:
        with tabbed():
            raise RuntimeError
    except RuntimeError:
        pass
    LOGGER.info('after')
    assert caplog.records[-1].getMessage() == 'after'

def test_loglevel():
    logger = logging.getLogger('makepw.test')
    logger.setLevel(logging.WARNING)
    with loglevel(logger, logging.DEBUG):
        assert logger.isEnabledFor(logging.DEBUG)
    assert logger.level == logging.WARNING
