import logging

from backoffice.utils import Logger


def test_logger_is_namespaced_and_not_duplicated():
    Logger('audit-view')
    Logger('audit-view')
    underlying = logging.getLogger('backoffice.audit-view')
    assert len(underlying.handlers) == 1
    assert underlying.propagate is False
    assert not hasattr(Logger('audit-view'), 'name')
