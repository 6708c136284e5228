import pytest

from tdcalc import config


@pytest.fixture(autouse=True)
def quiet_logs(monkeypatch):
    monkeypatch.setattr(config, 'SHOULD_LOG_TOKENS', False)
    monkeypatch.setattr(config, 'SHOULD_LOG_PARSE', False)
    monkeypatch.setattr(config, 'SHOULD_LOG_EVAL', False)
