import runpy
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from status_service import healthcheck
from status_service.config import load_settings

CONF_PATH = str(Path(__file__).resolve().parent.parent / 'gunicorn.conf.py')


@pytest.fixture
def clean_env(monkeypatch):
    for name in ('PORT', 'SERVER_PORT', 'HOST', 'PROMETHEUS_MULTIPROC_DIR'):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_bind_defaults(clean_env):
    assert runpy.run_path(CONF_PATH)['bind'] == '0.0.0.0:8080'


def test_bind_follows_server_port_fallback(clean_env):
    clean_env.setenv('SERVER_PORT', '8181')

    conf = runpy.run_path(CONF_PATH)

    assert conf['bind'] == '0.0.0.0:8181'
    assert healthcheck.default_url(load_settings().port) == 'http://localhost:8181/actuator/health'


def test_child_exit_marks_worker_dead(clean_env, tmp_path):
    clean_env.setenv('PROMETHEUS_MULTIPROC_DIR', str(tmp_path))
    conf = runpy.run_path(CONF_PATH)

    with patch('prometheus_client.multiprocess.mark_process_dead') as mock_mark:
        conf['child_exit'](None, SimpleNamespace(pid=4321))

    mock_mark.assert_called_once_with(4321)


def test_child_exit_without_multiproc_dir(clean_env):
    conf = runpy.run_path(CONF_PATH)

    with patch('prometheus_client.multiprocess.mark_process_dead') as mock_mark:
        conf['child_exit'](None, SimpleNamespace(pid=4321))

    mock_mark.assert_not_called()
