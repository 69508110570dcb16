import os
import sys

from prometheus_client import multiprocess

# 사용법: PROMETHEUS_MULTIPROC_DIR=/tmp/metrics gunicorn -c gunicorn.conf.py status_service.app:app
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from status_service.config import load_settings  # noqa: E402

settings = load_settings()

bind = f"{settings.host}:{settings.port}"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))
threads = int(os.environ.get("WEB_THREADS", "4"))
timeout = int(os.environ.get("WEB_TIMEOUT", "30"))
worker_class = "gthread"
loglevel = settings.log_level.lower()
accesslog = "-"
errorlog = "-"


def child_exit(server, worker):
    # 종료된 워커의 메트릭 파일 정리
    if os.environ.get("PROMETHEUS_MULTIPROC_DIR"):
        multiprocess.mark_process_dead(worker.pid)
