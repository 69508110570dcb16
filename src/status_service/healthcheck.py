# 컨테이너 HEALTHCHECK 용 준비 상태 점검 스크립트
# 사용법: status-service-healthcheck [URL]
import logging
import sys

import requests

from status_service.config import load_settings

logger = logging.getLogger('status_service.healthcheck')

TIMEOUT_SECONDS = 3


def default_url(port: int) -> str:
    return f"http://localhost:{port}/actuator/health"


def check(url: str, timeout: float = TIMEOUT_SECONDS) -> bool:
    """/actuator/health 가 200 + status UP 이면 True"""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.exceptions.RequestException as e:
        logger.error("Health check request failed (%s): %s", url, e)
        return False

    if response.status_code != 200:
        logger.error("Health check returned HTTP %d (%s)", response.status_code, url)
        return False

    try:
        body = response.json()
    except ValueError:
        logger.error("Health check body is not JSON (%s)", url)
        return False

    status = body.get('status') if isinstance(body, dict) else None
    if status != 'UP':
        logger.error("Health check reported status %r (%s)", status, url)
        return False
    return True


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)

    url = argv[0] if argv else default_url(settings.port)
    return 0 if check(url) else 1


if __name__ == '__main__':
    sys.exit(main())
