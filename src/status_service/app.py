# CI/CD 데모용 상태 서비스
# 헬스/상태/데모 사용자 정보를 반환하는 Flask 서버
import logging

from flask import Flask, Response, jsonify

from status_service.config import load_settings
from status_service.metrics import register_metrics
from status_service.payloads import (
    GREETING,
    STATUS_UP,
    actuator_health_payload,
    actuator_info_payload,
    status_payload,
    user_list_payload,
    welcome_payload,
)

logger = logging.getLogger('status_service')

settings = load_settings()
logging.basicConfig(level=settings.log_level)

app = Flask(__name__)
app.json.sort_keys = False


# 메인 페이지 - 애플리케이션 식별 정보
def home():
    return jsonify(welcome_payload())


# 상태 조회 - 응답 시각(epoch millis) 포함
def status():
    return jsonify(status_payload(settings.app_name))


# 데모 사용자 목록 (고정 3명)
def users():
    return jsonify(user_list_payload())


def hello():
    return Response(GREETING, mimetype='text/plain')


# 단순 헬스체크 - 본문은 "UP" 문자열
def health():
    return Response(STATUS_UP, mimetype='text/plain')


# 헬스체크 엔드포인트 - 컨테이너 HEALTHCHECK, k6 스크립트, 배포 게이트용
def actuator_health():
    return jsonify(actuator_health_payload())


# 애플리케이션 정보 (Spring actuator info 형식)
def actuator_info():
    return jsonify(actuator_info_payload(settings.app_name))


ROUTES = (
    ('/', home),
    ('/api/status', status),
    ('/api/users', users),
    ('/api/hello', hello),
    ('/health', health),
    ('/actuator/health', actuator_health),
    ('/actuator/info', actuator_info),
)

for rule, view in ROUTES:
    app.add_url_rule(rule, view_func=view, methods=['GET'])

if settings.metrics_enabled:
    register_metrics(app)


def log_startup():
    """활성 프로필, 포트, 라우트 테이블을 로그로 출력"""
    logger.info("Starting status service (profile=%s, port=%d)", settings.profile, settings.port)
    for rule, view in ROUTES:
        logger.info("- GET  %-18s -> %s", rule, view.__name__)
    if settings.metrics_enabled:
        logger.info("- GET  %-18s -> %s", '/metrics', 'metrics')


# gunicorn 워커도 기동 시 한 번 출력
log_startup()


if __name__ == '__main__':
    app.run(host=settings.host, port=settings.port)
