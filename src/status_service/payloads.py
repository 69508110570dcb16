# 응답 페이로드 - 요청마다 새로 생성
import time
from typing import Optional

VERSION = '2.0.0'
WELCOME_MESSAGE = 'Welcome to My Java App!'
GREETING = 'Hello, CI/CD World! This is a Spring Boot Web Application.'
DEMO_USERS = ('user1', 'user2', 'user3')

STATUS_HEALTHY = 'healthy'
STATUS_RUNNING = 'running'
STATUS_UP = 'UP'


def now_millis() -> int:
    return int(time.time() * 1000)


def welcome_payload() -> dict:
    return {
        'message': WELCOME_MESSAGE,
        'status': STATUS_RUNNING,
        'version': VERSION,
    }


def status_payload(application: str, timestamp: Optional[int] = None) -> dict:
    """응답할 수 있으면 healthy 로 간주"""
    return {
        'status': STATUS_HEALTHY,
        'timestamp': now_millis() if timestamp is None else timestamp,
        'uptime': STATUS_RUNNING,
        'version': VERSION,
        'application': application,
    }


def user_list_payload() -> dict:
    users = list(DEMO_USERS)
    return {'users': users, 'count': len(users)}


def actuator_health_payload() -> dict:
    return {'status': STATUS_UP}


def actuator_info_payload(application: str) -> dict:
    return {'app': {'name': application, 'version': VERSION}}
