# 환경변수 기반 서비스 설정
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    profile: str = 'default'
    host: str = '0.0.0.0'
    port: int = 8080
    log_level: str = 'INFO'
    app_name: str = 'my-java-app'
    metrics_enabled: bool = True


def _parse_port(raw):
    try:
        port = int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"PORT must be an integer, got {raw!r}")
    if not 0 < port < 65536:
        raise ValueError(f"PORT out of range: {port}")
    return port


def load_settings(environ=None) -> Settings:
    """환경변수에서 설정을 읽어옴 (기본값: os.environ)"""
    env = os.environ if environ is None else environ

    # 기존 배포 스크립트의 SPRING_PROFILES_ACTIVE / SERVER_PORT 도 인식
    profile = env.get('APP_PROFILE') or env.get('SPRING_PROFILES_ACTIVE') or 'default'
    port = env.get('PORT') or env.get('SERVER_PORT') or '8080'

    return Settings(
        profile=profile,
        host=env.get('HOST', '0.0.0.0'),
        port=_parse_port(port),
        log_level=env.get('LOG_LEVEL', 'INFO').upper(),
        app_name=env.get('APP_NAME', 'my-java-app'),
        metrics_enabled=env.get('METRICS_ENABLED', 'true').lower() == 'true',
    )
