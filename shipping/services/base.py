"""서비스 레이어 공통 모듈

배송 서비스들이 공통으로 사용하는 로깅 데코레이터와 기본 예외를 제공합니다.
"""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# 이 시간(ms)을 넘기면 느린 실행으로 경고
SLOW_CALL_THRESHOLD_MS = 100


def log_service_call(func: Callable[..., T]) -> Callable[..., T]:
    """
    서비스 메서드 호출 로깅 데코레이터

    기능:
    - 호출 시작/종료 DEBUG 로깅 (실행 시간 ms)
    - 느린 실행 경고
    - 비즈니스 예외(code/message 보유)는 WARNING
    - 그 외 예외는 ERROR (스택 트레이스 포함)

    사용법:
        @classmethod
        @log_service_call
        def quote(cls, ...):
            ...
    """

    @wraps(func)
    def wrapper(*args, **kwargs) -> T:
        # "shipping.services.coverage_service" -> "CoverageService"
        module_name = func.__module__.split(".")[-1]
        service_name = module_name.replace("_service", "").title().replace("_", "") + "Service"
        func_name = func.__name__
        start_time = time.perf_counter()

        logger.debug(
            "[%s.%s] 호출 시작 | args=%s, kwargs=%s",
            service_name,
            func_name,
            args[1:3] if len(args) > 1 else (),
            kwargs,
        )

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            elapsed = (time.perf_counter() - start_time) * 1000
            if hasattr(e, "code") and hasattr(e, "message"):
                logger.warning(
                    "[%s.%s] 비즈니스 에러 | code=%s, message=%s, elapsed=%.2fms",
                    service_name,
                    func_name,
                    e.code,
                    e.message,
                    elapsed,
                )
            else:
                logger.error(
                    "[%s.%s] 예외 발생 | error=%s, elapsed=%.2fms",
                    service_name,
                    func_name,
                    str(e),
                    elapsed,
                    exc_info=True,
                )
            raise

        elapsed = (time.perf_counter() - start_time) * 1000
        logger.debug("[%s.%s] 호출 완료 | elapsed=%.2fms", service_name, func_name, elapsed)
        if elapsed > SLOW_CALL_THRESHOLD_MS:
            logger.warning("[%s.%s] 느린 실행 감지 | elapsed=%.2fms", service_name, func_name, elapsed)
        return result

    return wrapper


class ServiceError(Exception):
    """
    서비스 레이어 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        code: 에러 코드 (API 응답에 활용)
        details: 추가 상세 정보
    """

    def __init__(self, message: str, code: str = "SERVICE_ERROR", details: dict | None = None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class ShippingServiceError(ServiceError):
    """
    배송 관련 비즈니스 에러

    에러 코드:
        STORE_NOT_FOUND: 스토어가 없거나 비활성
        ADDRESS_INCOMPLETE: 최종 검증 시 지역 미선택
        ZONE_NOT_ALLOWED: 배송 불가 지역
        DELIVERY_METHOD_UNAVAILABLE: 스토어가 허용하지 않는 수령 방법
        INVALID_SUBTOTAL: 음수 소계
    """

    def __init__(self, message: str, code: str = "SHIPPING_ERROR", details: dict | None = None):
        super().__init__(message, code=code, details=details)
