class ServiceError(Exception):
    """핸들러 경계에서 사용자에게 그대로 노출해도 되는 에러. message 는 일반 문구만 담는다."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ServiceError):
    status_code = 400


class AuthenticationError(ServiceError):
    status_code = 401


class NotFoundError(ServiceError):
    status_code = 404


class UpstreamError(ServiceError):
    # 카카오 API 또는 DB 실패
    status_code = 500


class ProviderError(Exception):
    """카카오 API 호출 실패. 내부용이며 응답에는 UpstreamError 로 바뀌어 나간다."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
