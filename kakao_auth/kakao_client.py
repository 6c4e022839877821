"""
카카오 OAuth 클라이언트.

인가 코드 -> 액세스 토큰 교환, 액세스 토큰 -> 사용자 정보 조회 두 번의 HTTP 호출만 한다.
requests 기반의 블로킹 호출이므로 비동기 핸들러에서는 run_in_threadpool 로 감싸서 부른다.
재시도는 하지 않는다.
"""
from dataclasses import dataclass

import requests

from .config import Settings, settings
from .errors import ProviderError

@dataclass(frozen=True)
class KakaoConfig:
    client_id: str
    client_secret: str
    redirect_uri: str
    token_url: str = "https://kauth.kakao.com/oauth/token"
    user_info_url: str = "https://kapi.kakao.com/v2/user/me"
    timeout: float = 10.0

    @classmethod
    def from_settings(cls, s: Settings) -> "KakaoConfig":
        return cls(
            client_id=s.KAKAO_CLIENT_ID,
            client_secret=s.KAKAO_CLIENT_SECRET,
            redirect_uri=s.KAKAO_REDIRECT_URI,
            token_url=s.KAKAO_TOKEN_URL,
            user_info_url=s.KAKAO_USER_INFO_URL,
            timeout=s.KAKAO_HTTP_TIMEOUT,
        )


class KakaoClient:
    def __init__(self, config: KakaoConfig, session: requests.Session | None = None):
        self.config = config
        self.session = session or requests.Session()

    def exchange_code(self, code: str) -> str:
        """인가 코드를 액세스 토큰으로 교환한다."""
        form = {
            "grant_type": "authorization_code",
            "client_id": self.config.client_id,
            "redirect_uri": self.config.redirect_uri,
            "code": code,
            "client_secret": self.config.client_secret,
        }
        try:
            r = self.session.post(
                self.config.token_url,
                data=form,
                headers={"Content-Type": "application/x-www-form-urlencoded;charset=utf-8"},
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise ProviderError(f"token request failed: {e}") from e

        if r.status_code >= 400:
            # 잘못된/만료된 인가 코드는 보통 400 (KOE320 등)
            raise ProviderError(f"token endpoint returned {r.status_code}: {r.text[:200]}", r.status_code)

        body = _json(r)
        access_token = body.get("access_token")
        if not access_token:
            raise ProviderError("token response has no access_token", r.status_code)
        return access_token

    def fetch_profile(self, access_token: str) -> dict:
        try:
            r = self.session.get(
                self.config.user_info_url,
                headers={"Authorization": f"Bearer {access_token}"},
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise ProviderError(f"user info request failed: {e}") from e

        if r.status_code >= 400:
            raise ProviderError(f"user info endpoint returned {r.status_code}: {r.text[:200]}", r.status_code)

        return _json(r)


def _json(r: requests.Response) -> dict:
    try:
        body = r.json()
    except ValueError as e:
        raise ProviderError(f"invalid JSON from {r.url}") from e
    if not isinstance(body, dict):
        raise ProviderError(f"unexpected JSON from {r.url}")
    return body


def extract_claims(profile: dict) -> tuple[str, str]:
    """
    카카오 사용자 정보에서 (email, nickname) 을 꺼낸다.

    필드 존재 여부는 따로 검증하지 않는다. 형태가 다르면 KeyError/TypeError 가 그대로 올라가고
    로그인 핸들러에서 UpstreamError 로 바뀐다.
    """
    email = profile["kakao_account"]["email"]
    name = profile["properties"]["nickname"]
    return email, name


def get_kakao_client():
    # FastAPI 의존성. 로그인 요청마다 세션을 열고 응답 후 닫는다.
    # 테스트에서는 app.dependency_overrides 로 교체한다.
    client = KakaoClient(KakaoConfig.from_settings(settings))
    try:
        yield client
    finally:
        client.session.close()
