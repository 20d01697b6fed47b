from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """
    애플리케이션의 설정을 관리하는 클래스입니다.
    환경 변수(.env 파일)에서 설정값을 읽어옵니다.

    자격 증명(API 키)은 서버 시작 시점이 아니라 실제로 사용하는 시점에 검사합니다.
    (키가 없어도 mock 보드와 테스트 경로는 정상 동작)
    """

    # 생성 모델 설정: Gemini API 키와 모델 이름
    google_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    max_output_tokens: int = 8192  # 응답 최대 토큰 수
    temperature: float = 0.2  # JSON 출력을 위해 낮은 온도 사용

    # 보드(Miro) 설정
    miro_enabled: bool = False  # False면 내장 mock 보드 데이터를 사용
    miro_api_key: str = ""
    miro_api_base: str = "https://api.miro.com/v2"
    miro_page_size: int = 50

    # 프롬프트 템플릿과 디버그 산출물 경로
    prompts_dir: str = ""  # 비어 있으면 패키지에 포함된 prompts/ 사용
    debug_dir: str = "workspace/debug"

    # 업로드 제한
    max_file_size_mb: int = 10
    max_filename_length: int = 255

    # 서버 설정: 서버가 실행될 주소와 포트 번호
    host: str = "0.0.0.0"  # 모든 외부 접속 허용
    port: int = 8000
    allowed_origins: list[str] = ["http://localhost:3000"]

    class Config:
        # 설정을 읽어올 파일 지정
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """
    설정을 가져오는 함수입니다.
    @lru_cache를 사용하여 한 번 읽은 설정은 메모리에 저장해두고 재사용합니다.
    """
    return Settings()
