"""Gemini generation client service.

Google Gemini(google-genai SDK)를 래핑하여 비동기 생성 호출을 제공합니다.

주요 기능:
- generate(): 프롬프트(+선택적 바이너리 첨부 1개) → 원시 응답 텍스트

실행 환경:
- GOOGLE_API_KEY 설정 필요 (호출 시점에 검사, 서버 시작 시에는 검사하지 않음)
- ThreadPoolExecutor를 사용하여 동기 SDK 호출을 비동기로 래핑

재시도 정책:
- 재시도하지 않음. 네트워크/공급자 에러는 그대로 호출자에게 전파됩니다.
"""

import asyncio
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from google import genai
from google.genai import types

from app.config import Settings, get_settings
from app.exceptions import GenerationUnavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Attachment:
    """모델 호출에 함께 보내는 바이너리 첨부 (이미지, PDF)."""

    data: bytes
    mime_type: str


class GeminiClient:
    """
    Gemini 생성 모델 래퍼 클래스.

    출력 토큰 수 상한과 고정된 샘플링 온도로 설정된 단일 호출을 수행합니다.

    Attributes:
        _model: 사용할 모델 이름
        _max_output_tokens: 응답 최대 토큰 수
        _temperature: 샘플링 온도
        _executor: SDK 호출용 ThreadPoolExecutor
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        GeminiClient 초기화.

        SDK 클라이언트는 첫 호출 때 생성됩니다. 자격 증명이 없어도
        인스턴스 생성은 성공하므로 테스트/mock 경로에서 키가 필요 없습니다.
        """
        self._settings = settings or get_settings()
        self._model = self._settings.gemini_model
        self._max_output_tokens = self._settings.max_output_tokens
        self._temperature = self._settings.temperature
        self._client: Optional[genai.Client] = None

        # CPU 코어 수 기반 workers 설정 (최소 2, 최대 8)
        cpu_count = os.cpu_count() or 4
        max_workers = min(8, max(2, cpu_count))
        self._executor = ThreadPoolExecutor(max_workers=max_workers)

        logger.info(f"[Gemini] 초기화 완료 (model={self._model}, workers={max_workers})")

    @property
    def is_configured(self) -> bool:
        """자격 증명이 설정되어 있는지 여부."""
        return bool(self._settings.google_api_key)

    def _get_client(self) -> genai.Client:
        """SDK 클라이언트를 가져옵니다. 키가 없으면 GenerationUnavailable."""
        if not self._settings.google_api_key:
            raise GenerationUnavailable(
                "GOOGLE_API_KEY environment variable is not set"
            )
        if self._client is None:
            self._client = genai.Client(api_key=self._settings.google_api_key)
        return self._client

    async def generate(
        self,
        prompt: str,
        attachment: Optional[Attachment] = None,
    ) -> str:
        """
        Send a generation request to Gemini.

        Args:
            prompt: Instruction text
            attachment: Optional single binary part (image or PDF)

        Returns:
            Raw response text (may be empty if the model returned no text)

        Raises:
            GenerationUnavailable: credential is not configured
        """
        client = self._get_client()

        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            self._executor, self._generate_sync, client, prompt, attachment
        )

    def _generate_sync(
        self,
        client: genai.Client,
        prompt: str,
        attachment: Optional[Attachment],
    ) -> str:
        """Run a single generate_content call synchronously."""
        contents: list = [prompt]
        if attachment is not None:
            contents.append(
                types.Part.from_bytes(data=attachment.data, mime_type=attachment.mime_type)
            )

        logger.info(
            f"[Gemini] 프롬프트 길이: {len(prompt)} chars"
            + (f", 첨부: {attachment.mime_type} {len(attachment.data)} bytes" if attachment else "")
        )
        start_time = datetime.now()

        response = client.models.generate_content(
            model=self._model,
            contents=contents,
            config=types.GenerateContentConfig(
                temperature=self._temperature,
                max_output_tokens=self._max_output_tokens,
            ),
        )

        text = response.text or ""
        elapsed = (datetime.now() - start_time).total_seconds()
        logger.info(f"[Gemini] 완료: {elapsed:.1f}초, 응답 길이: {len(text)} chars")
        return text

    def close(self):
        """스레드 풀 정리."""
        self._executor.shutdown(wait=False)
