"""
백로그 생성 파이프라인의 전체 흐름을 관리하는 오케스트레이터입니다.

처리 단계(파이프라인):
1. 추출 (Extraction): 파일 또는 보드에서 평문 문서를 만듭니다.
2. 프롬프트 (Prompt): 문서를 생성 모델용 프롬프트로 조립합니다.
3. 생성 (Generation): 생성 모델을 한 번 호출해서 원시 응답을 받습니다.
4. 복구 (Recovery): 원시 응답을 JSON 값으로 되살립니다.
5. 검증 (Validation): JSON 값이 백로그 스키마를 만족하는지 확인합니다.

각 단계에 진입할 때 진행 상태(ProcessingStatus)를 콜백으로 알려줍니다.
"""

import inspect
import logging
import time
from typing import Awaitable, Callable, Optional, Union

from app.exceptions import UnrecoverableResponse
from app.layers.layer1_extraction import ContentExtractor
from app.layers.layer2_prompt import PromptBuilder
from app.layers.layer3_recovery import ResponseRecovery
from app.layers.layer4_validation import SchemaValidator
from app.models import (
    BoardReference,
    ContentDocument,
    FileInput,
    InputDescriptor,
    ProcessingStatus,
    ProcessingStep,
    ProjectOutput,
)
from app.services.debug_store import DebugArtifactStore

logger = logging.getLogger(__name__)

StatusCallback = Callable[[ProcessingStatus], Union[None, Awaitable[None]]]


class PipelineOrchestrator:
    """
    추출 → 프롬프트 → 생성 → 복구 → 검증 과정을 조율하는 클래스입니다.

    모든 구성 요소는 생성자로 주입받습니다. 실행 간에 공유하는 가변 상태가 없어서
    서로 다른 요청을 동시에 처리해도 안전합니다.
    """

    def __init__(
        self,
        extractor: ContentExtractor,
        prompt_builder: PromptBuilder,
        generation_client,
        recovery: ResponseRecovery,
        validator: SchemaValidator,
        debug_store: Optional[DebugArtifactStore] = None,
    ):
        self.extractor = extractor
        self.prompt_builder = prompt_builder
        self.generation_client = generation_client
        self.recovery = recovery
        self.validator = validator
        self.debug_store = debug_store

    async def process(
        self,
        input: InputDescriptor,
        on_status: Optional[StatusCallback] = None,
    ) -> ProjectOutput:
        """
        전체 파이프라인을 실행하는 메인 함수입니다.

        Args:
            input: FileInput 또는 BoardReference
            on_status: 진행 상태를 받을 콜백 (동기/비동기 모두 가능)

        Returns:
            검증된 ProjectOutput

        Raises:
            BacklogGeneratorError 계열 예외 또는 생성 모델 오류.
            실패 시 error(0) 상태를 먼저 알린 뒤 원래 예외를 그대로 다시 발생시킵니다.
        """
        started = time.time()
        try:
            # ========== 1단계: 추출 ==========
            document = await self._extract(input, on_status)

            # ========== 2단계: 프롬프트 조립 ==========
            await self._emit(on_status, ProcessingStep.ANALYZING, "Preparing AI analysis...", 40)
            prompt = self.prompt_builder.build(document)

            # ========== 3단계: 생성 ==========
            await self._emit(
                on_status, ProcessingStep.GENERATING,
                "Generating project breakdown with AI...", 60,
            )
            raw_text = await self.generation_client.generate(prompt)
            logger.info(f"[Orchestrator] 원시 응답 수신 ({len(raw_text)}자)")

            # ========== 4~5단계: 복구 + 검증 ==========
            await self._emit(
                on_status, ProcessingStep.GENERATING,
                "Parsing and validating AI response...", 90,
            )
            value = await self._recover(raw_text)
            output = self.validator.validate(value)

            await self._emit(on_status, ProcessingStep.COMPLETE, "Processing complete!", 100)
            logger.info(
                f"[Orchestrator] 완료 - 에픽 {len(output.epics)}개, 스토리 {output.story_count}개, "
                f"리스크 {len(output.risks)}개, 가정 {len(output.assumptions)}개 "
                f"({time.time() - started:.2f}초)"
            )
            return output

        except Exception as e:
            logger.error(f"[Orchestrator] 처리 실패: {e}")
            try:
                await self._emit(on_status, ProcessingStep.ERROR, str(e) or "Processing failed", 0)
            except Exception as emit_error:
                # 콜백 실패가 원래 예외를 덮어쓰지 않도록 기록만 함
                logger.error(f"[Orchestrator] error 상태 전달 실패: {emit_error}")
            raise

    async def process_board(
        self,
        board_id: str,
        on_status: Optional[StatusCallback] = None,
    ) -> ProjectOutput:
        """보드 ID로 바로 처리합니다. (기존 /process/{board_id} 경로 호환용)"""
        return await self.process(BoardReference(reference=board_id), on_status)

    async def _extract(
        self,
        input: InputDescriptor,
        on_status: Optional[StatusCallback],
    ) -> ContentDocument:
        if isinstance(input, BoardReference):
            await self._emit(on_status, ProcessingStep.CONNECTING, "Connecting to Miro...", 10)
            board_id = self.extractor.resolve_board_id(input.reference)

            await self._emit(on_status, ProcessingStep.READING, "Reading board content...", 20)
            return await self.extractor.extract_board(board_id)

        if isinstance(input, FileInput):
            await self._emit(
                on_status, ProcessingStep.READING, "Extracting content from file...", 20,
            )
            return await self.extractor.extract_file(input)

        # 알 수 없는 디스크립터는 추출기가 UnsupportedInputKind로 처리
        return await self.extractor.extract(input)

    async def _recover(self, raw_text: str):
        """복구 실패 시 원시 응답을 디버그 산출물로 남기고 경로를 예외에 기록합니다."""
        try:
            return self.recovery.recover(raw_text)
        except UnrecoverableResponse as e:
            if self.debug_store is not None:
                path = await self.debug_store.save_raw_response(raw_text)
                if path:
                    if isinstance(e.details, dict):
                        e.details["artifact_path"] = path
                    else:
                        e.details = {"artifact_path": path}
            raise

    async def _emit(
        self,
        callback: Optional[StatusCallback],
        step: ProcessingStep,
        message: str,
        progress: int,
    ):
        """진행 상태를 기록하고 콜백으로 전달하는 함수"""
        logger.info(f"[Orchestrator] {step.value}: {message} ({progress}%)")
        if callback is None:
            return
        result = callback(ProcessingStatus(step=step, message=message, progress=progress))
        if inspect.isawaitable(result):
            await result
