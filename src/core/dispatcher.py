"""
改写流水线 - 分段分发与合并
长文本切分后并发改写，按原顺序合并；短文本直接单次改写
"""

import time
import asyncio
import logging
from typing import Awaitable, Callable, List, Optional

from ..models.api_models import HumanizeSettings
from ..models.data_models import PipelineResult, RewriteRequest, Segment
from .text_splitter import DEFAULT_CHUNK_SIZE, PARAGRAPH_SEPARATOR, build_segments

logger = logging.getLogger(__name__)

RewriteFunction = Callable[[str, HumanizeSettings, bool], Awaitable[str]]
PreflightFunction = Callable[[HumanizeSettings], None]


def format_segment_error(error: BaseException) -> str:
    """生成嵌入结果中的分段错误标记"""
    return f"[Error on this segment: {error}]"


class HumanizePipeline:
    """分段改写流水线"""

    def __init__(
        self,
        rewrite: RewriteFunction,
        chunk_threshold: int = DEFAULT_CHUNK_SIZE,
        preflight: Optional[PreflightFunction] = None,
    ):
        self.rewrite = rewrite
        self.chunk_threshold = chunk_threshold
        self.preflight = preflight

    async def run(self, text: str, settings: HumanizeSettings) -> PipelineResult:
        """
        执行改写

        分发前的错误（配置缺失等）直接抛出；短文本的单次调用失败也直接抛出；
        长文本分发开始后不会抛出，失败片段以错误标记留在原位置。
        """
        execution_id = int(time.time() * 1000)

        if self.preflight is not None:
            self.preflight(settings)

        if not text.strip():
            logger.warning(f"[{execution_id}] ⚠️ 输入文本为空，跳过改写")
            return PipelineResult(text="", segment_count=0, chunked=False, failed_segments=[])

        segments = build_segments(text, self.chunk_threshold)

        if len(text) <= self.chunk_threshold:
            logger.info(f"[{execution_id}] 📝 短文本 ({len(text)} 字符)，单次改写")
            result = await self.rewrite(segments[0].content, settings, False)
            return PipelineResult(text=result, segment_count=1, chunked=False, failed_segments=[])

        return await self._dispatch(execution_id, segments, settings)

    async def _dispatch(
        self, execution_id: int, segments: List[Segment], settings: HumanizeSettings
    ) -> PipelineResult:
        """并发改写所有片段，等待全部完成后按序号合并"""
        logger.info(f"[{execution_id}] 🚀 开始并发处理 {len(segments)} 个片段...")
        start_time = time.time()

        results: List[Optional[str]] = [None] * len(segments)
        failed: List[int] = []

        async def process_segment(request: RewriteRequest):
            segment = request.segment
            try:
                results[segment.index] = await self.rewrite(
                    segment.content, request.settings, segment.is_partial
                )
            except Exception as e:
                logger.error(f"[{execution_id}] ❌ 片段 {segment.index} 改写失败: {e}")
                failed.append(segment.index)
                results[segment.index] = format_segment_error(e)

        await asyncio.gather(
            *(process_segment(RewriteRequest(segment=segment, settings=settings)) for segment in segments)
        )

        joined = PARAGRAPH_SEPARATOR.join(results[i] or "" for i in range(len(segments)))

        logger.info(
            f"[{execution_id}] ⚡ 并发处理完成，耗时 {time.time() - start_time:.2f} 秒，"
            f"失败片段 {len(failed)} 个"
        )
        return PipelineResult(
            text=joined,
            segment_count=len(segments),
            chunked=True,
            failed_segments=sorted(failed),
        )
