"""
文本改写核心服务
整合配额、改写器和分段流水线，提供统一的服务接口
"""

import time
import logging
from typing import Optional

from ..config.config import Config
from ..core.dispatcher import HumanizePipeline
from ..core.exceptions import EmptyTextError
from ..models.api_models import HumanizeSettings
from ..models.data_models import PipelineResult
from ..quota.usage_limiter import UsageLimiter
from ..rewriters.llm_rewriter import LLMRewriter
from ..rewriters.prompt_builder import get_model
from ..utils.text_utils import count_words, generate_content_preview

logger = logging.getLogger(__name__)


class HumanizeService:
    """文本改写服务"""

    def __init__(
        self,
        config: Config,
        rewriter: Optional[LLMRewriter] = None,
        limiter: Optional[UsageLimiter] = None,
    ):
        self.config = config
        self.rewriter = rewriter or LLMRewriter(config)
        self.limiter = limiter or UsageLimiter(enabled=config.quota_enabled)
        self.pipeline = HumanizePipeline(
            rewrite=self.rewriter.rewrite,
            chunk_threshold=config.chunk_threshold,
            preflight=self.rewriter.ensure_configured,
        )

    async def humanize(self, text: str, settings: HumanizeSettings) -> PipelineResult:
        """改写文本，分发前预占配额，失败时归还"""
        execution_id = int(time.time() * 1000)

        if not text or not text.strip():
            raise EmptyTextError("Le texte d'entrée est vide.")

        model = get_model(settings).value
        self.limiter.try_acquire(model)

        logger.info(
            f"[{execution_id}] 开始改写: {count_words(text)} 词, {len(text)} 字符, "
            f"服务商 {settings.provider.value}, 模型 {model}, 风格 {settings.mode.value}, 强度 {settings.level.value}"
        )
        logger.debug(f"[{execution_id}] 📄 内容预览: {generate_content_preview(text)}")

        try:
            result = await self.pipeline.run(text, settings)
        except Exception:
            # 失败的请求不计入配额
            self.limiter.release(model)
            raise

        logger.info(f"[{execution_id}] ✅ 改写完成，共 {result.segment_count} 个片段，输出 {len(result.text)} 字符")
        return result
