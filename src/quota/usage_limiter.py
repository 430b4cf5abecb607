"""
每日配额管理
按模型统计每日调用次数，超过24小时自动清零
"""

import time
import logging
import threading
from typing import Callable, Dict, Optional

from ..core.exceptions import QuotaExceededError
from ..models.api_models import ModelQuota, ModelType, QuotaStatus

logger = logging.getLogger(__name__)

DAY_SECONDS = 24 * 60 * 60

# 免费档位每日上限
API_LIMITS: Dict[str, int] = {
    ModelType.GEMINI_FLASH.value: 20,
    ModelType.GEMINI_PRO.value: 5,
    ModelType.GROQ_FAST.value: 14400,
    ModelType.GROQ_QUALITY.value: 1000,
}


class UsageLimiter:
    """每日配额计数器"""

    def __init__(
        self,
        limits: Optional[Dict[str, int]] = None,
        enabled: bool = True,
        clock: Callable[[], float] = time.time,
    ):
        self.limits = dict(limits or API_LIMITS)
        self.enabled = enabled
        self._clock = clock
        self._usage: Dict[str, int] = {}
        self._last_reset = clock()
        self._lock = threading.Lock()

    def _reset_if_expired(self):
        now = self._clock()
        if now - self._last_reset > DAY_SECONDS:
            logger.info("🔄 配额计数已超过24小时，重置")
            self._usage = {}
            self._last_reset = now

    def remaining(self, model: str) -> int:
        with self._lock:
            self._reset_if_expired()
            return max(0, self.limits.get(model, 0) - self._usage.get(model, 0))

    def try_acquire(self, model: str):
        """
        检查并预占一次配额，两步在同一把锁内完成

        并发请求不会同时通过检查；请求失败时调用 release 归还。
        """
        if not self.enabled:
            return
        limit = self.limits.get(model, 0)
        with self._lock:
            self._reset_if_expired()
            used = self._usage.get(model, 0)
            if used >= limit:
                exhausted = True
            else:
                exhausted = False
                self._usage[model] = used + 1
        if exhausted:
            logger.warning(f"⚠️ 模型 {model} 今日配额已用完")
            raise QuotaExceededError(model, limit)
        logger.info(f"📊 模型 {model} 预占配额 {used + 1}/{limit}")

    def release(self, model: str):
        """归还预占的配额"""
        if not self.enabled:
            return
        with self._lock:
            used = self._usage.get(model, 0)
            if used > 0:
                self._usage[model] = used - 1

    def status(self) -> QuotaStatus:
        with self._lock:
            self._reset_if_expired()
            models = {
                model: ModelQuota(
                    used=self._usage.get(model, 0),
                    limit=limit,
                    remaining=max(0, limit - self._usage.get(model, 0)),
                )
                for model, limit in self.limits.items()
            }
        return QuotaStatus(enabled=self.enabled, models=models)
