"""
异常定义
请求级错误（配置、访问、配额、单次改写失败）向上抛出，
分段级错误只在调度器内部转换为行内错误标记
"""


class HumanizerError(Exception):
    """服务异常基类"""


class ConfigurationError(HumanizerError):
    """分发前的配置错误，如缺少服务商密钥"""


class RewriteError(HumanizerError):
    """服务商调用失败"""


class EmptyTextError(HumanizerError):
    """输入文本为空"""


class AccessDeniedError(HumanizerError):
    """访问码校验失败"""


class QuotaExceededError(HumanizerError):
    """模型每日配额已用完"""

    def __init__(self, model: str, limit: int):
        self.model = model
        self.limit = limit
        super().__init__(
            f"Quota journalier atteint pour ce modèle ({limit} req/j). "
            f"Passez à un autre modèle ou attendez demain."
        )
