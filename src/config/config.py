"""
系统配置管理
"""

import os
import logging


TRUE_VALUES = ("true", "1", "yes", "on")


class Config:
    """系统配置类"""

    def __init__(self):
        self._setup_environment()
        self._setup_logging()

    def _setup_environment(self):
        """设置环境变量"""
        # 服务商密钥
        os.environ["GROQ_API_KEY"] = os.getenv("GROQ_API_KEY", "")
        os.environ["GEMINI_API_KEY"] = os.getenv("GEMINI_API_KEY", os.getenv("API_KEY", ""))

        # OpenAI 兼容接口地址
        os.environ["GROQ_BASE_URL"] = os.getenv("GROQ_BASE_URL", "https://api.groq.com/openai/v1")
        os.environ["GEMINI_BASE_URL"] = os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/openai/")

        # Gemini 访问码
        os.environ["ADMIN_CODE"] = os.getenv("ADMIN_CODE", os.getenv("VITE_ADMIN_CODE", ""))

        # 分段配置
        os.environ["CHUNK_THRESHOLD"] = os.getenv("CHUNK_THRESHOLD", "2500")
        os.environ["LLM_TOP_P"] = os.getenv("LLM_TOP_P", "0.95")

        # 配额配置
        os.environ["QUOTA_ENABLED"] = os.getenv("QUOTA_ENABLED", "true")

        # 日志与调试配置
        os.environ["LOG_LEVEL"] = os.getenv("LOG_LEVEL", "INFO")
        os.environ["DEBUG_REQUEST_BODY"] = os.getenv("DEBUG_REQUEST_BODY", "false")

    def _setup_logging(self):
        """设置日志配置"""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        logging.basicConfig(level=level)

    @property
    def groq_api_key(self) -> str:
        return os.environ.get("GROQ_API_KEY", "")

    @property
    def gemini_api_key(self) -> str:
        return os.environ.get("GEMINI_API_KEY", "")

    @property
    def groq_base_url(self) -> str:
        return os.environ.get("GROQ_BASE_URL", "")

    @property
    def gemini_base_url(self) -> str:
        return os.environ.get("GEMINI_BASE_URL", "")

    @property
    def admin_code(self) -> str:
        """Gemini 访问码，为空表示未配置"""
        return os.environ.get("ADMIN_CODE", "")

    @property
    def chunk_threshold(self) -> int:
        """长文本阈值（字符数），同时作为分段上限"""
        return int(os.environ.get("CHUNK_THRESHOLD", "2500"))

    @property
    def top_p(self) -> float:
        return float(os.environ.get("LLM_TOP_P", "0.95"))

    @property
    def quota_enabled(self) -> bool:
        """是否启用每日配额"""
        return os.environ.get("QUOTA_ENABLED", "true").lower() in TRUE_VALUES

    @property
    def log_level(self) -> str:
        return os.environ.get("LOG_LEVEL", "INFO")

    @property
    def debug_request_body(self) -> bool:
        """是否开启请求体调试日志"""
        return os.environ.get("DEBUG_REQUEST_BODY", "false").lower() in TRUE_VALUES
