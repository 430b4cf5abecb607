"""
基于大模型的文本改写器
通过 OpenAI 兼容接口调用 Groq 或 Gemini，使用 LangChain 链执行
"""

import logging
from typing import Callable, Optional
from langchain_core.language_models import BaseChatModel
from langchain_core.prompts import ChatPromptTemplate
from langchain_openai import ChatOpenAI

from ..config.config import Config
from ..core.exceptions import ConfigurationError, RewriteError
from ..models.api_models import HumanizeSettings, Provider
from .prompt_builder import build_system_instruction, get_model, get_temperature

logger = logging.getLogger(__name__)

LLMFactory = Callable[[HumanizeSettings, str, float], BaseChatModel]


class LLMRewriter:
    """文本改写器 - 一次调用改写一个片段"""

    def __init__(self, config: Config, llm_factory: Optional[LLMFactory] = None):
        self.config = config
        self.llm_factory = llm_factory or self._create_llm

        self.prompt = ChatPromptTemplate.from_messages([
            ("system", "{system_instruction}"),
            ("human", "{text}")
        ])

    def ensure_configured(self, settings: HumanizeSettings):
        """检查服务商密钥，缺失时在分发前失败"""
        if settings.provider == Provider.GROQ and not self.config.groq_api_key:
            raise ConfigurationError("Clé Groq manquante sur le serveur.")
        if settings.provider == Provider.GEMINI and not self.config.gemini_api_key:
            raise ConfigurationError("Clé Gemini manquante sur le serveur.")

    def _create_llm(self, settings: HumanizeSettings, model: str, temperature: float) -> BaseChatModel:
        if settings.provider == Provider.GEMINI:
            api_key, base_url = self.config.gemini_api_key, self.config.gemini_base_url
        else:
            api_key, base_url = self.config.groq_api_key, self.config.groq_base_url

        return ChatOpenAI(
            model=model,
            api_key=api_key,  # type:ignore
            base_url=base_url,
            temperature=temperature,
            top_p=self.config.top_p,
        )

    async def rewrite(self, text: str, settings: HumanizeSettings, is_partial: bool) -> str:
        """改写单个片段，失败时抛出 RewriteError"""
        self.ensure_configured(settings)

        model = get_model(settings).value
        temperature = get_temperature(settings.quality)
        chain = self.prompt | self.llm_factory(settings, model, temperature)

        logger.info(f"  🔍 调用 {settings.provider.value}/{model} (温度 {temperature}, 局部片段: {is_partial}, {len(text)} 字符)")

        try:
            response = await chain.ainvoke({
                "system_instruction": build_system_instruction(settings, is_partial),
                "text": text
            })
        except Exception as e:
            logger.error(f"{settings.provider.value} API 调用失败: {e}")
            raise RewriteError(str(e) or type(e).__name__) from e

        content = response.content if isinstance(response.content, str) else ""
        return content.strip()
