"""
API数据模型
定义API请求和响应的数据结构
"""

from enum import Enum
from typing import Dict, Optional
from pydantic import BaseModel, Field


class Provider(str, Enum):
    """大模型服务商"""
    GEMINI = "Gemini"
    GROQ = "Groq"


class Quality(str, Enum):
    """质量档位"""
    QUALITE = "Qualité"
    EQUILIBRE = "Équilibre"
    AMELIORE = "Amélioré"


class Mode(str, Enum):
    """改写风格"""
    GENERAL = "Général"
    ACADEMIQUE = "Académique"
    BLOG = "Blog"
    FORMEL = "Formel"
    INFORMEL = "Informel"
    DEVELOPPER = "Développer"
    SIMPLIFIER = "Simplifier"


class Level(str, Enum):
    """改写强度"""
    BASIQUE = "Basique"
    PILOTE_AUTOMATIQUE = "Pilote automatique"


class ModelType(str, Enum):
    """服务商模型"""
    GEMINI_FLASH = "gemini-2.5-flash-lite"
    GEMINI_PRO = "gemini-2.5-pro"
    GROQ_FAST = "llama-3.1-8b-instant"
    GROQ_QUALITY = "llama-3.3-70b-versatile"


class HumanizeSettings(BaseModel):
    """改写设置"""
    provider: Provider = Field(default=Provider.GROQ, description="服务商")
    quality: Quality = Field(default=Quality.EQUILIBRE, description="质量档位")
    mode: Mode = Field(default=Mode.GENERAL, description="改写风格")
    level: Level = Field(default=Level.PILOTE_AUTOMATIQUE, description="改写强度")

    model_config = {"frozen": True}


class HumanizeRequest(BaseModel):
    """改写请求"""
    text: str = Field(description="待改写文本")
    settings: HumanizeSettings = Field(default_factory=HumanizeSettings, description="改写设置")


class HumanizeResponse(BaseModel):
    """改写响应"""
    result: str = Field(description="改写结果")
    segment_count: int = Field(description="分段数量", default=1)
    chunked: bool = Field(description="是否分段处理", default=False)
    processing_time: Optional[float] = Field(description="处理时间(秒)", default=None)


class ErrorResponse(BaseModel):
    """错误响应"""
    error: str = Field(description="错误信息")


class ModelQuota(BaseModel):
    """单个模型的配额使用情况"""
    used: int = Field(description="今日已用次数")
    limit: int = Field(description="每日上限")
    remaining: int = Field(description="剩余次数")


class QuotaStatus(BaseModel):
    """配额状态"""
    enabled: bool = Field(description="是否启用配额")
    models: Dict[str, ModelQuota] = Field(description="按模型统计的配额")
