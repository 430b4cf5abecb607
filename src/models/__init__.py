"""
数据模型模块
定义系统中使用的所有数据结构
"""

from .api_models import (
    Provider,
    Quality,
    Mode,
    Level,
    ModelType,
    HumanizeSettings,
    HumanizeRequest,
    HumanizeResponse,
    ErrorResponse,
    ModelQuota,
    QuotaStatus,
)
from .data_models import Segment, RewriteRequest, PipelineResult

__all__ = [
    'Provider',
    'Quality',
    'Mode',
    'Level',
    'ModelType',
    'HumanizeSettings',
    'HumanizeRequest',
    'HumanizeResponse',
    'ErrorResponse',
    'ModelQuota',
    'QuotaStatus',
    'Segment',
    'RewriteRequest',
    'PipelineResult'
]
