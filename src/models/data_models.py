"""
内部数据模型
定义系统内部使用的数据结构
"""

from dataclasses import dataclass
from typing import List

from .api_models import HumanizeSettings


@dataclass(frozen=True)
class Segment:
    """文本片段数据结构，创建后不可变"""
    index: int
    content: str
    is_partial: bool = False


@dataclass(frozen=True)
class RewriteRequest:
    """片段内容与风格设置的组合"""
    segment: Segment
    settings: HumanizeSettings


@dataclass
class PipelineResult:
    """流水线输出"""
    text: str
    segment_count: int
    chunked: bool
    failed_segments: List[int]
