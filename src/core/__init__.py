"""
核心处理模块
包含文本分段和分段改写流水线
"""

from .text_splitter import split_text_into_chunks, build_segments
from .dispatcher import HumanizePipeline, format_segment_error

__all__ = [
    'split_text_into_chunks',
    'build_segments',
    'HumanizePipeline',
    'format_segment_error'
]
