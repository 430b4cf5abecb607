"""
文本分段器
按段落边界把长文本切分为不超过阈值的片段
"""

import re
import logging
from typing import List

from ..models.data_models import Segment

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 2500
PARAGRAPH_SEPARATOR = "\n\n"

# 一个或多个空行
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


def split_text_into_chunks(text: str, max_chunk_size: int = DEFAULT_CHUNK_SIZE) -> List[str]:
    """
    按段落贪心累积切分文本

    段落按原顺序累积到当前片段中，追加下一段会超过阈值且当前片段非空时，
    先关闭当前片段。单个超长段落不会被再切分，而是独立成为一个超长片段。

    Args:
        text: 原始文本
        max_chunk_size: 片段字符数上限（软上限）

    Returns:
        去除首尾空白且非空的片段列表，保持原文顺序
    """
    chunks: List[str] = []
    current_chunk = ""

    for paragraph in _PARAGRAPH_BREAK.split(text):
        if current_chunk and len(current_chunk) + len(paragraph) > max_chunk_size:
            _close_chunk(chunks, current_chunk)
            current_chunk = ""
        current_chunk += (PARAGRAPH_SEPARATOR if current_chunk else "") + paragraph

    if current_chunk:
        _close_chunk(chunks, current_chunk)

    return chunks


def _close_chunk(chunks: List[str], chunk: str):
    stripped = chunk.strip()
    if stripped:
        chunks.append(stripped)


def build_segments(text: str, threshold: int = DEFAULT_CHUNK_SIZE) -> List[Segment]:
    """
    根据长度决定是否分段，生成带序号的片段

    长度超过阈值时按段落切分，所有片段标记为局部片段；
    否则整段文本作为唯一的非局部片段。
    """
    if len(text) > threshold:
        chunks = split_text_into_chunks(text, threshold)
        logger.info(f"✂️ 文本长度 {len(text)} 超过阈值 {threshold}，切分为 {len(chunks)} 个片段")
        return [Segment(index=i, content=chunk, is_partial=True) for i, chunk in enumerate(chunks)]

    return [Segment(index=0, content=text, is_partial=False)]
