"""
改写器模块
包含提示词构建和大模型调用
"""

from .llm_rewriter import LLMRewriter

__all__ = [
    'LLMRewriter'
]
