"""
文本处理工具
"""

import re


def count_words(content: str) -> int:
    """统计单词数"""
    if not content or not content.strip():
        return 0
    return len(content.split())


def generate_content_preview(content: str, max_chars: int = 30) -> str:
    """
    生成内容预览

    优先提取第一句话，如果第一句话超过最大字符数，则截取前N个字符

    Args:
        content: 原始内容
        max_chars: 最大字符数，默认30

    Returns:
        内容预览字符串
    """
    if not content or not content.strip():
        return ""

    cleaned_content = " ".join(content.split())

    # 以句号、问号、感叹号结尾的第一句话
    sentence_match = re.match(r'^(.*?[.?!…])(\s|$)', cleaned_content)
    if sentence_match:
        first_sentence = sentence_match.group(1)
        if len(first_sentence) <= max_chars:
            return first_sentence

    if len(cleaned_content) <= max_chars:
        return cleaned_content
    return cleaned_content[:max_chars] + "..."
