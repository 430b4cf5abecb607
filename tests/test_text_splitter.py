"""
Name: Text Splitter Unit Tests

Responsibilities:
  - Greedy paragraph packing under the size threshold
  - Oversized paragraphs kept whole
  - Segment construction and the partial flag
"""

import pytest

from src.core.text_splitter import build_segments, split_text_into_chunks


@pytest.mark.unit
class TestSplitTextIntoChunks:

    def test_empty_text_returns_empty_list(self):
        assert split_text_into_chunks("") == []

    def test_whitespace_only_returns_empty_list(self):
        assert split_text_into_chunks("  \n\n   \n\n\t") == []

    def test_short_text_single_chunk(self):
        assert split_text_into_chunks("Hello world.") == ["Hello world."]

    def test_oversized_paragraph_not_split(self):
        paragraph = "x" * 5000
        chunks = split_text_into_chunks(paragraph, 2500)

        assert chunks == [paragraph]

    def test_two_long_paragraphs_are_separated(self):
        first, second = "a" * 1800, "b" * 1800
        chunks = split_text_into_chunks(f"{first}\n\n{second}", 2500)

        assert chunks == [first, second]

    def test_greedy_packing_up_to_threshold(self):
        # 3 * 100 + 2 separators accumulate; the check compares buffer + paragraph
        paragraphs = ["p" * 100 for _ in range(3)]
        text = "\n\n".join(paragraphs)
        threshold = len("\n\n".join(paragraphs[:2])) + 100

        chunks = split_text_into_chunks(text, threshold)

        assert chunks == [text]

    def test_boundary_inserted_only_when_exceeding(self):
        paragraphs = ["p" * 100 for _ in range(3)]
        text = "\n\n".join(paragraphs)
        threshold = len("\n\n".join(paragraphs[:2])) + 99

        chunks = split_text_into_chunks(text, threshold)

        assert chunks == ["\n\n".join(paragraphs[:2]), paragraphs[2]]

    def test_multiple_blank_lines_are_one_boundary(self):
        text = "first\n\n\n   \n\nsecond"
        chunks = split_text_into_chunks(text, 10)

        assert chunks == ["first", "second"]

    def test_chunks_are_stripped_and_ordered(self):
        paragraphs = [f"  paragraph {i} " + "z" * 50 for i in range(6)]
        chunks = split_text_into_chunks("\n\n".join(paragraphs), 130)

        assert all(chunk == chunk.strip() and chunk for chunk in chunks)
        joined = "\n\n".join(chunks)
        positions = [joined.index(f"paragraph {i}") for i in range(6)]
        assert positions == sorted(positions)

    def test_no_paragraph_lost(self):
        paragraphs = [f"item-{i} " + "w" * (i * 40) for i in range(12)]
        chunks = split_text_into_chunks("\n\n".join(paragraphs), 300)

        rejoined = "\n\n".join(chunks)
        for paragraph in paragraphs:
            assert rejoined.count(paragraph) == 1


@pytest.mark.unit
class TestBuildSegments:

    def test_short_text_single_non_partial_segment(self):
        segments = build_segments("short text", 2500)

        assert len(segments) == 1
        assert segments[0].index == 0
        assert segments[0].content == "short text"
        assert segments[0].is_partial is False

    def test_text_at_threshold_is_not_chunked(self):
        text = "y" * 2500
        segments = build_segments(text, 2500)

        assert len(segments) == 1
        assert segments[0].is_partial is False

    def test_long_text_all_segments_partial(self):
        text = "\n\n".join(["q" * 1000 for _ in range(5)])
        segments = build_segments(text, 2500)

        assert len(segments) >= 1
        assert [segment.index for segment in segments] == list(range(len(segments)))
        assert all(segment.is_partial for segment in segments)
        assert all(segment.content and segment.content == segment.content.strip() for segment in segments)

    def test_segments_are_immutable(self):
        segment = build_segments("abc", 2500)[0]

        with pytest.raises(Exception):
            segment.content = "changed"
