"""Tests for structure inference through the language-model service."""

from __future__ import annotations

import asyncio
import json
from unittest.mock import AsyncMock, patch

import pytest

from docstruct.exceptions import MalformedResponseError, RateLimitError
from docstruct.llm_structure import request_chunk_structure, split_into_chunks, structure_with_llm
from docstruct.sections import forest_errors


def _reply(*triples: tuple[str, str, int]) -> str:
    return json.dumps({"sections": [{"title": t, "content": c, "level": lvl} for t, c, lvl in triples]})


class TestSplitIntoChunks:
    """Tests for split_into_chunks."""

    def test_short_text_is_one_chunk(self) -> None:
        assert split_into_chunks("abc", 10) == ["abc"]

    def test_splits_on_line_boundaries(self) -> None:
        assert split_into_chunks("aaaa\nbbbb\n", 5) == ["aaaa\n", "bbbb\n"]

    def test_hard_cut_without_newlines(self) -> None:
        assert split_into_chunks("abcdefghij", 4) == ["abcd", "efgh", "ij"]

    def test_chunks_reassemble(self) -> None:
        text = "\n".join(f"line {i} with some words" for i in range(200))
        assert "".join(split_into_chunks(text, 300)) == text

    def test_rejects_non_positive_size(self) -> None:
        with pytest.raises(ValueError):
            split_into_chunks("abc", 0)


class TestRequestChunkStructure:
    """Tests for request_chunk_structure."""

    @pytest.mark.asyncio
    async def test_parses_triples(self) -> None:
        reply = _reply(("Chapter 1", "Intro", 1), ("Basics", None, 2))
        with patch("docstruct.llm_structure.create_chat_completion", new_callable=AsyncMock, return_value=reply):
            sections = await request_chunk_structure(
                "text", is_first_chunk=True, is_last_chunk=True, chunk_index=0
            )

        assert [(s.title, s.content, s.level) for s in sections] == [("Chapter 1", "Intro", 1), ("Basics", "", 2)]

    @pytest.mark.asyncio
    async def test_accepts_bare_array(self) -> None:
        reply = '[{"title": "Part", "content": "x", "level": 1}]'
        with patch("docstruct.llm_structure.create_chat_completion", new_callable=AsyncMock, return_value=reply):
            sections = await request_chunk_structure(
                "text", is_first_chunk=True, is_last_chunk=True, chunk_index=0
            )
        assert sections[0].title == "Part"

    @pytest.mark.asyncio
    async def test_prompt_carries_chunk_position(self) -> None:
        with patch(
            "docstruct.llm_structure.create_chat_completion", new_callable=AsyncMock, return_value=_reply()
        ) as mock_completion:
            await request_chunk_structure("text", is_first_chunk=False, is_last_chunk=True, chunk_index=3)

        messages = mock_completion.call_args.args[0]
        assert "This is chunk 3 of the document. It is the last chunk." in messages[1]["content"]
        assert mock_completion.call_args.kwargs["temperature"] == 0.2

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "reply",
        [
            _reply(("Deep", "x", 6)),
            _reply(("   ", "x", 1)),
            '{"sections": [{"content": "no title", "level": 1}]}',
        ],
    )
    async def test_invalid_triples_are_rejected(self, reply: str) -> None:
        with patch("docstruct.llm_structure.create_chat_completion", new_callable=AsyncMock, return_value=reply):
            with pytest.raises(MalformedResponseError):
                await request_chunk_structure("text", is_first_chunk=True, is_last_chunk=True, chunk_index=0)


class TestStructureWithLlm:
    """Tests for structure_with_llm."""

    @pytest.mark.asyncio
    async def test_single_chunk(self) -> None:
        reply = _reply(("Chapter 1", "Intro text", 1), ("1.1 Basics.", "Basics text", 2), ("Empty", "", 1))
        with patch("docstruct.llm_structure.create_chat_completion", new_callable=AsyncMock, return_value=reply):
            sections, complete = await structure_with_llm("some text")

        assert complete
        assert [s.id for s in sections] == ["section-0-0", "section-0-1"]
        assert sections[1].title == "1.1 Basics"
        assert sections[1].parent == "section-0-0"
        assert forest_errors(sections) == []

    @pytest.mark.asyncio
    async def test_parents_carry_across_chunks(self) -> None:
        replies = [_reply(("Part One", "x", 1)), _reply(("Sub", "y", 2))]
        with patch(
            "docstruct.llm_structure.create_chat_completion", new_callable=AsyncMock, side_effect=replies
        ) as mock_completion:
            sections, complete = await structure_with_llm("aaaa\nbbbb\n", chunk_size=5)

        assert complete
        assert mock_completion.await_count == 2
        assert [s.id for s in sections] == ["section-0-0", "section-1-0"]
        assert sections[1].parent == "section-0-0"
        assert sections[0].children == ("section-1-0",)

    @pytest.mark.asyncio
    async def test_cancellation_keeps_partial_result(self) -> None:
        cancel_event = asyncio.Event()

        async def first_reply(*args: object, **kwargs: object) -> str:
            cancel_event.set()
            return _reply(("Part One", "x", 1))

        with patch(
            "docstruct.llm_structure.create_chat_completion", new_callable=AsyncMock, side_effect=first_reply
        ) as mock_completion:
            sections, complete = await structure_with_llm(
                "aaaa\nbbbb\n", chunk_size=5, cancel_event=cancel_event
            )

        assert not complete
        assert mock_completion.await_count == 1
        assert [s.title for s in sections] == ["Part One"]

    @pytest.mark.asyncio
    async def test_cancelled_before_start(self) -> None:
        cancel_event = asyncio.Event()
        cancel_event.set()
        with patch("docstruct.llm_structure.create_chat_completion", new_callable=AsyncMock) as mock_completion:
            sections, complete = await structure_with_llm("text", cancel_event=cancel_event)

        assert (sections, complete) == ([], False)
        mock_completion.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_sections_is_an_error(self) -> None:
        with patch("docstruct.llm_structure.create_chat_completion", new_callable=AsyncMock, return_value=_reply()):
            with pytest.raises(MalformedResponseError):
                await structure_with_llm("text")

    @pytest.mark.asyncio
    async def test_service_errors_propagate(self) -> None:
        with patch(
            "docstruct.llm_structure.create_chat_completion",
            new_callable=AsyncMock,
            side_effect=RateLimitError("slow down", retry_after=60),
        ):
            with pytest.raises(RateLimitError):
                await structure_with_llm("text")
