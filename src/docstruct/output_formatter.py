"""Format analyzed sections into summary, tree, and content outputs."""

from __future__ import annotations

try:
    import tiktoken
except ImportError:  # pragma: no cover - optional dependency
    tiktoken = None

from docstruct.schemas import AnalysisResult, OutlineResult, Section
from docstruct.sections import walk_sections


def format_outline(result: AnalysisResult, *, title: str | None = None) -> OutlineResult:
    """Create summary, section tree, and markdown content."""
    sections = result.sections
    tree = "Sections:\n" + _create_sections_tree(sections)
    content = _render_content(sections)

    summary_lines = []
    if title:
        summary_lines.append(f"Document: {title}")
    summary_lines.append(f"Sections: {len(sections)}")
    summary_lines.append(f"Source: {result.source}")
    if result.fallback_reason:
        summary_lines.append(f"Fallback: {result.fallback_reason}")
    if not result.complete:
        summary_lines.append("Status: cancelled before the last chunk")

    token_estimate = _format_token_count(tree + "\n" + content)
    if token_estimate:
        summary_lines.append(f"Estimated tokens: {token_estimate}")

    return OutlineResult(summary="\n".join(summary_lines), sections_tree=tree, content=content)


def _render_content(sections: list[Section]) -> str:
    blocks: list[str] = []
    for section, depth in walk_sections(sections):
        blocks.append(f"{'#' * min(depth + 1, 6)} {section.title}")
        if section.content:
            blocks.append(section.content)
    return "\n\n".join(blocks).strip()


def _create_sections_tree(sections: list[Section]) -> str:
    return "\n".join(" " * (depth * 4) + section.title for section, depth in walk_sections(sections))


def _format_token_count(text: str) -> str | None:
    if not tiktoken:
        return None
    try:
        encoding = tiktoken.get_encoding("o200k_base")
        total_tokens = len(encoding.encode(text, disallowed_special=()))
    except Exception:
        return None

    if total_tokens >= 1_000_000:
        return f"{total_tokens / 1_000_000:.1f}M"
    if total_tokens >= 1_000:
        return f"{total_tokens / 1_000:.1f}k"
    return str(total_tokens)
