"""Inspect per-line heading scores and the inferred outline of a document."""

from __future__ import annotations

import argparse
from pathlib import Path

from docstruct.config import DEFAULT_HEURISTICS
from docstruct.disambiguator import disambiguate
from docstruct.extraction import extract_pdf_text
from docstruct.line_scorer import score_lines, select_candidates
from docstruct.output_formatter import format_outline
from docstruct.schemas import AnalysisResult
from docstruct.structure import infer_sections


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect heading scores and the inferred section outline.")
    parser.add_argument("file", help="Local .txt or .pdf file")
    parser.add_argument("--min-score", type=int, default=None, help="Only show lines scoring above this")
    parser.add_argument("--content", action="store_true", help="Print the rendered markdown body too")
    args = parser.parse_args()

    text = load_text(args.file)
    lines = text.split("\n")
    min_score = DEFAULT_HEURISTICS.candidate_threshold if args.min_score is None else args.min_score

    scored = score_lines(lines)
    headers = disambiguate(select_candidates(scored))

    print("Scores:")
    for candidate in scored:
        if candidate.score <= min_score:
            continue
        confirmed = headers.get(candidate.index)
        marker = f"H{confirmed.level} {confirmed.score:>3}" if confirmed else "   -   "
        print(f"{candidate.index + 1:>6} {candidate.score:>4} L{candidate.level} {marker}  {candidate.text[:80]}")

    outline = format_outline(AnalysisResult(sections=infer_sections(text), source="heuristic"), title=args.file)
    print()
    print(outline.summary)
    print()
    print(outline.sections_tree)
    if args.content:
        print()
        print(outline.content)


def load_text(file_path: str) -> str:
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    if path.suffix.lower() == ".pdf":
        return extract_pdf_text(path.read_bytes())
    return path.read_text(encoding="utf-8")


if __name__ == "__main__":
    main()
