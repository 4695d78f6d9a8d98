"""Presentation helpers for lookup results.

Presentation code only relies on two conventions of ``point``: it
starts with the error marker on failure, and it contains "or" when two
travel points are acceptable.
"""

from __future__ import annotations

from typing import List, Optional

from .config import get_config
from .domain.models import LookupResult, ResolutionStatus, is_ambiguous_label

NOTE_ERROR = "※ 地点特定に失敗しました。入力内容を確認するか、市役所にご確認ください。"
NOTE_AMBIGUOUS = (
    "※「or」を含む結果は、旅費規定の運用に基づき、いずれかの地点を適用してください。"
    "システム側で単一に限定することはできません。"
)
NOTE_SUCCESS = "※ 特定された地点が旅費算定の基準となります。"


def classify_point(point: str, error_marker: Optional[str] = None) -> ResolutionStatus:
    """Classify a travel point string by its boundary conventions."""
    marker = error_marker or get_config().resolution.error_marker
    if point.startswith(marker):
        return ResolutionStatus.ERROR
    if is_ambiguous_label(point):
        return ResolutionStatus.AMBIGUOUS
    return ResolutionStatus.SUCCESS


def note_for(result: LookupResult, error_marker: Optional[str] = None) -> str:
    """Return the guidance note shown under a result."""
    status = classify_point(result.point, error_marker)
    if status is ResolutionStatus.ERROR:
        return NOTE_ERROR
    if status is ResolutionStatus.AMBIGUOUS:
        return NOTE_AMBIGUOUS
    return NOTE_SUCCESS


def format_result(
    result: LookupResult,
    municipality_prefix: Optional[str] = None,
    error_marker: Optional[str] = None,
) -> str:
    """Format a lookup result as human-readable text.

    Args:
        result: The lookup result.
        municipality_prefix: Prefix shown before the matched town. Pass
            the resolving service's ``matching_config`` value; defaults
            to the app config.
        error_marker: Error marker of the resolving service.
    """
    if municipality_prefix is None:
        municipality_prefix = get_config().matching.municipality_prefix
    lines: List[str] = []
    if result.source:
        lines.append(f"検索対象: {result.source}")
    if result.matched_town:
        lines.append(f"適用データ: {municipality_prefix}{result.matched_town}")
    if result.matched_range_description:
        lines.append(f"適用範囲: {result.matched_range_description}")
    lines.append(f"旅費地点: {result.point}")
    if result.suggestions:
        lines.append(f"候補: {'、'.join(result.suggestions)}")
    lines.append(note_for(result, error_marker))
    return "\n".join(lines)
