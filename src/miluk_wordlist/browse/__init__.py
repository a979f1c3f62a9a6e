"""Filter, sort, group and identify wordlist entries for display."""

from .collation import BrowseMode, build_alpha_index, group_letter, sort_entries
from .filtering import SpeakerFilter, filter_entries
from .forms import canonical_form, has_primary, has_secondary
from .identifiers import assign_ids, base_slug
from .text import first_sort_letter, normalize_for_display, normalize_for_sort
from .view import RenderState, Section, View, compute_view, render

__all__ = [
    "BrowseMode",
    "RenderState",
    "Section",
    "SpeakerFilter",
    "View",
    "assign_ids",
    "base_slug",
    "build_alpha_index",
    "canonical_form",
    "compute_view",
    "filter_entries",
    "first_sort_letter",
    "group_letter",
    "has_primary",
    "has_secondary",
    "normalize_for_display",
    "normalize_for_sort",
    "render",
    "sort_entries",
]
