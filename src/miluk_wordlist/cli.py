"""Command line interface for browsing the Miluk wordlist."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .browse import BrowseMode, RenderState, SpeakerFilter, View, canonical_form, render
from .browse.collation import ALPHABET, OTHER_BUCKET, group_label
from .browse.presentation import (
    NO_RESULTS_MESSAGE,
    SECONDARY_ONLY_LABEL,
    audio_labels,
    embed_audio_url,
    entry_count_summary,
    is_secondary_only,
    notes_paragraphs,
)
from .browse.text import normalize_for_display
from .common.config import Settings, load_settings
from .lexicon import LexicalEntry, load_wordlist

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool, default_level: str = "INFO") -> None:
    level = logging.DEBUG if verbose else getattr(logging, default_level, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _apply_log_level(verbose: bool, level_name: str) -> None:
    if not verbose:
        logging.getLogger().setLevel(getattr(logging, level_name, logging.INFO))


def _add_selection_arguments(parser: argparse.ArgumentParser) -> None:
    """Flags shared by every subcommand that computes a view."""
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in BrowseMode],
        default=None,
        help="Sort order: English headwords or Miluk forms (default: from settings).",
    )
    parser.add_argument(
        "--filter",
        dest="speaker_filter",
        choices=[value.value for value in SpeakerFilter],
        default=SpeakerFilter.ALL.value,
        help="Speaker data filter (default: all).",
    )
    parser.add_argument("--query", default="", help="Search text.")
    parser.add_argument(
        "--dataset",
        type=Path,
        default=None,
        help="Wordlist JSON to load instead of the configured one.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output with indentation.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional path to write the output. Defaults to stdout.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Search, filter and browse the Miluk wordlist.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    browse = subparsers.add_parser("browse", help="List the visible entries with dividers.")
    _add_selection_arguments(browse)
    _add_output_arguments(browse)
    browse.set_defaults(handler=_run_browse)

    show = subparsers.add_parser("show", help="Show one entry by its deep-link id.")
    show.add_argument("entry_id", help="Identifier as printed by 'browse'.")
    _add_selection_arguments(show)
    _add_output_arguments(show)
    show.set_defaults(handler=_run_show)

    letters = subparsers.add_parser("letters", help="Print the alphabetic index.")
    _add_selection_arguments(letters)
    letters.set_defaults(handler=_run_letters)

    return parser


def _state_from_args(args: argparse.Namespace, settings: Settings) -> RenderState:
    return (
        RenderState()
        .with_mode(args.mode or settings.default_mode)
        .with_filter(args.speaker_filter)
        .with_query(args.query)
    )


def _load_view(args: argparse.Namespace, settings: Settings) -> tuple[List[LexicalEntry], View]:
    dataset = args.dataset or settings.wordlist_path
    entries = load_wordlist(dataset)
    state = _state_from_args(args, settings)
    logger.info(
        "Rendering wordlist",
        extra={"dataset": str(dataset), "mode": state.mode.value, "entries": len(entries)},
    )
    return entries, render(entries, state)


def _view_payload(view: View, total: int) -> dict[str, object]:
    rows = []
    for index, entry in zip(view.indices, view.visible):
        rows.append(
            {
                "id": view.ids[index],
                "index": index,
                "headword": entry.headword,
                "form": normalize_for_display(canonical_form(entry)),
                "letter": view.group_letters[index],
            }
        )
    return {
        "mode": view.mode.value,
        "count": len(view.visible),
        "total": total,
        "letters": sorted(view.letters),
        "entries": rows,
    }


def _format_browse_text(view: View, total: int) -> str:
    lines = [entry_count_summary(view, total)]
    if view.is_empty:
        lines.append(NO_RESULTS_MESSAGE)
        return "\n".join(lines)

    for section in view.sections:
        lines.append("")
        lines.append(f"== {section.label} ==")
        for position in range(section.start, section.start + section.count):
            index = view.indices[position]
            entry = view.visible[position]
            form = normalize_for_display(canonical_form(entry))
            if view.mode is BrowseMode.MILUK:
                primary, secondary = form, entry.headword
            else:
                primary, secondary = entry.headword, form
            text = " — ".join(part for part in (primary, secondary) if part)
            lines.append(f"  {text}  [#{view.ids[index]}]")
    return "\n".join(lines)


def _entry_payload(entry_id: str, index: int, entry: LexicalEntry) -> dict[str, object]:
    table = entry.transcriptions
    primary = table.primary_speaker if table else None
    secondary = table.secondary_speaker if table else None
    return {
        "id": entry_id,
        "index": index,
        "headword": entry.headword,
        "form": normalize_for_display(canonical_form(entry)),
        "secondary_only": is_secondary_only(entry),
        "primary_speaker": primary.model_dump() if primary else None,
        "secondary_speaker": secondary.model_dump() if secondary else None,
        "how_to_say_it": table.instant_phonetic if table else None,
        "notes": notes_paragraphs(entry),
        "audio": [
            {"label": label, "url": embed_audio_url(url)}
            for label, url in zip(
                audio_labels(entry) or [""] * len(entry.audio_sources),
                entry.audio_sources,
            )
        ],
    }


def _format_entry_text(payload: dict[str, object]) -> str:
    lines = [str(payload["headword"])]
    if payload["form"]:
        lines.append(f"  Miluk: {payload['form']}")
    if payload["secondary_only"]:
        lines.append(f"  {SECONDARY_ONLY_LABEL}")
    for slot in ("primary_speaker", "secondary_speaker"):
        record = payload[slot]
        if not record:
            continue
        for name, value in record.items():
            if value:
                lines.append(f"  {slot}.{name}: {normalize_for_display(value)}")
    if payload["how_to_say_it"]:
        lines.append(f"  How to say it: {payload['how_to_say_it']}")
    for paragraph in payload["notes"]:
        lines.append("")
        lines.append(f"  {paragraph}")
    for audio in payload["audio"]:
        label = f"{audio['label']}: " if audio["label"] else ""
        lines.append(f"  Audio: {label}{audio['url']}")
    return "\n".join(lines)


def _render_json(payload: dict[str, object], *, pretty: bool) -> str:
    if pretty:
        return json.dumps(payload, ensure_ascii=False, indent=2)
    return json.dumps(payload, ensure_ascii=False)


def _emit_output(content: str, *, output_path: Optional[Path]) -> None:
    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content + "\n", encoding="utf-8")
    else:
        print(content)


def _emit_error(message: str) -> None:
    print(message, file=sys.stderr)


def _run_browse(args: argparse.Namespace, settings: Settings) -> int:
    entries, view = _load_view(args, settings)
    if args.format == "json":
        rendered = _render_json(_view_payload(view, len(entries)), pretty=args.pretty)
    else:
        rendered = _format_browse_text(view, len(entries))
    _emit_output(rendered, output_path=args.output)
    return 0


def _run_show(args: argparse.Namespace, settings: Settings) -> int:
    _, view = _load_view(args, settings)
    found = view.find(args.entry_id)
    if found is None:
        _emit_error(f"No visible entry with id '{args.entry_id}'.")
        return 2
    index, entry = found
    payload = _entry_payload(args.entry_id, index, entry)
    if args.format == "json":
        rendered = _render_json(payload, pretty=args.pretty)
    else:
        rendered = _format_entry_text(payload)
    _emit_output(rendered, output_path=args.output)
    return 0


def _run_letters(args: argparse.Namespace, settings: Settings) -> int:
    _, view = _load_view(args, settings)
    cells = [letter if letter in view.letters else "·" for letter in ALPHABET]
    print(" ".join(cells))
    if OTHER_BUCKET in view.group_letters.values():
        print(f"(+ {group_label(OTHER_BUCKET)})")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:  # pragma: no cover - delegated to argparse
        return exc.code

    # handlers first, so warnings raised while reading settings are formatted
    _configure_logging(args.verbose)
    settings = load_settings()
    _apply_log_level(args.verbose, settings.log_level)

    try:
        return args.handler(args, settings)
    except (FileNotFoundError, ValueError) as error:
        logger.error("Command failed", exc_info=False, extra={"error": str(error)})
        _emit_error(str(error))
        return 2


if __name__ == "__main__":
    sys.exit(main())
