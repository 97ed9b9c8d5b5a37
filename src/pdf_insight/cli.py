from __future__ import annotations

import argparse
import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

import yaml
from tqdm import tqdm

from .config import load_config, summary_config_from
from .engine import Document, summarize_documents
from .exceptions import ConfigError
from .extractors import TEXT_EXTENSIONS, format_file_size, read_document
from .report import SummaryResult, render_summary

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOTICE = 1
EXIT_USAGE = 2


def _norm_key(p: Path) -> str:
    return os.path.normcase(os.path.abspath(str(p)))


def _compile_patterns(patterns: Iterable[str]) -> List[re.Pattern]:
    compiled = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            raise ConfigError(f"Invalid exclude_path_regex {p!r}: {e}") from e
    return compiled


def iter_files(
    inputs: List[Path],
    include_ext: Iterable[str],
    exclude_dirs: Iterable[str],
    exclude_path_regex: Iterable[str],
) -> Iterable[Path]:
    """Yield input files in a stable order.

    - files given directly are yielded as-is (even with other extensions)
    - directories are walked; excluded dirs are pruned, files filtered by extension
    """

    include_ext_l = {e.lower() for e in include_ext}
    exclude_dirs_l = {d.lower() for d in exclude_dirs}
    compiled = _compile_patterns(exclude_path_regex)

    for root in inputs:
        if root.is_file():
            yield root
            continue
        if not root.is_dir():
            logger.warning("input not found: %s", root)
            continue

        for dirpath, dirnames, filenames in os.walk(root):
            dpath = Path(dirpath)
            # exclude dirs (in-place modify for os.walk)
            dirnames[:] = sorted(
                dn
                for dn in dirnames
                if dn.lower() not in exclude_dirs_l and not any(rx.search(str(dpath / dn)) for rx in compiled)
            )
            for fn in sorted(filenames):
                p = dpath / fn
                if any(rx.search(str(p)) for rx in compiled):
                    continue
                if p.suffix.lower() not in include_ext_l:
                    continue
                yield p


def load_documents(paths: Sequence[Path], max_chars: int = 0) -> List[Document]:
    docs: List[Document] = []
    seen = set()
    for p in tqdm(list(paths), desc="Reading", disable=None):
        k = _norm_key(p)
        if k in seen:
            continue
        seen.add(k)
        doc = read_document(p, max_chars=max_chars)
        if doc is not None:
            docs.append(doc)
    return docs


def build_markdown(docs: List[Document], outcome: Union[SummaryResult, str]) -> str:
    # YAML front matter for metadata
    fm: Dict[str, Any] = {
        "documents": [
            {"path": d.identifier, "size": format_file_size(d.size_bytes), "words": len(d.text.split())}
            for d in docs
        ],
    }
    if isinstance(outcome, SummaryResult):
        fm["summary"] = outcome.to_dict()
    else:
        fm["notice"] = outcome

    lines = []
    lines.append("---")
    lines.append(yaml.safe_dump(fm, allow_unicode=True, sort_keys=False).strip())
    lines.append("---\n")
    lines.append("# Document Summary\n")
    if docs:
        lines.append("## DOCUMENTS\n")
        for d in docs:
            lines.append(f"- {Path(d.identifier).name} ({format_file_size(d.size_bytes)}, {len(d.text.split())} words)")
        lines.append("")
    if isinstance(outcome, SummaryResult):
        lines.append(render_summary(outcome))
    else:
        lines.append(outcome)
    return "\n".join(lines).strip() + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="pdf-insight", description="Summarize extracted document text")
    ap.add_argument("inputs", nargs="+", help="text files or directories")
    ap.add_argument("--config", default=None, help="config.yml path")
    ap.add_argument("--out", default=None, help="write markdown summary to this file")
    ap.add_argument("--json", action="store_true", help="print the result as JSON")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        cfg = load_config(Path(args.config)) if args.config else {}
        summary_cfg = summary_config_from(cfg)
        max_chars = int(cfg.get("max_extract_chars") or 0)
        paths = list(
            iter_files(
                [Path(p) for p in args.inputs],
                cfg.get("include_ext") or sorted(TEXT_EXTENSIONS),
                cfg.get("exclude_dirs") or [],
                cfg.get("exclude_path_regex") or [],
            )
        )
    except (ConfigError, OSError, ValueError) as e:
        logger.error("config error: %s", e)
        return EXIT_USAGE

    docs = load_documents(paths, max_chars=max_chars)
    logger.info("loaded %d document(s)", len(docs))

    outcome = summarize_documents(docs, summary_cfg)

    if args.json:
        payload: Dict[str, Any] = (
            outcome.to_dict() if isinstance(outcome, SummaryResult) else {"notice": outcome}
        )
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    elif isinstance(outcome, SummaryResult):
        print(render_summary(outcome), end="")
    else:
        print(outcome)

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(build_markdown(docs, outcome), encoding="utf-8")
        logger.info("wrote %s", out_path)

    return EXIT_OK if isinstance(outcome, SummaryResult) else EXIT_NOTICE


if __name__ == "__main__":
    raise SystemExit(main())
