#!/usr/bin/env python3
"""Segment text files with a unigram model."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Iterator
from pathlib import Path

from ulm.config import TokenizerConfig, load_tokenizer_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tokenize text with a unigram model")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--config", help="Path to tokenizer YAML config")
    source.add_argument("--vocab", help="Saved model, JSON vocabulary or TSV export")
    parser.add_argument(
        "--format",
        default="auto",
        choices=["auto", "model", "json", "spm"],
        help="Vocabulary format when --vocab is used (default: auto)",
    )
    parser.add_argument("--input", nargs="*", help="Input text files (default: stdin)")
    parser.add_argument("--fuse-unk", action="store_true", help="Merge runs of unknown pieces")
    parser.add_argument("--no-normalize", action="store_true", help="Skip NFKC normalization")
    parser.add_argument("--ids", action="store_true", help="Print token ids instead of pieces")
    return parser.parse_args()


def iter_lines(paths: list[str] | None) -> Iterator[str]:
    if not paths:
        for line in sys.stdin:
            yield line.rstrip("\n")
        return
    for path in paths:
        with Path(path).open("r", encoding="utf-8") as handle:
            for line in handle:
                yield line.rstrip("\n")


def main() -> None:
    args = parse_args()
    if args.config:
        config = load_tokenizer_config(Path(args.config))
    else:
        config = TokenizerConfig(
            vocab=args.vocab,
            format=args.format,
            fuse_unk=args.fuse_unk,
            normalize=not args.no_normalize,
        )
    tokenizer = config.build_tokenizer()
    print(
        f"[tokenizer] loaded {config.vocab} vocab_size={tokenizer.vocab_size:,}",
        file=sys.stderr,
        flush=True,
    )

    for line in iter_lines(args.input):
        tokens = tokenizer.encode_tokens(line)
        if args.ids:
            print(json.dumps([token.id for token in tokens]))
        else:
            print(json.dumps([token.value for token in tokens], ensure_ascii=False))


if __name__ == "__main__":
    main()
