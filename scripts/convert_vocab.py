#!/usr/bin/env python3
"""Convert an exported vocabulary into a saved unigram model."""

from __future__ import annotations

import argparse
from pathlib import Path

from ulm.tokenizers import load_model


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert a unigram vocabulary")
    parser.add_argument("--vocab", required=True, help="JSON vocabulary or TSV export")
    parser.add_argument(
        "--format",
        default="auto",
        choices=["auto", "json", "spm"],
        help="Input format (default: auto)",
    )
    parser.add_argument("--out", required=True, help="Output directory")
    parser.add_argument("--name", help="Optional model name prefix")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    model = load_model(Path(args.vocab), args.format)
    print(
        f"[tokenizer] vocab_size={model.get_vocab_size():,} min_score={model.min_score:.4f}",
        flush=True,
    )
    for path in model.save(Path(args.out), args.name):
        print(f"[tokenizer] wrote {path}", flush=True)


if __name__ == "__main__":
    main()
