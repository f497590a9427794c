"""
Command-line entry point for the character n-gram language model.

Usage:
    char-ngram corpus.txt --window-length 4 --initial-text "The " --length 300
    char-ngram reviews.csv --csv-column text -n 3 --seed 42
    char-ngram corpus.txt --config model.json --show-model
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from .config import GenerateConfig, ModelConfig
from .datasets import load_corpus_csv, read_corpus
from .errors import InvalidConfiguration
from .model import LanguageModel
from .text_cleaning import CleanTextConfig, clean_text

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="char-ngram",
        description="Train a character n-gram model on a corpus and generate text from it",
    )

    parser.add_argument("corpus", type=str, help="Path to a text file (or CSV with --csv-column)")

    parser.add_argument(
        "--window-length", "-n",
        type=int,
        help="Number of preceding characters the model conditions on",
    )

    parser.add_argument("--seed", "-s", type=int, help="Random seed for reproducible output")

    parser.add_argument(
        "--initial-text", "-t",
        type=str,
        help="Text to start generating from (defaults to the corpus prefix)",
    )

    parser.add_argument("--length", "-l", type=int, help="Number of characters to generate")

    parser.add_argument(
        "--csv-column",
        type=str,
        help="Treat the corpus as CSV and train on this column",
    )

    parser.add_argument("--encoding", type=str, default="utf-8", help="Corpus file encoding")

    parser.add_argument(
        "--clean",
        action="store_true",
        help="Lowercase, strip accents and collapse whitespace before training",
    )

    parser.add_argument("--config", "-c", type=str, help="Path to configuration JSON file")

    parser.add_argument(
        "--show-model",
        action="store_true",
        help="Print the window -> distribution table after generating",
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


def read_config_file(path: str) -> Dict:
    """Read a JSON config file holding one object.

    Read errors propagate; unparsable or non-object content raises
    InvalidConfiguration.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            config_dict = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidConfiguration(f"config file {path} is not valid JSON: {e}") from e

    if not isinstance(config_dict, dict):
        raise InvalidConfiguration(
            f"config file {path} must hold a JSON object, got {type(config_dict).__name__}"
        )
    return config_dict


def load_configs(args: argparse.Namespace) -> tuple[ModelConfig, GenerateConfig]:
    """Merge the optional JSON config file with command-line overrides."""
    config_dict = read_config_file(args.config) if args.config else {}

    model_dict = ModelConfig.from_dict(config_dict).to_dict()
    generate_dict = GenerateConfig.from_dict(config_dict).to_dict()

    if args.window_length is not None:
        model_dict["window_length"] = args.window_length
    if args.seed is not None:
        model_dict["seed"] = args.seed
    if args.initial_text is not None:
        generate_dict["initial_text"] = args.initial_text
    if args.length is not None:
        generate_dict["length"] = args.length

    model_config = ModelConfig(**model_dict).validate()
    generate_config = GenerateConfig(**generate_dict).validate()
    return model_config, generate_config


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        model_config, generate_config = load_configs(args)
    except InvalidConfiguration as e:
        print(f"char-ngram: error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        logger.error(f"Could not read config {args.config}: {e}")
        return 1

    try:
        if args.csv_column:
            corpus = load_corpus_csv(args.corpus, column=args.csv_column)
        else:
            corpus = read_corpus(args.corpus, encoding=args.encoding)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.error(f"Could not read corpus {args.corpus}: {e}")
        return 1

    if args.clean:
        corpus = clean_text(
            corpus,
            CleanTextConfig(lowercase=True, strip_accents=True, normalize_whitespace=True),
        )

    model = LanguageModel.from_config(model_config)
    model.train(corpus)

    initial_text = generate_config.initial_text or corpus[: model_config.window_length]
    print(model.generate(initial_text, generate_config.length))

    if args.show_model:
        print(model, end="")

    return 0


if __name__ == "__main__":
    sys.exit(main())
