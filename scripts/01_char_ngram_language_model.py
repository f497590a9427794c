from __future__ import annotations

from char_ngram import LanguageModel


def main() -> None:
    text = (
        "natural language processing (nlp) is fun. "
        "start small, iterate, and learn by coding. "
    )

    model = LanguageModel(window_length=4, seed=42)
    model.train(text)
    print(model.generate("nlp ", 120))


if __name__ == "__main__":
    main()
