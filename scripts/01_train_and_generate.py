from __future__ import annotations

import logging

from window_lm import LanguageModel

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


def main() -> None:
    text = (
        "natural language processing (nlp) is fun. "
        "start small, iterate, and learn by coding. "
        "a small language model learns which letter tends to follow a window of letters. "
    )

    model = LanguageModel(window_length=4, seed=42)
    model.train_text(text)

    print(model.generate("lang", 120))


if __name__ == "__main__":
    main()
