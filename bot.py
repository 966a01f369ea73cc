from __future__ import annotations

import random
import sys
import time
from pathlib import Path
from typing import TextIO

from knowledge import KnowledgeBase, load
from settings import settings

FAREWELL = "Goodbye!"
FALLBACK = "I'm not sure I understand. Can you rephrase that?"
EXIT_WORDS = ("quit", "exit", "bye")

_rng = random.Random(time.time())


def wants_to_leave(text: str) -> bool:
    lowered = text.lower()
    return any(word in lowered for word in EXIT_WORDS)


def respond(
    message: str, knowledge: KnowledgeBase, rng: random.Random | None = None
) -> str:
    """Return a reply for ``message`` from the first matching entry."""
    if wants_to_leave(message):
        return FAREWELL

    entry = knowledge.match(message)
    if entry is None:
        return FALLBACK
    rng = rng or _rng
    return entry.responses[rng.randrange(len(entry.responses))]


class Bot:
    """Keyword bot bound to one knowledge base and one random source."""

    def __init__(
        self, knowledge: KnowledgeBase, rng: random.Random | None = None
    ) -> None:
        self.knowledge = knowledge
        self.rng = rng or random.Random(time.time())

    @classmethod
    def from_file(cls, path: str | Path, seed: float | None = None) -> "Bot":
        rng = random.Random(time.time() if seed is None else seed)
        return cls(load(path), rng)

    def respond(self, message: str) -> str:
        return respond(message, self.knowledge, self.rng)


def run_bot(
    path: str | Path,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Interactive command-line loop until end of input or an exit word."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    bot = Bot.from_file(path)

    print("Bot: Hello! Type 'quit' or 'exit' to end the conversation.", file=stdout)
    while True:
        print("You: ", end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            print(file=stdout)
            break
        text = line.strip()
        if not text:
            continue
        print("Bot:", bot.respond(text), file=stdout)
        if wants_to_leave(text):
            break
    print("Bot: Conversation ended.", file=stdout)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else settings.KNOWLEDGE_FILE
    run_bot(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
