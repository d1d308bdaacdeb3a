"""Greeting text shown at the end of a run.

A template is split on whitespace into parts; the number of parts is the number
of dungeons in the run, and a loss reveals only the parts that were earned.
"""
from __future__ import annotations

from typing import List, Tuple

from .core.random import RandomSource
from .result import GameResult

NAME_PLACEHOLDER = "{name}"

RESPONSE_TEMPLATES: Tuple[str, ...] = (
    "Good job, brave {name}!",
    "Welcome back, {name}.",
    "Hail {name}, breaker of gates!",
    "The gauntlet bows to {name}.",
    "Rest now, {name}, the lanterns are lit.",
    "{name} walks out of the dark alive.",
    "Well fought, {name}!",
    "Every dungeon remembers the name {name}.",
    "Songs will be sung of {name} tonight.",
    "Not bad at all, {name}.",
)


def choose_template(rng: RandomSource) -> str:
    return rng.choice(RESPONSE_TEMPLATES)


def template_parts(template: str) -> List[str]:
    return template.split()


def substitute(text: str, name: str) -> str:
    return text.replace(NAME_PLACEHOLDER, name)


def render_greeting(template: str, name: str, result: GameResult) -> str:
    if result.is_win:
        return substitute(template, name)
    shown = template_parts(template)[: result.progress]
    return " ".join(substitute(part, name) for part in shown)
