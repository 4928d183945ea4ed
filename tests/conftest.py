import random

import pytest

from characters import Character
from search import build_index


class FirstChoice(random.Random):
    """Always picks the first candidate, keeps rounds predictable."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture()
def characters():
    return build_index([
        Character(
            "Rick Grimes", aliases=["Ricky"], seasons=[1, 2, 3], first="S1E1", last="S3E16",
            episode_count=40, gender="Male", orgs=["Atlanta Survivors", "Prison"], deceased="No",
        ),
        Character(
            "Daryl Dixon", aliases=[], seasons=[1, 2, 3, 4], first="S1E3", last="S4E16",
            episode_count=52, gender="Male", orgs=["Atlanta Survivors"], deceased="No",
        ),
        Character(
            "Michonne", aliases=["Katana"], seasons=[3, 4], first="S2E13", last="S4E16",
            episode_count=30, gender="Female", orgs=["Prison"], deceased="No",
        ),
        Character(
            "Glenn Rhee", aliases=["Glenn"], seasons=[1, 2, 3, 4], first="S1E2", last="S4E10",
            episode_count=50, gender="Male", orgs=["Atlanta Survivors", "Prison"], deceased="Yes",
        ),
        Character(
            "Hershel Greene", aliases=["Hershel"], seasons=[2, 3, 4], first="S2E1", last="S4E8",
            episode_count=35, gender="Male", orgs=["Greene Farm", "Prison"], deceased="Yes",
        ),
        Character(
            "Shane Walsh", aliases=["Shane"], seasons=[1, 2], first="S1E1", last="S2E12",
            episode_count=19, gender="Male", orgs=["Atlanta Survivors"], deceased="Yes",
        ),
        Character(
            "Carol Peletier", aliases=["Carol"], seasons=[1, 2, 3, 4], first="S1E3", last="S4E14",
            episode_count=48, gender="Female", orgs=["Atlanta Survivors", "Prison"], deceased="No",
        ),
    ])


@pytest.fixture()
def rng():
    return FirstChoice()
