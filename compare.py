"""Per-category comparison rules for a guess against the secret."""
import math
import re
from collections import namedtuple
from enum import Enum

from characters import as_list, normalize

SEASON_EPISODE_RE = re.compile(r"^s(\d+)e(\d+)$")

# episode counts this close to the secret's are a partial match
EPISODE_COUNT_TOLERANCE = 5

SeasonEpisode = namedtuple("SeasonEpisode", ["season", "episode"])


class Verdict(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class Category(str, Enum):
    SEASONS = "seasons"
    FIRST = "first"
    LAST = "last"
    EPISODE_COUNT = "episodeCount"
    GENDER = "gender"
    ORGS = "orgs"
    DECEASED = "deceased"

    @property
    def attribute(self):
        return CATEGORY_ATTRIBUTES[self]


CATEGORY_ATTRIBUTES = {
    Category.SEASONS: "seasons",
    Category.FIRST: "first",
    Category.LAST: "last",
    Category.EPISODE_COUNT: "episode_count",
    Category.GENDER: "gender",
    Category.ORGS: "orgs",
    Category.DECEASED: "deceased",
}


def parse_season_episode(token):
    """Parse "S2E14" (any case, surrounding spaces ok) into a SeasonEpisode."""
    if not isinstance(token, str):
        return None
    match = SEASON_EPISODE_RE.match(token.strip().lower())
    if not match:
        return None
    return SeasonEpisode(int(match.group(1)), int(match.group(2)))


def _to_number(value):
    if value is None or isinstance(value, bool):
        return None
    try:
        n = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(n):
        return None
    return n


def _season_set(values):
    seasons = set()
    for v in as_list(values):
        n = _to_number(v)
        if n is not None:
            seasons.add(n)
    return seasons


def _org_set(values):
    return {o for o in (normalize(v) for v in as_list(values)) if o}


def _compare_sets(guess, secret):
    if not guess or not secret:
        return Verdict.RED
    if guess == secret:
        return Verdict.GREEN
    if guess & secret:
        return Verdict.YELLOW
    return Verdict.RED


def compare_seasons(guess_seasons, secret_seasons):
    return _compare_sets(_season_set(guess_seasons), _season_set(secret_seasons))


def compare_appearance(guess_value, secret_value):
    """First/last appearance: exact episode is green, same season yellow."""
    g = parse_season_episode(guess_value)
    s = parse_season_episode(secret_value)
    if g is None or s is None:
        return Verdict.RED
    if g == s:
        return Verdict.GREEN
    if g.season == s.season:
        return Verdict.YELLOW
    return Verdict.RED


def compare_episode_count(guess_count, secret_count):
    g = _to_number(guess_count)
    s = _to_number(secret_count)
    if g is None or s is None:
        return Verdict.RED
    if g == s:
        return Verdict.GREEN
    if abs(g - s) <= EPISODE_COUNT_TOLERANCE:
        return Verdict.YELLOW
    return Verdict.RED


def _compare_exact(guess_value, secret_value):
    g = normalize(guess_value)
    s = normalize(secret_value)
    if not g or not s:
        return Verdict.RED
    return Verdict.GREEN if g == s else Verdict.RED


def compare_gender(guess_gender, secret_gender):
    return _compare_exact(guess_gender, secret_gender)


def compare_orgs(guess_orgs, secret_orgs):
    return _compare_sets(_org_set(guess_orgs), _org_set(secret_orgs))


def compare_deceased(guess_deceased, secret_deceased):
    return _compare_exact(guess_deceased, secret_deceased)


RULES = {
    Category.SEASONS: compare_seasons,
    Category.FIRST: compare_appearance,
    Category.LAST: compare_appearance,
    Category.EPISODE_COUNT: compare_episode_count,
    Category.GENDER: compare_gender,
    Category.ORGS: compare_orgs,
    Category.DECEASED: compare_deceased,
}


def compare_category(category, guess, secret):
    """Verdict for one category; unknown categories never match."""
    try:
        category = Category(category)
    except (TypeError, ValueError):
        return Verdict.RED
    rule = RULES[category]
    return rule(getattr(guess, category.attribute, None), getattr(secret, category.attribute, None))


def compare_characters(guess, secret, categories):
    """Verdicts for every configured category, in order."""
    return [(c.key, compare_category(c.key, guess, secret)) for c in categories]


class CategoryDescriptor(namedtuple("CategoryDescriptor", ["key", "label", "tooltip"])):
    __slots__ = ()

    @property
    def rule(self):
        return RULES[self.key]


CATEGORIES = (
    CategoryDescriptor(
        Category.SEASONS, "Seasons",
        "Green: exact seasons match\nYellow: at least one season matches\nRed: no seasons match",
    ),
    CategoryDescriptor(
        Category.FIRST, "First appearance",
        "Green: first appearance exact episode\nYellow: first appearance same season\nRed: different season",
    ),
    CategoryDescriptor(
        Category.LAST, "Last appearance",
        "Green: last appearance exact episode\nYellow: last appearance same season\nRed: different season",
    ),
    CategoryDescriptor(
        Category.EPISODE_COUNT, "Episode count",
        "Green: exact episode count\nYellow: within ±5 episodes\nRed: more than 5 difference",
    ),
    CategoryDescriptor(
        Category.GENDER, "Gender",
        "Green: gender matches\nRed: gender does not match",
    ),
    CategoryDescriptor(
        Category.ORGS, "Organization",
        "Green: exact organizations match\nYellow: at least one organization matches\nRed: no organizations match",
    ),
    CategoryDescriptor(
        Category.DECEASED, "Deceased",
        "Green: guess matches deceased status\nRed: guess does not match",
    ),
)


def category_config(include_deceased=True):
    """The categories a game compares, in display order."""
    if include_deceased:
        return CATEGORIES
    return tuple(c for c in CATEGORIES if c.key is not Category.DECEASED)
