"""Character records, name normalization and dataset loading."""
import csv
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# CSV columns holding several values, separated by ";"
MULTI_VALUE_COLUMNS = ("aliases", "seasons", "orgs")


def normalize(value):
    """Trim and lowercase anything; missing values become an empty string."""
    if value is None:
        return ""
    return str(value).strip().lower()


def unique(values):
    """Drop duplicates while keeping first-seen order."""
    return list(dict.fromkeys(values))


def as_list(value):
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


class Character:
    def __init__(self, name, aliases=None, seasons=None, first=None, last=None,
                 episode_count=None, gender=None, orgs=None, deceased=None):
        self.name = name
        self.aliases = as_list(aliases)
        # raw values are kept as loaded, the comparison rules coerce them
        self.seasons = as_list(seasons)
        self.first = first
        self.last = last
        self.episode_count = episode_count
        self.gender = gender
        self.orgs = as_list(orgs)
        self.deceased = deceased
        self.search_tokens = ()

    @classmethod
    def from_dict(cls, data):
        return cls(
            name=str(data.get("name") or "").strip(),
            aliases=data.get("aliases"),
            seasons=data.get("seasons"),
            first=data.get("first"),
            last=data.get("last"),
            episode_count=data.get("episodeCount"),
            gender=data.get("gender"),
            orgs=data.get("orgs"),
            deceased=data.get("deceased"),
        )

    @classmethod
    def blank(cls, name):
        """A guess with no attributes, it loses every category."""
        return cls(name=name)

    def matches_name(self, text):
        """True when `text` is this character's name or one of its aliases."""
        n = normalize(text)
        if not n:
            return False
        if normalize(self.name) == n:
            return True
        return any(normalize(a) == n for a in self.aliases)

    def __repr__(self):
        return f"Character({self.name!r})"


def find_character(characters, text):
    """First character (dataset order) whose name or alias equals `text`."""
    return next((c for c in characters if c.matches_name(text)), None)


def _split_multi(value):
    return [v.strip() for v in (value or "").split(";") if v.strip()]


def _csv_row_to_dict(row):
    data = {k.strip(): (v or "").strip() for k, v in row.items() if k}
    for column in MULTI_VALUE_COLUMNS:
        data[column] = _split_multi(data.get(column))
    for column in ("first", "last", "episodeCount", "gender", "deceased"):
        if not data.get(column):
            data[column] = None
    return data


def _read_rows(path):
    if path.suffix.lower() in (".csv", ".txt"):
        with open(path, newline="", encoding="utf-8") as f:
            return [_csv_row_to_dict(row) for row in csv.DictReader(f)]
    with open(path, encoding="utf-8") as f:
        rows = json.load(f)
    if not isinstance(rows, list):
        raise ValueError(f"expected a JSON array of characters, got {type(rows).__name__}")
    return rows


def load_characters(filename):
    """Load the dataset; any failure degrades to an empty list."""
    path = Path(filename)
    try:
        rows = _read_rows(path)
    except (OSError, ValueError, csv.Error) as e:
        logger.warning("⚠️ Failed to load characters from %s, using empty list: %s", path, e)
        return []

    characters = []
    for row in rows:
        if not isinstance(row, dict):
            logger.warning("⚠️ Skipping malformed character row: %r", row)
            continue
        c = Character.from_dict(row)
        if not c.name:
            logger.warning("⚠️ Skipping character without a name: %r", row)
            continue
        characters.append(c)
    logger.info("✅ Loaded %d characters from %s", len(characters), path)
    return characters
