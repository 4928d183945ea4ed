"""Typeahead suggestions: prefix matches first, then substring matches."""
import logging

from characters import normalize, unique

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 8


def build_index(characters):
    """Recompute every character's search tokens from name, aliases and orgs.

    Has to run again whenever the dataset is reloaded.
    """
    for c in characters:
        tokens = [normalize(c.name)]
        tokens += [normalize(a) for a in c.aliases]
        tokens += [normalize(o) for o in c.orgs]
        c.search_tokens = tuple(t for t in unique(tokens) if t)
    logger.debug("Indexed %d characters", len(characters))
    return characters


def _tier(tokens, query):
    best = None
    for t in tokens:
        if t.startswith(query):
            return "start"
        if query in t:
            best = "contain"
    return best


def match_characters(query, characters, excluded=(), limit=MAX_SUGGESTIONS):
    """Rank characters for `query`, skipping names in `excluded`.

    Characters with a token starting with the query come first, then those
    with a token merely containing it; dataset order is kept inside each tier.
    """
    q = normalize(query)
    if not q:
        return []

    excluded = set(excluded)
    starts = []
    contains = []
    for c in characters:
        if c.name in excluded:
            continue
        tier = _tier(c.search_tokens, q)
        if tier == "start":
            starts.append(c)
        elif tier == "contain":
            contains.append(c)
    return (starts + contains)[:limit]
