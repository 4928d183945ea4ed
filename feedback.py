"""Display-ready feedback rows; rendering itself is left to the client."""
from collections import namedtuple

from compare import Category, compare_characters

PLACEHOLDER = "—"

MULTI_VALUE_CATEGORIES = (Category.SEASONS, Category.ORGS)

FeedbackCell = namedtuple("FeedbackCell", ["key", "verdict", "display"])


def format_value(key, value):
    if value is None:
        return PLACEHOLDER
    if key in MULTI_VALUE_CATEGORIES:
        return ", ".join(str(v) for v in value) or PLACEHOLDER
    return str(value)


def feedback_row(guess, secret, categories):
    """One (key, verdict, display) cell per configured category."""
    return [
        FeedbackCell(key, verdict, format_value(key, getattr(guess, key.attribute, None)))
        for key, verdict in compare_characters(guess, secret, categories)
    ]


def header_payload(categories):
    return [{"key": c.key.value, "label": c.label, "tooltip": c.tooltip} for c in categories]


def feedback_payload(guess, row):
    return {
        "name": guess.name,
        "cells": [
            {"key": cell.key.value, "status": cell.verdict.value, "value": cell.display}
            for cell in row
        ],
    }


def suggestion_payload(characters):
    return [{"name": c.name, "aliases": list(c.aliases)} for c in characters]
