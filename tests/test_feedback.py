from characters import Character
from compare import CATEGORIES, Category, Verdict, category_config, compare_characters
from feedback import (
    PLACEHOLDER, FeedbackCell, feedback_payload, feedback_row, format_value, header_payload,
    suggestion_payload,
)


def test_format_value():
    assert format_value(Category.GENDER, None) == PLACEHOLDER
    assert format_value(Category.SEASONS, [1, 2, 3]) == "1, 2, 3"
    assert format_value(Category.ORGS, []) == PLACEHOLDER
    assert format_value(Category.ORGS, ["Prison", "Woodbury"]) == "Prison, Woodbury"
    assert format_value(Category.EPISODE_COUNT, 40) == "40"
    assert format_value(Category.FIRST, "S1E1") == "S1E1"


def test_feedback_row(characters):
    daryl, rick = characters[1], characters[0]
    row = feedback_row(daryl, rick, CATEGORIES)
    assert row[0] == FeedbackCell(Category.SEASONS, Verdict.YELLOW, "1, 2, 3, 4")
    assert row[3] == FeedbackCell(Category.EPISODE_COUNT, Verdict.RED, "52")
    assert row[4] == FeedbackCell(Category.GENDER, Verdict.GREEN, "Male")
    assert [cell.key for cell in row] == [c.key for c in CATEGORIES]


def test_feedback_row_for_blank_guess(characters):
    row = feedback_row(Character.blank("Lori"), characters[0], category_config(include_deceased=False))
    assert len(row) == len(CATEGORIES) - 1
    assert all(cell.display == PLACEHOLDER for cell in row)
    assert all(cell.verdict is Verdict.RED for cell in row)


def test_payloads_are_plain_data(characters):
    row = feedback_row(characters[0], characters[0], CATEGORIES)
    payload = feedback_payload(characters[0], row)
    assert payload["name"] == "Rick Grimes"
    assert payload["cells"][0] == {"key": "seasons", "status": "green", "value": "1, 2, 3"}

    header = header_payload(CATEGORIES)
    assert header[3]["key"] == "episodeCount"
    assert header[3]["label"] == "Episode count"
    assert "±5" in header[3]["tooltip"]

    assert suggestion_payload(characters[:1]) == [{"name": "Rick Grimes", "aliases": ["Ricky"]}]


def test_row_verdicts_follow_comparison(characters):
    daryl, rick = characters[1], characters[0]
    row = feedback_row(daryl, rick, CATEGORIES)
    assert [(cell.key, cell.verdict) for cell in row] == compare_characters(daryl, rick, CATEGORIES)
