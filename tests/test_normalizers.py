import re
import pytest

from eventhub.errors import ValidationError
from eventhub.normalizers import slugify
from eventhub.normalizers.rules import norm_email, required_string, required_string_list
from eventhub.normalizers.temporal import norm_date, norm_time


# --- slug ---

def test_slug_from_punctuated_title():
    assert slugify("AI & Data Summit 2025!") == "ai-data-summit-2025"

@pytest.mark.parametrize("title", [
    "Launch Day",
    "  --Hello,   World--  ",
    "Café Öffnung 2.0",
    "a__b..c",
    "!!!",
    "",
    "PyCon   DE / PyData",
])
def test_slug_shape(title):
    s = slugify(title)
    assert re.fullmatch(r"[a-z0-9-]*", s)
    assert not s.startswith("-") and not s.endswith("-")
    assert "--" not in s

def test_slug_degenerate_title_is_empty():
    assert slugify("?!  ...") == ""


# --- required strings / arrays ---

def test_required_string_trims():
    assert required_string("venue", "  Hall A ") == "Hall A"

@pytest.mark.parametrize("raw", [None, "", "   ", 42, ["x"]])
def test_required_string_rejects_blank_or_non_string(raw):
    with pytest.raises(ValidationError) as ei:
        required_string("venue", raw)
    assert ei.value.field == "venue"
    assert ei.value.reason == "required and empty"

def test_string_list_trims_every_item():
    assert required_string_list("agenda", [" a ", "b"]) == ["a", "b"]

@pytest.mark.parametrize("raw", [None, [], "ai,data", {"a": 1}])
def test_string_list_requires_non_empty_sequence(raw):
    with pytest.raises(ValidationError) as ei:
        required_string_list("tags", raw)
    assert ei.value.reason == "required and empty"

@pytest.mark.parametrize("raw", [["ai", "  "], ["", "ai"], ["ai", 3]])
def test_string_list_rejects_any_blank_item(raw):
    with pytest.raises(ValidationError) as ei:
        required_string_list("tags", raw)
    assert ei.value.field == "tags"
    assert ei.value.reason == "must contain only non-empty strings"


# --- email ---

def test_email_is_trimmed_and_lowercased():
    assert norm_email(" User@Example.COM ") == "user@example.com"

@pytest.mark.parametrize("raw", [None, "", "user", "user@example", "a b@example.com", "a@@example.com", 7])
def test_email_rejects_bad_shapes(raw):
    with pytest.raises(ValidationError) as ei:
        norm_email(raw)
    assert ei.value.field == "email"
    assert ei.value.reason == "invalid address"


# --- date ---

@pytest.mark.parametrize("raw,expected", [
    ("2025-03-05", "2025-03-05"),
    ("2025-03-05T10:00:00", "2025-03-05"),
    ("2025-03-05T23:30:00-05:00", "2025-03-06"),
    ("2025-03-05T00:30:00Z", "2025-03-05"),
    ("2025/3/5", "2025-03-05"),
    ("March 5, 2025", "2025-03-05"),
    ("5 Mar 2025", "2025-03-05"),
])
def test_date_is_reformatted(raw, expected):
    assert norm_date(raw) == expected

@pytest.mark.parametrize("raw", ["", "tomorrow", "2025-13-01", "2025-02-30", None])
def test_date_rejects_unparseable(raw):
    with pytest.raises(ValidationError) as ei:
        norm_date(raw)
    assert ei.value.field == "date"
    assert ei.value.reason == "invalid format"


# --- time ---

@pytest.mark.parametrize("raw,expected", [
    ("9:05", "09:05"),
    ("09:05", "09:05"),
    ("0:00", "00:00"),
    ("23:59", "23:59"),
    (" 7:30 ", "07:30"),
])
def test_time_is_zero_padded(raw, expected):
    out = norm_time(raw)
    assert out == expected
    assert norm_time(out) == out

@pytest.mark.parametrize("raw", ["9:5", "905", "9.05", "123:00", "9:05pm", "9 :05", ""])
def test_time_rejects_bad_format(raw):
    with pytest.raises(ValidationError) as ei:
        norm_time(raw)
    assert ei.value.reason == "invalid format"

@pytest.mark.parametrize("raw", ["24:00", "99:00", "12:60"])
def test_time_rejects_out_of_range(raw):
    with pytest.raises(ValidationError) as ei:
        norm_time(raw)
    assert ei.value.field == "time"
    assert ei.value.reason == "out of range"
