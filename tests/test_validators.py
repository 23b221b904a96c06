import pytest

from songboard.core.validators import sanitize_text, normalize_youtube_url, extract_video_id

CANONICAL = "https://www.youtube.com/watch?v=abcDE12345"


def test_sanitize_text_trims_and_truncates():
    assert sanitize_text("  hello  ", 100) == "hello"
    assert sanitize_text("x" * 150, 100) == "x" * 100
    assert sanitize_text("y" * 90, 80) == "y" * 80


@pytest.mark.parametrize("value", ["", "   ", None, 42, ["a"]])
def test_sanitize_text_blank_or_non_string(value):
    assert sanitize_text(value, 40) == ""


@pytest.mark.parametrize("url", [
    "https://youtu.be/abcDE12345",
    "https://www.youtube.com/watch?v=abcDE12345",
    "https://www.youtube.com/watch?v=abcDE12345&list=xyz",
    "https://youtube.com/watch?feature=share&v=abcDE12345&t=42",
    "https://m.youtube.com/watch?v=abcDE12345",
    "  https://WWW.YouTube.com/watch?v=abcDE12345  ",
    "http://youtu.be/abcDE12345?si=tracking",
])
def test_normalize_youtube_url_accepts_known_forms(url):
    assert normalize_youtube_url(url) == CANONICAL


@pytest.mark.parametrize("url", [
    "https://vimeo.com/12345",
    "https://youtube.com.evil.example/watch?v=abcDE12345",
    "https://music.youtube.com/watch?v=abcDE12345",
    "https://www.youtube.com/watch?list=xyz",
    "https://www.youtube.com/watch?v=abc",
    "https://www.youtube.com/watch?v=" + "a" * 21,
    "https://www.youtube.com/watch?v=abc<script>",
    "https://youtu.be/",
    "https://youtu.be/abcDE12345/extra",
    "youtube.com/watch?v=abcDE12345",
    "https://youtube.com:notaport/watch?v=abcDE12345",
    "https://youtu.be:99999/abcDE12345",
    "not a url",
    "",
    None,
])
def test_normalize_youtube_url_rejects(url):
    assert normalize_youtube_url(url) is None


def test_extract_video_id_length_window():
    assert extract_video_id("https://youtu.be/abcde") == "abcde"
    assert extract_video_id("https://youtu.be/" + "a" * 20) == "a" * 20
    assert extract_video_id("https://youtu.be/abcd") is None
