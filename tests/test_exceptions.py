from vctd.exceptions import (
    DatasetError,
    InvalidEventUrlError,
    NetworkError,
    ScoreParseError,
    ScrapingError,
    VctdError,
)


def test_kinds_tell_failures_apart():
    kinds = [cls("x").kind for cls in (NetworkError, ScrapingError, ScoreParseError, DatasetError, InvalidEventUrlError)]
    assert kinds == ["network", "scraping", "score", "dataset", "input"]


def test_score_errors_are_scraping_errors():
    assert isinstance(ScoreParseError("x"), ScrapingError)
    assert isinstance(ScrapingError("x"), VctdError)


def test_str_includes_details():
    err = NetworkError("HTTP error", url="https://www.vlr.gg/1", status_code=404, context={"attempt": 1})
    assert str(err) == "HTTP error | URL: https://www.vlr.gg/1 | Status: 404 | Context: attempt=1"


def test_str_context_only():
    err = DatasetError("Could not write dataset", context={"path": "out.json"})
    assert str(err) == "Could not write dataset | Context: path=out.json"


def test_str_drops_empty_context():
    assert str(ScrapingError("Missing element '.map'", context={"game": None})) == "Missing element '.map'"
