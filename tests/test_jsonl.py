import io
import json

import pytest
from lingua import Language

from detect_language.detection import DetectedLanguage, classify
from detect_language.format import DetectionParser, JsonLinesDetectionWriter, read_detections, to_stdout_all, to_writer_all, write_all


class CountingBytesIO(io.BytesIO):
    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


class FailingFlushIO(io.BytesIO):
    def flush(self):
        raise OSError("disk full")


def _lines(out: io.BytesIO):
    return out.getvalue().decode("utf-8").splitlines()


def test_writes_one_json_object_per_line(fake_detector):
    out = CountingBytesIO()
    count = to_writer_all(classify(fake_detector, "text"), out)

    lines = _lines(out)
    assert count == 3
    assert len(lines) == 3
    assert out.getvalue().endswith(b"\n")
    first = json.loads(lines[0])
    assert first == {"lang": "English", "iso_639_1": "en", "iso_639_3": "eng", "confidence": 0.7}
    assert [json.loads(line)["lang"] for line in lines] == ["English", "French", "German"]


def test_flushes_once_and_leaves_stream_open(fake_detector):
    out = CountingBytesIO()
    to_writer_all(classify(fake_detector, "text"), out)
    assert out.flushes == 1
    assert not out.closed


@pytest.mark.parametrize("limit, expected", [(None, 3), (0, 0), (1, 1), (2, 2), (3, 3), (10, 3)])
def test_limit_truncates_output(fake_detector, limit, expected):
    out = io.BytesIO()
    count = to_writer_all(classify(fake_detector, "text"), out, limit=limit)
    assert count == expected
    assert len(_lines(out)) == expected


def test_limit_stops_pulling_records():
    pulled = []

    def records():
        for language in (Language.ENGLISH, Language.FRENCH, Language.GERMAN):
            pulled.append(language)
            yield DetectedLanguage.from_language(language, 0.3)

    to_writer_all(records(), io.BytesIO(), limit=1)
    assert pulled == [Language.ENGLISH]


def test_empty_input_writes_nothing_and_still_flushes(empty_detector):
    out = CountingBytesIO()
    assert to_writer_all(classify(empty_detector, ""), out) == 0
    assert out.getvalue() == b""
    assert out.flushes == 1


def test_serialization_failure_leaves_no_partial_line():
    good = DetectedLanguage.from_language(Language.ENGLISH, 0.9)
    bad = DetectedLanguage.from_language(Language.FRENCH, object())
    out = CountingBytesIO()

    with pytest.raises(TypeError):
        to_writer_all(iter([good, bad, good]), out)

    assert out.getvalue().count(b"\n") == 1
    assert len(_lines(out)) == 1
    assert out.flushes == 1


@pytest.mark.parametrize("confidence", [float("nan"), float("inf")])
def test_non_finite_confidence_is_rejected_without_partial_line(confidence):
    good = DetectedLanguage.from_language(Language.ENGLISH, 0.9)
    bad = DetectedLanguage.from_language(Language.FRENCH, confidence)
    out = CountingBytesIO()

    with pytest.raises(ValueError):
        to_writer_all(iter([good, bad, good]), out)

    assert [json.loads(line)["lang"] for line in _lines(out)] == ["English"]
    assert out.flushes == 1


def test_flush_failure_is_surfaced(fake_detector):
    with pytest.raises(OSError, match="disk full"):
        to_writer_all(classify(fake_detector, "text"), FailingFlushIO())


def test_writer_close_without_open_does_not_flush():
    out = CountingBytesIO()
    writer = JsonLinesDetectionWriter(out)
    writer.close()
    assert out.flushes == 0


def test_write_all_accepts_any_writer(fake_detector):
    out = io.BytesIO()
    assert write_all(classify(fake_detector, "text"), JsonLinesDetectionWriter(out), limit=2) == 2


def test_emitted_lines_parse_back_to_the_same_records(make_detector):
    detector = make_detector([(Language.JAPANESE, 0.8123456789012345), (Language.KOREAN, 0.1), (Language.CHINESE, 0.0876543210987655)])
    expected = list(classify(detector, "text"))
    out = io.BytesIO()
    to_writer_all(iter(expected), out)

    out.seek(0)
    assert read_detections(out) == expected


def test_parser_accepts_text_streams_and_skips_blank_lines():
    text = '\n{"lang": "French", "iso_639_1": "fr", "iso_639_3": "fra", "confidence": 0.5}\n\n'
    parsed = read_detections(io.StringIO(text))
    assert parsed == [DetectedLanguage.from_language(Language.FRENCH, 0.5)]


def test_parser_reports_the_malformed_line():
    text = '{"lang": "French", "iso_639_1": "fr", "iso_639_3": "fra", "confidence": 0.5}\n{"lang": \n'
    with pytest.raises(ValueError, match="Line 2"):
        list(DetectionParser().parse(io.StringIO(text)))


def test_parser_rejects_non_objects():
    with pytest.raises(ValueError, match="Line 1"):
        read_detections(io.StringIO("[1, 2]\n"))


def test_to_stdout_all(fake_detector, monkeypatch):
    stdout_buffer = io.BytesIO()
    monkeypatch.setattr("sys.stdout", io.TextIOWrapper(stdout_buffer))
    assert to_stdout_all(classify(fake_detector, "text"), limit=2) == 2
    assert len(stdout_buffer.getvalue().splitlines()) == 2
