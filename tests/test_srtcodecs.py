"""BOM handling, charset classification and decoder selection."""

import codecs

import pytest

import srtcodecs.detect as detect_module
from srtcodecs import DetectError, Detection, TranscodeError, create_source_decoder, normalize_source
from srtcodecs.big5_decoder import Big5Decoder
from srtcodecs.detect import classify, detect_source, strip_bom
from srtcodecs.factory import BIG5, GB18030, PASSTHROUGH, UTF16BE, UTF16LE, decoder_family
from srtcodecs.gb18030_decoder import GB18030Decoder
from srtcodecs.passthrough_decoder import PassthroughDecoder
from srtcodecs.utf16_decoder import UTF16Decoder


@pytest.mark.parametrize(
    "bom, label",
    [
        (codecs.BOM_UTF8, "UTF-8"),
        (codecs.BOM_UTF16_LE, "UTF-16LE"),
        (codecs.BOM_UTF16_BE, "UTF-16BE"),
    ],
)
def test_strip_bom_names_and_removes_it(bom: bytes, label: str) -> None:
    assert strip_bom(bom + b"1\n") == (label, b"1\n")


def test_strip_bom_leaves_plain_input_alone() -> None:
    assert strip_bom(b"1\n") == (None, b"1\n")


def test_detect_source_prefers_bom_over_classifier(refusing_classifier) -> None:
    detection, rest = detect_source(codecs.BOM_UTF8 + b"1\n", refusing_classifier)

    assert detection == Detection(label="UTF-8", confidence=1.0, source="bom")
    assert rest == b"1\n"


def test_detect_source_classifies_remaining_bytes(fixed_classifier) -> None:
    classifier = fixed_classifier("GB2312", 0.99, "Chinese")

    detection, rest = detect_source(b"abc", classifier)

    assert detection.label == "GB2312"
    assert classifier.seen == [b"abc"]


def test_classify_wraps_chardet_result(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        detect_module.chardet,
        "detect",
        lambda data: {"encoding": "Big5", "confidence": 0.87, "language": "Chinese"},
    )

    assert classify(b"x") == Detection(label="Big5", confidence=0.87, language="Chinese")


def test_classify_without_guess_raises_detect_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        detect_module.chardet,
        "detect",
        lambda data: {"encoding": None, "confidence": 0.0, "language": None},
    )

    with pytest.raises(DetectError):
        classify(b"\x00\x01")


@pytest.mark.parametrize(
    "label, family",
    [
        ("GB2312", GB18030),
        ("GBK", GB18030),
        ("GB18030", GB18030),
        ("GB-18030", GB18030),
        ("Big5", BIG5),
        ("CP950", BIG5),
        ("UTF-16LE", UTF16LE),
        ("UTF-16BE", UTF16BE),
        ("utf-8", PASSTHROUGH),
        ("ascii", PASSTHROUGH),
        ("Windows-1252", PASSTHROUGH),
        ("x-no-such-charset", PASSTHROUGH),
    ],
)
def test_decoder_family(label: str, family: str) -> None:
    assert decoder_family(label)[0] == family


@pytest.mark.parametrize(
    "label, decoder_cls",
    [
        ("GB2312", GB18030Decoder),
        ("Big5", Big5Decoder),
        ("UTF-16BE", UTF16Decoder),
        ("utf-8", PassthroughDecoder),
    ],
)
def test_create_source_decoder(label: str, decoder_cls: type) -> None:
    detection = Detection(label=label, confidence=0.9)

    decoder = create_source_decoder(detection)

    assert isinstance(decoder, decoder_cls)
    assert decoder.detection is detection


def test_big5_hkscs_label_keeps_hkscs_codec() -> None:
    decoder = create_source_decoder(Detection(label="Big5-HKSCS", confidence=0.9))

    assert isinstance(decoder, Big5Decoder)
    assert decoder.codec == "big5hkscs"


def test_low_confidence_guess_falls_back_to_passthrough(log_stream) -> None:
    decoder = create_source_decoder(Detection(label="GB2312", confidence=0.3), min_confidence=0.5)

    assert isinstance(decoder, PassthroughDecoder)
    assert "below min_confidence" in log_stream.getvalue()


def test_bom_detection_ignores_min_confidence() -> None:
    decoder = create_source_decoder(Detection(label="UTF-16LE", confidence=1.0, source="bom"), min_confidence=1.0)

    assert isinstance(decoder, UTF16Decoder)


def test_decoders_report_their_family_names() -> None:
    assert GB18030Decoder().name() == "GB-18030"
    assert Big5Decoder().name() == "Big5"
    assert UTF16Decoder().name() == "UTF-16LE"
    assert UTF16Decoder(big_endian=True).name() == "UTF-16BE"
    assert PassthroughDecoder().name() == "passthrough"


def test_transcode_error_names_codec_and_offset() -> None:
    with pytest.raises(TranscodeError) as exc_info:
        Big5Decoder().decode(b"ok\xff\xff")

    assert exc_info.value.codec == "big5"
    assert exc_info.value.position == 2
    assert "big5" in str(exc_info.value)


def test_truncated_utf16_is_a_transcode_error() -> None:
    with pytest.raises(TranscodeError):
        normalize_source(codecs.BOM_UTF16_LE + b"1\x00\n")


def test_normalize_source_logs_detected_charset(fixed_classifier, log_stream) -> None:
    data = "字幕".encode("gb18030")

    out, detection = normalize_source(data, classifier=fixed_classifier("GB2312", 0.99, "Chinese"))

    assert out == "字幕".encode("utf-8")
    err = log_stream.getvalue()
    assert "Input charset: GB2312" in err
    assert "Chinese" in err
