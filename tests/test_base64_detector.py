import base64

from talisman.base64_detector import Base64AggressiveDetector, Base64Detector

HIGH_ENTROPY_TEXT = "wJalrXUtnFEMI/K7MDENG/bPxRfiCYEXAMPLEKEY"
LONG_METHOD_NAME = (
    "TestBase64DetectorShouldNotDetectLongMethodNamesEvenWithRidiculousHighEntropyWordsMightExist"
)


def test_does_not_detect_safe_text():
    assert Base64Detector().check("pretty safe") is None


def test_detects_base64_text():
    assert Base64Detector().check(HIGH_ENTROPY_TEXT) == HIGH_ENTROPY_TEXT


def test_does_not_detect_candidates_made_of_words():
    detector = Base64Detector()
    detector.words_only = lambda candidate: True
    assert detector.check(LONG_METHOD_NAME) is None


def test_words_only_receives_candidate():
    seen = []
    detector = Base64Detector()
    detector.words_only = lambda candidate: seen.append(candidate) or False
    assert detector.check(HIGH_ENTROPY_TEXT) == HIGH_ENTROPY_TEXT
    assert seen == [HIGH_ENTROPY_TEXT]


def test_higher_threshold_suppresses_detection():
    assert Base64Detector(entropy_threshold=10.0).check(HIGH_ENTROPY_TEXT) is None


def test_non_positive_threshold_keeps_default():
    assert Base64Detector(entropy_threshold=0.0).entropy_threshold == 4.5


def test_low_entropy_base64_found_only_in_aggressive_mode():
    encoded = base64.b64encode(b"\x00" * 15).decode()
    assert Base64Detector().check(encoded) is None
    assert Base64Detector(aggressive=True).check(encoded) == encoded


def test_aggressive_detector_round_trip():
    encoded = base64.b64encode(b"placeholder sample!").decode()
    assert Base64AggressiveDetector().test(encoded) == encoded


def test_aggressive_detector_finds_piece_after_delimiter():
    encoded = base64.b64encode(b"placeholder sample!").decode()
    assert Base64AggressiveDetector().test(f"prefix.{encoded}") == encoded


def test_aggressive_detector_ignores_short_pieces():
    assert Base64AggressiveDetector().test("YWJj") is None


def test_aggressive_detector_ignores_invalid_base64():
    assert Base64AggressiveDetector().test("abcdefghijklmnopq!") is None