from talisman.hex_detector import HexDetector

HEX_TEXT = "6A6176617375636B73676F726F636B7368616861"


def test_does_not_detect_safe_text():
    assert HexDetector().check("pretty safe") is None


def test_detects_hex_text():
    assert HexDetector().check(HEX_TEXT) == HEX_TEXT


def test_returns_whole_word_when_hex_run_is_embedded():
    word = f"key={HEX_TEXT};"
    assert HexDetector().check(word) == word


def test_low_entropy_hex_is_not_detected():
    assert HexDetector().check("a" * 40) is None