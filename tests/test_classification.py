"""
tests/test_classification.py: End-to-end behavior with the bundled dictionary
================================================================
Canonical inputs from decoder pipelines: real sentences that must pass,
and ciphertext, encodings and binary noise that must be rejected.

Run: pytest tests/test_classification.py -v
"""

import pytest

from gibberish_check import Sensitivity, is_gibberish, looks_like_english
from gibberish_check.normalize import normalize, tokens

LOW, MEDIUM, HIGH = Sensitivity.LOW, Sensitivity.MEDIUM, Sensitivity.HIGH


ENGLISH_AT_MEDIUM = [
    "The quick brown fox jumps over the lazy dog.",
    "This is a simple English sentence.",
    "Hello, world!",
    "The function returns a boolean value.",
    "MiXeD cAsE text IS still English",
    "Hello! How are you? I'm doing well.",
    "This is a longer piece of text that contains multiple sentences and should "
    "definitely be recognized as valid English content.",
    "ther with tion",
    "hello xkcd world",
    "Room 101 is down the hall",
    "buffalo buffalo buffalo",
    "Visit https://www.example.com for more info",
    "Contact us at support@example.com",
    "Great party! #awesome #fun #weekend",
    "Having fun at the beach 🏖️ with friends 👥",
    "The sushi 寿司 was delicious",
    "The speed of light is 3.0 x 10^8 meters per second",
    "Water H2O and Carbon Dioxide CO2 are molecules",
    "Let x = 2y + 3z where y and z are variables",
    "Wow!!! This is amazing!!!",
    "Call me at 123-456-7890",
    "This    has    many    spaces",
    "This has\nmultiple\nlines",
    "Open C:\\Program Files\\App\\config.txt",
    '<div class="container">',
    '{"key": "value"}',
    "println!({});",
    "hello",
    "admin",
    "NASA FBI CIA",
    "Multiple base64 encodings",
    "Rcl maocr otmwi lit dnoen oehc 13 iron seah.",
    "Aiees Orttaster! Netts'e t ter oe es ntenoo",
    "The elephant walked slowly across the dusty savannah",
    "Cryptography protects confidential communications",
]

GIBBERISH_AT_MEDIUM = [
    "",
    "12345 67890",
    "你好世界",
    "!@#$%^&*()",
    "MOTCk4ywLLjjEE2=",
    "4-Fc@w7MF",
    "Vszzc hvwg wg zcbu",
    "a",
    "asdfgh jkl",
    "https://aaa.bbb.ccc/ddd",
    "const myVariable = someValue",
    "|-o-|",
    "l33t h4x0r",
    "4532 7153 5678 9012",
    "Column1\tColumn2\tColumn3",
    ")W?:!|.b",
    "'D<=BL C: 6@57? EI5FHN^ >I8;9 AM JCK",
    "y z  12 2 0 4 f\na03  1  4f rea'",
    "\x03 \x0e@:\x01`\x07\x18\x0e@/\x01<\x0ep;An\x02p\x19`o\x03<\x0cp6\x01J\x02p\x18`o\x03\r",
    "\x00*\x00\x1a\x00\r\x10\x07\x18\x01\x00\x01R\x00s\x00\x10\x00\x18`\rp\x06p\x03X\x01^\x00l\x00:@\x1d\x00\x0cP\x06 \x01\x0e",
    "xgcyzw Snh fabkqta,jedm ioopl  uru v",
    "x,jecmdizo l  orn pg y waSuhkfubtqva",
    "Par, axeeh maxkx. Mabl bl tg xqtfiex hy ehgz mxqm pbma ingvntmbhg!",
]


@pytest.mark.parametrize("text", ENGLISH_AT_MEDIUM)
def test_english_at_medium(text):
    assert not is_gibberish(text, MEDIUM)


@pytest.mark.parametrize("text", GIBBERISH_AT_MEDIUM)
def test_gibberish_at_medium(text):
    assert is_gibberish(text, MEDIUM)


def test_default_sensitivity_is_medium():
    assert is_gibberish("Vszzc hvwg wg zcbu") is is_gibberish("Vszzc hvwg wg zcbu", MEDIUM)
    assert is_gibberish("ther with tion") is False


# ═══════════════════════════════════════════
# ALL SENSITIVITIES
# ═══════════════════════════════════════════


@pytest.mark.parametrize("sensitivity", list(Sensitivity))
@pytest.mark.parametrize(
    "text",
    ["", "!@#$%^&*()", "xkcd mrrp zxcv qwty", "\x00\x01\x02\x03\x04\x05\x06\x07\x08\x0b"],
)
def test_gibberish_at_every_sensitivity(text, sensitivity):
    assert is_gibberish(text, sensitivity)


@pytest.mark.parametrize("sensitivity", list(Sensitivity))
@pytest.mark.parametrize(
    "text", ["The quick brown fox jumps over the lazy dog.", "hello", "admin"]
)
def test_english_at_every_sensitivity(text, sensitivity):
    assert not is_gibberish(text, sensitivity)


def test_rot_cipher_rejected_at_low():
    assert is_gibberish("Fcjjm! rfgq gq jmle rcvr?", LOW)


def test_common_ngrams_rejected_at_low():
    assert is_gibberish("ther with tion", LOW)
    assert not is_gibberish("ther with tion", HIGH)


@pytest.mark.parametrize(
    "text,low,medium,high",
    [
        ("Rcl maocr otmwi lit dnoen oehc 13 iron seah.", True, False, False),
        ("Par, axeeh maxkx. Mabl bl tg xqtfiex hy ehgz mxqm pbma ingvntmbhg!", True, True, False),
        ("NASA FBI CIA", False, False, False),
        ("The elephant walked slowly across the dusty savannah", False, False, False),
        ("Cryptography protects confidential communications", False, False, False),
        ("iron in the fire", False, False, False),
    ],
)
def test_verdict_per_sensitivity(text, low, medium, high):
    assert is_gibberish(text, LOW) is low
    assert is_gibberish(text, MEDIUM) is medium
    assert is_gibberish(text, HIGH) is high


# ═══════════════════════════════════════════
# PROPERTIES
# ═══════════════════════════════════════════

SAMPLES = ENGLISH_AT_MEDIUM + GIBBERISH_AT_MEDIUM + [
    "Fcjjm! rfgq gq jmle rcvr?",
    "hello xkcd mrrp",
    "iron in the fire",
]


@pytest.mark.parametrize("text", SAMPLES)
def test_deterministic(text):
    for sensitivity in Sensitivity:
        assert is_gibberish(text, sensitivity) is is_gibberish(text, sensitivity)


@pytest.mark.parametrize("text", SAMPLES)
def test_sensitivity_progression(text):
    low = is_gibberish(text, LOW)
    medium = is_gibberish(text, MEDIUM)
    high = is_gibberish(text, HIGH)
    if not low:
        assert not high
    if not medium:
        assert not high
    if not low and len(tokens(normalize(text))) > 1:
        assert not medium


def test_lone_dictionary_word_can_pass_low_but_not_medium():
    # Low accepts any text whose words are nearly all in the dictionary, while
    # Medium still asks a single word for n-gram support.
    assert not is_gibberish("background", LOW)
    assert is_gibberish("background", MEDIUM)
    assert not is_gibberish("background", HIGH)


# ═══════════════════════════════════════════
# WEIGHTED SUM (inverted polarity)
# ═══════════════════════════════════════════


@pytest.mark.parametrize(
    "text",
    [
        "The quick brown fox jumps over the lazy dog",
        "hello world",
        "This is a simple English sentence.",
    ],
)
def test_looks_like_english(text):
    assert looks_like_english(text)


@pytest.mark.parametrize(
    "text", ["", "!@#$%^&*()", "xkcd mrrp zxcv qwty", "\x00\x01\x02\x03\x04"]
)
def test_does_not_look_like_english(text):
    assert not looks_like_english(text)
