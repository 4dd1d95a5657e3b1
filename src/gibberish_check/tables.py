"""Static reference tables for English-likeness scoring.

Every table here is read-only and built once at import time. The trigram and
quadgram sets are the ones the classification thresholds were tuned against;
changing them shifts every verdict.
"""

COMMON_QUADGRAMS: frozenset[str] = frozenset(
    {
        "tion", "atio", "that", "ther", "with", "ment", "ions", "this",
        "here", "from", "ould", "ting", "hich", "whic", "ctio", "ever",
        "they", "thin", "have", "othe", "were", "tive", "ough", "ight",
    }
)

COMMON_TRIGRAMS: frozenset[str] = frozenset(
    {
        "the", "and", "ing", "ion", "tio", "ent", "ati", "for", "her", "ter",
        "hat", "tha", "ere", "con", "res", "ver", "all", "ons", "nce", "men",
        "ith", "ted", "ers", "pro", "thi", "wit", "are", "ess", "not", "ive",
        "was", "ect", "rea", "com", "eve", "per", "int", "est", "sta", "cti",
        "ica", "ist", "ear", "ain", "one", "our", "iti", "rat", "ell", "ant",
    }
)

# Only the weighted-sum policy looks at bigrams.
COMMON_BIGRAMS: frozenset[str] = frozenset(
    {
        "th", "he", "in", "er", "an", "re", "on", "at", "en", "nd",
        "ti", "es", "or", "te", "of", "ed", "is", "it", "al", "ar",
        "st", "to", "nt", "ng", "se", "ha", "as", "ou", "io", "le",
        "ve", "co", "me", "de", "hi", "ri", "ro", "ic", "ne", "ea",
        "ra", "ce", "li", "ch", "ll", "be", "ma", "si", "om", "ur",
    }
)

ENGLISH_LETTERS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

VOWELS: frozenset[str] = frozenset("aeiou")

# Relative frequency of each letter in running English text.
LETTER_FREQUENCIES: tuple[tuple[str, float], ...] = (
    ("a", 0.08167),
    ("b", 0.01492),
    ("c", 0.02782),
    ("d", 0.04253),
    ("e", 0.12702),
    ("f", 0.02228),
    ("g", 0.02015),
    ("h", 0.06094),
    ("i", 0.06966),
    ("j", 0.00153),
    ("k", 0.00772),
    ("l", 0.04025),
    ("m", 0.02406),
    ("n", 0.06749),
    ("o", 0.07507),
    ("p", 0.01929),
    ("q", 0.00095),
    ("r", 0.05987),
    ("s", 0.06327),
    ("t", 0.09056),
    ("u", 0.02758),
    ("v", 0.00978),
    ("w", 0.02360),
    ("x", 0.00150),
    ("y", 0.01974),
    ("z", 0.00074),
)

# Code-point distances produced by the usual Caesar/ROT shifts.
CIPHER_SHIFTS: tuple[int, ...] = (1, 5, 13)
