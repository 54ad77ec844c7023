"""Letter normalization for guess comparisons."""

# Polish diacritics folded onto their base Latin letter; both z variants map to "z"
_FOLD = str.maketrans("ąćęłńóśźż", "acelnoszz")


def normalize(letter: str) -> str:
    """Lower-case a letter and fold its diacritic, so 'Ą' and 'a' compare equal."""
    return letter.lower().translate(_FOLD)


def normalize_word(word: str) -> str:
    """Normalize every character of a word."""
    return "".join(normalize(char) for char in word)


def contains_diacritics(word: str) -> bool:
    """Check if a word contains any of the folded diacritic letters."""
    return normalize_word(word) != word.lower()
