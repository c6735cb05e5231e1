"""Lossy Latin-1 / Latin Extended-A to ASCII mapping used for grammar checks.

German umlauts expand to two letters (Ä -> AE), ligatures to their pair, and the
remaining accented letters drop their diacritic.
"""
from types import MappingProxyType

TRANSLITERATION = MappingProxyType({
    "À": "A", "Á": "A", "Â": "A", "Ã": "A", "Ä": "AE", "Å": "A",
    "Æ": "AE", "Ç": "C", "È": "E", "É": "E", "Ê": "E", "Ë": "E",
    "Ì": "I", "Í": "I", "Î": "I", "Ï": "I", "Ð": "ETH", "Ñ": "N",
    "Ò": "O", "Ó": "O", "Ô": "O", "Õ": "O", "Ö": "OE", "×": "x",
    "Ø": "O", "Ù": "U", "Ú": "U", "Û": "U", "Ü": "UE", "Ý": "Y",
    "Þ": "THORN", "ß": "ss",
    "à": "a", "á": "a", "â": "a", "ã": "a", "ä": "ae", "å": "a",
    "æ": "ae", "ç": "c", "è": "e", "é": "e", "ê": "e", "ë": "e",
    "ì": "i", "í": "i", "î": "i", "ï": "i", "ð": "eth", "ñ": "n",
    "ò": "o", "ó": "o", "ô": "o", "õ": "o", "ö": "oe", "÷": "/",
    "ø": "o", "ù": "u", "ú": "u", "û": "u", "ü": "ue", "ý": "y",
    "þ": "thorn", "ÿ": "y",
    "Ă": "A", "ă": "a", "Ą": "A", "ą": "a", "Ć": "C", "ć": "c",
    "Č": "C", "č": "c", "Ď": "D", "ď": "d", "Đ": "D", "đ": "d",
    "Ę": "E", "ę": "e", "Ě": "E", "ě": "e", "Ĺ": "L", "ĺ": "l",
    "Ľ": "L", "ľ": "l", "Ł": "L", "ł": "l", "Ń": "N", "ń": "n",
    "Ň": "N", "ň": "n", "Ő": "OE", "ő": "oe", "Œ": "OE", "œ": "oe",
    "Ŕ": "R", "ŕ": "r", "Ř": "R", "ř": "r", "Ś": "S", "ś": "s",
    "Ş": "S", "ş": "s", "Š": "S", "š": "s", "Ţ": "T", "ţ": "t",
    "Ť": "T", "ť": "t", "Ů": "U", "ů": "u", "Ű": "UE", "ű": "ue",
    "Ÿ": "Y", "Ź": "Z", "ź": "z", "Ż": "Z", "ż": "z", "Ž": "Z",
    "ž": "z", "ƒ": "f",
})

_TABLE = str.maketrans(dict(TRANSLITERATION))


def transliterate(text: str) -> str:
    return text.translate(_TABLE)
