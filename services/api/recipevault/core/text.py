import re

# Keycap digits as pasted from social captions ("1️⃣ Boil water")
KEYCAP_STEPS = {
    '1️⃣': '1.', '2️⃣': '2.', '3️⃣': '3.', '4️⃣': '4.', '5️⃣': '5.',
    '6️⃣': '6.', '7️⃣': '7.', '8️⃣': '8.', '9️⃣': '9.', '0️⃣': '0.',
    '🔟': '10.'
}

VULGAR_FRACTIONS = {
    '½': '1/2', '⅓': '1/3', '⅔': '2/3', '¼': '1/4', '¾': '3/4',
    '⅕': '1/5', '⅖': '2/5', '⅗': '3/5', '⅘': '4/5', '⅙': '1/6',
    '⅚': '5/6', '⅛': '1/8', '⅜': '3/8', '⅝': '5/8', '⅞': '7/8'
}

_VULGAR_RE = re.compile(r"(?:(\d)\s*)?([" + "".join(VULGAR_FRACTIONS) + r"])")

BULLET_RE = re.compile(r"^[-•*]\s*")
NUMBERED_RE = re.compile(r"^\d+\.")

# Step markers: "1." / "1)" / "Step 1:" / "Step 1 -"
STEP_MARKER_RE = re.compile(r"^(?:step\s*\d{1,3}\s*[:\-.)]?|\d+[.)](?!\d))\s*", re.IGNORECASE)


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace to single spaces and trim."""
    if not text:
        return ""
    return re.sub(r"\s+", " ", text).strip()


def split_lines(text: str) -> list[str]:
    """Split raw text into trimmed, non-empty lines."""
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def strip_bullet(line: str) -> str:
    """Remove one leading list bullet (-, •, *)."""
    return BULLET_RE.sub("", line, count=1).strip()


def starts_with_list_marker(line: str) -> bool:
    return bool(NUMBERED_RE.match(line) or BULLET_RE.match(line))


def normalize_keycaps(text: str) -> str:
    for k, v in KEYCAP_STEPS.items():
        text = text.replace(k, v)
    return text


def strip_step_marker(line: str) -> str:
    """
    Remove a leading step marker and bullet from an instruction line.
    "1. Preheat oven" -> "Preheat oven", "Step 2: Mix" -> "Mix", "• Serve" -> "Serve"
    """
    s = normalize_keycaps(line).strip()
    s = STEP_MARKER_RE.sub("", s, count=1)
    s = BULLET_RE.sub("", s, count=1)
    return collapse_whitespace(s)


def expand_vulgar_fractions(text: str) -> str:
    """
    Rewrite unicode fractions as ascii, keeping mixed numbers apart.
    "1½ cups" -> "1 1/2 cups", "¼ tsp" -> "1/4 tsp"
    """
    def _repl(m: re.Match) -> str:
        whole, frac = m.group(1), VULGAR_FRACTIONS[m.group(2)]
        return f"{whole} {frac}" if whole else frac

    return _VULGAR_RE.sub(_repl, text)


def strip_wrapping_quotes(text: str) -> str:
    return re.sub(r"^[\"'“”‘’]|[\"'“”‘’]$", "", text)
