"""Pick a bitmap-font glyph for every character, with a placeholder for misses."""

from macroman_encode import Mapped, encode

PLACEHOLDER = 0x3F  # "?"

text = "Cre\N{COMBINING GRAVE ACCENT}me bru\N{COMBINING CIRCUMFLEX ACCENT}l\xe9e \N{SNOWMAN}"

for offset, length, outcome in encode(text):
    span = text[offset : offset + length]
    match outcome:
        case Mapped(code=code):
            print(f"{offset:3} {span!r:12} -> glyph 0x{code:02X}")
        case _:
            missing = f"U+{outcome.codepoint:04X} missing"
            print(f"{offset:3} {span!r:12} -> glyph 0x{PLACEHOLDER:02X} ({missing})")
