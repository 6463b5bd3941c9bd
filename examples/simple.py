import sys

from songcraft import chart, diatonic_palette, transpose_text

text = """[Verse]
C | Am G | %
[Chorus]
F{3} G{1} | C
"""
tokens = chart.parse_chart(text)

# Section headers and bars in source order
for token in tokens:
    if isinstance(token, chart.SectionToken):
        sys.stdout.write(f"[{token.title}]\n")
    else:
        sys.stdout.write(" ".join(f"{c.symbol}{{{c.beats}}}" for c in token.chords) + "\n")

# Palette for the song key
sys.stdout.write(" ".join(diatonic_palette("Bb").triads) + "\n")  # "Bb Cm Dm Eb F Gm Adim"

# Inline ChordPro transposition
sys.stdout.write(transpose_text("[C]Hello [G]world", 2) + "\n")  # "[D]Hello [A]world"
