"""
PathNorm walkthrough
Shows each step from raw icon SVG to canonical M/L/C/Z path data.

Usage: python samples/demo_normalize.py [icon.svg] [size]
"""
import sys

from pathnorm.svg.extract import extract_path_data, viewbox_size
from pathnorm.svg.formatter import format_commands
from pathnorm.svg.icons import place_icon
from pathnorm.svg.normalizer import normalize
from pathnorm.svg.tokenizer import tokenize

LUCIDE_HOUSE = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999a2 2 0 0 1 .709 1.528v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
</svg>'''

if len(sys.argv) > 1:
    with open(sys.argv[1], encoding="utf-8") as f:
        svg = f.read()
else:
    svg = LUCIDE_HOUSE
size = float(sys.argv[2]) if len(sys.argv) > 2 else 48.0

# ============================================================
# STEP 1: Extract shapes
# ============================================================
print("=" * 60)
print("STEP 1: EXTRACT SHAPES")
print("=" * 60)
print(f"  Canvas: {viewbox_size(svg)}")
paths = extract_path_data(svg)
for i, d in enumerate(paths):
    print(f"  Shape {i+1}: {d[:70]}")

# ============================================================
# STEP 2: Tokenize and normalize
# ============================================================
print()
print("=" * 60)
print("STEP 2: TOKENIZE + NORMALIZE")
print("=" * 60)
for i, d in enumerate(paths):
    tokens = tokenize(d)
    commands = normalize(tokens)
    print(f"\n--- Shape {i+1} ---")
    print(f"  Tokens: {len(tokens)}  ({''.join(t.kind for t in tokens)})")
    print(f"  Canonical commands: {len(commands)}  ({''.join(c.kind for c in commands)})")
    print(f"  {format_commands(commands)[:200]}")

# ============================================================
# STEP 3: Place at target size
# ============================================================
print()
print("=" * 60)
print(f"STEP 3: PLACE AT {size:g}x{size:g}")
print("=" * 60)
placement = place_icon(svg, size)
print(f"  Scale: {placement.scale:g}")
print(f"  Stroke width: {placement.stroke_width:.2f}")
for d in placement.paths:
    print(f"  {d[:200]}")
for w in placement.warnings:
    print(f"  WARNING: {w}")
