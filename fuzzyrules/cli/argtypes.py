import argparse

from ..fuzzy.core import norms

TNORM_CHOICES = list(norms.TNORMS)
SNORM_CHOICES = list(norms.SNORMS)

def parse_assignment(s: str):
    """'Steel=12.5' -> ('Steel', 12.5)."""
    if "=" not in s:
        raise argparse.ArgumentTypeError(f"Invalid item: '{s}' (expected 'var=value').")
    k, v = (t.strip() for t in s.split("=", 1))
    if not k or not v:
        raise argparse.ArgumentTypeError(f"Empty key or value in: '{s}'.")
    try:
        return k, float(v)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a number: '{v}' in '{s}'.") from None

def parse_assignments(items):
    """
    Akceptuje:
      - None
      - ["x=1", "y=2"] lub ["x=1, y=2"]
      - "x=1,y=2" albo {"x": 1, "y": 2} (z pliku konfiguracyjnego)
    Zwraca dict nazwa -> wartość.
    """
    if not items:
        return {}
    if isinstance(items, dict):
        return {str(k): float(v) for k, v in items.items()}
    if isinstance(items, str):
        items = [items]
    out = {}
    for elem in items:
        for tok in str(elem).split(","):
            tok = tok.strip()
            if tok:
                k, v = parse_assignment(tok)
                out[k] = v
    return out
