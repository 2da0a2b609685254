import sys
from typing import List

from ._common import load_model


# ========= utils: ANSI / pretty =========

_RESET = "\x1b[0m"

def _use_ansi() -> bool:
    return sys.stdout.isatty()

def _ansi_color(mu: float) -> str:
    """
    Kolor wg przynależności (μ):
      ≥ 0.50 → zielony
      ≥ 0.20 → żółty
      < 0.20 → szary
    """
    if not _use_ansi():
        return ""
    if mu >= 0.50:
        return "\x1b[32m"  # green
    if mu >= 0.20:
        return "\x1b[33m"  # yellow
    return "\x1b[90m"      # grey


# ========= main =========

def cmd_show(args) -> None:
    """
    Flagi:
      --model PATH                 : plik .fz
      --at x=1 y=2 / --at "x=1,y=2": wejścia, dla których liczone są μ i α (opcjonalnie)
      --fired-only                 : pokaż tylko reguły z α >= --min-alpha
      --min-alpha FLOAT            : próg α dla --fired-only (domyślnie 0.0)
    """
    rb = load_model(args)
    with_values = bool(getattr(args, "at", None))
    fired_only = bool(getattr(args, "fired_only", False))
    min_alpha = float(getattr(args, "min_alpha", 0.0))

    # --- Variables ---
    print("Variables:")
    for name, var in rb.database.variables.items():
        if with_values:
            parts: List[str] = []
            for label in var.labels:
                mu = var.membership_of(label)
                color = _ansi_color(mu)
                reset = _RESET if color else ""
                parts.append(f"{color}{label.name}({mu:.2f}){reset}")
            print(f"  {name} [{var.vmin},{var.vmax}] = {var.numeric_input:g} -> " + ", ".join(parts))
        else:
            print(f"  {name} [{var.vmin},{var.vmax}] -> labels: {', '.join(var.terms)}")

    # --- Rules ---
    print(f"Rules (tnorm={rb.tnorm}, snorm={rb.snorm}):")
    shown = 0
    for name, rule in rb.rules.items():
        suffix = ""
        if with_values:
            alpha = rule.firing_strength()
            if fired_only and alpha < min_alpha:
                continue
            suffix = f"  α={alpha:.4f}"
        print(f"  {name}: {rule.text}{suffix}")
        print(f"      postfix: {rule.to_postfix_string()}")
        shown += 1

    if shown == 0:
        print("  (no rules to show with these filters)")
