import argparse
from ..argtypes import TNORM_CHOICES, SNORM_CHOICES
# importy komend:
from .validate import cmd_validate
from .show import cmd_show
from .fire import cmd_fire
from .postfix import cmd_postfix
from .run import cmd_run

def _engine_args(sp):
    g = sp.add_argument_group("Operatory")
    g.add_argument("--tnorm", choices=TNORM_CHOICES, help="AND; gdy brak, używa tnorm z modelu")
    g.add_argument("--snorm", choices=SNORM_CHOICES, help="OR; gdy brak, używa snorm z modelu")

def build_parser():
    fmt = argparse.ArgumentDefaultsHelpFormatter
    ap = argparse.ArgumentParser(
        prog="fuzzyrules",
        description="Fuzzy IF..THEN rules: compile to postfix and evaluate firing strengths",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Przykłady:\n"
            "  fuzzyrules validate --model furnace.fz\n"
            "  fuzzyrules show --model furnace.fz --at Steel=12 Stove=70\n"
            "  fuzzyrules fire --model furnace.fz Steel=12 Stove=70 --json\n"
            "  fuzzyrules postfix --model furnace.fz 'IF Steel is Cold and (Stove is Warm or Stove is Hot) THEN Pressure is Low'\n"
            "  fuzzyrules run --config pipeline.yaml\n"
        )
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    sub = ap.add_subparsers(dest="cmd", required=True)

    # validate
    sp_v = sub.add_parser("validate", help="Wczytaj model i skompiluj reguły", formatter_class=fmt)
    sp_v.add_argument("--model", required=True)
    sp_v.set_defaults(func=cmd_validate)

    # show
    sp_s = sub.add_parser("show", help="Pokaż zmienne/etykiety/reguły; opcj. wartości w punkcie", formatter_class=fmt)
    sp_s.add_argument("--model", required=True)
    sp_s.add_argument("--at", nargs="*", help="var=value ...")
    sp_s.add_argument("--clamp", action="store_true", help="przytnij wejścia do zakresu zmiennej")
    sp_s.add_argument("--fired-only", action="store_true", help="Pokaż tylko reguły z α >= --min-alpha (wymaga --at)")
    sp_s.add_argument("--min-alpha", type=float, default=0.0, help="Próg α dla --fired-only")
    _engine_args(sp_s)
    sp_s.set_defaults(func=cmd_show)

    # fire
    sp_f = sub.add_parser("fire", help="Siła odpalenia reguł dla próbki", formatter_class=fmt)
    sp_f.add_argument("--model", required=True)
    sp_f.add_argument("kv", nargs="+", help="var=value pairs")
    sp_f.add_argument("--rule", help="tylko reguła o tej nazwie")
    sp_f.add_argument("--json", action="store_true")
    sp_f.add_argument("--threshold", type=float, default=0.0)
    sp_f.add_argument("--clamp", action="store_true", help="przytnij wejścia do zakresu zmiennej")
    _engine_args(sp_f)
    sp_f.set_defaults(func=cmd_fire)

    # postfix
    sp_p = sub.add_parser("postfix", help="Skompiluj regułę i pokaż postać RPN", formatter_class=fmt)
    sp_p.add_argument("--model", required=True)
    sp_p.add_argument("rule", help="'IF ... THEN ...'")
    sp_p.set_defaults(func=cmd_postfix)

    # run
    sp_run = sub.add_parser("run", help="Uruchom kroki z pliku konfiguracyjnego", formatter_class=fmt)
    sp_run.add_argument("--config", required=True, help="Ścieżka do pliku .yaml/.yml/.json")
    sp_run.set_defaults(func=cmd_run)

    return ap
