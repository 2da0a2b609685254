import json
import logging
from argparse import Namespace

import yaml

from .validate import cmd_validate
from .show import cmd_show
from .fire import cmd_fire
from .postfix import cmd_postfix
from ...fuzzy.core.types import FuzzyError

logger = logging.getLogger(__name__)

# kolejność wykonywania sekcji
_STEPS = (
    ("validate", cmd_validate),
    ("show", cmd_show),
    ("fire", cmd_fire),
    ("postfix", cmd_postfix),
)

def _ns(d: dict) -> Namespace:
    return Namespace(**d)

# klucze wymagane w sekcji (poza model)
_REQUIRED = {"postfix": ("rule",)}

def _load_cfg(path: str):
    with open(path, encoding="utf-8") as f:
        try:
            if path.lower().endswith((".yml", ".yaml")):
                cfg = yaml.safe_load(f)
            else:
                cfg = json.load(f)
        except (yaml.YAMLError, ValueError) as e:
            raise FuzzyError(f"{path}: cannot parse config: {e}") from e
    if not isinstance(cfg, dict):
        raise FuzzyError(f"{path}: config must be a mapping of sections")
    return cfg

def cmd_run(args):
    """
    Config:
      model: iris.fz            # domyślny --model dla każdej sekcji
      engine: {tnorm: prod, snorm: prob}
      validate: {}
      show: {at: {Steel: 12}}
      fire: {kv: [Steel=12, Stove=70], json: true}
      postfix: {rule: "IF ... THEN ..."}
    """
    cfg = _load_cfg(args.config)
    unknown = set(cfg) - {"model", "engine"} - {name for name, _ in _STEPS}
    if unknown:
        raise FuzzyError(f"{args.config}: unknown sections: {', '.join(sorted(unknown))}")

    eng = cfg.get("engine") or {}
    for name, step in _STEPS:
        if name not in cfg:
            continue
        if not isinstance(cfg[name] or {}, dict):
            raise FuzzyError(f"{args.config}: section '{name}' must be a mapping")
        section = dict(cfg[name] or {})
        section.setdefault("model", cfg.get("model"))
        if not section["model"]:
            raise FuzzyError(f"{args.config}: section '{name}' needs a model")
        missing = [k for k in _REQUIRED.get(name, ()) if not section.get(k)]
        if missing:
            raise FuzzyError(f"{args.config}: section '{name}' needs: {', '.join(missing)}")
        # silnik jako fallback (jeśli nie podano w sekcji)
        for k in ("tnorm", "snorm"):
            section.setdefault(k, eng.get(k))
        print(f"[run] {name}")
        logger.debug("run step %s with %s", name, section)
        step(_ns(section))
