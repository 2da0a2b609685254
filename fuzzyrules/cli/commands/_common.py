from ..argtypes import parse_assignments
from ...fuzzy.io.fz_parser import parse_fz
from ...fuzzy.model.rulebase import Rulebase


def load_model(args, inputs_attr: str = "at") -> Rulebase:
    """
    Wczytaj .fz, nadpisz normy z flag (--tnorm/--snorm) i ustaw wejścia
    (args.<inputs_attr>, lista 'var=value').
    """
    rb = parse_fz(args.model)
    rb.set_engine(tnorm=getattr(args, "tnorm", None), snorm=getattr(args, "snorm", None))
    inputs = parse_assignments(getattr(args, inputs_attr, None))
    if inputs:
        rb.database.set_inputs(inputs, clamp=bool(getattr(args, "clamp", False)))
    return rb
