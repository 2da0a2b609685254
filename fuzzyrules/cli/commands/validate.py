from ...fuzzy.io.fz_parser import parse_fz

def cmd_validate(args):
    rb = parse_fz(args.model)
    labels = sum(len(v.terms) for v in rb.database.variables.values())
    print(f"OK: variables={len(rb.database)}, labels={labels}, rules={len(rb.rules)}")
    print(f"tnorm={rb.tnorm}, snorm={rb.snorm}")
