import json

from ._common import load_model

def cmd_fire(args):
    rb = load_model(args, inputs_attr="kv")
    threshold = float(getattr(args, "threshold", 0.0) or 0.0)
    selected = getattr(args, "rule", None)

    infos = rb.explain(threshold=threshold)
    if selected:
        rb.get_rule(selected)  # nieznana nazwa -> FuzzyError
        infos = [r for r in infos if r["rule"] == selected]

    if getattr(args, "json", False):
        print(json.dumps(infos, indent=2))
        return
    for r in infos:
        ants = ", ".join(f"{a['var']} is {a['label']} (μ={a['mu']:.3f})" for a in r["antecedent"])
        cons = r["consequent"]
        print(f"{r['rule']}: alpha={r['alpha']:.4f} -> {cons['var']} is {cons['label']}  [{ants}]")
