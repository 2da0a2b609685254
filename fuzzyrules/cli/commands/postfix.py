from ...fuzzy.core.rule import Rule
from ...fuzzy.io.fz_parser import parse_fz

def cmd_postfix(args):
    """Compile a single rule against the model's variables and print its RPN form."""
    rb = parse_fz(args.model)
    rule = Rule(rb.database, "<cli>", args.rule)
    print(rule.to_postfix_string())
    print(f"=> {rule.output}")
