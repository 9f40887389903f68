"""sources.py"""


def services(parse_result, position):
    """Suggestion source used by tabwise.yaml."""
    if parse_result.has_symbol("--dry-run"):
        return ["web", "api", "worker", "scratch"]
    return ["web", "api", "worker"]
