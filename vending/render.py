def render_currency(value: int, symbol: str = "£") -> str:
    """Formats minor units for display (ex: 134 -> '£1.34')"""
    sign = "-" if value < 0 else ""
    major, minor = divmod(abs(value), 100)
    return f"{sign}{symbol}{major:,}.{minor:02d}"
