def format_amount(value: float, currency: str = "₪") -> str:
    """Two decimals followed by the currency symbol, e.g. ``70.00₪``."""
    return f"{value:.2f}{currency}"
