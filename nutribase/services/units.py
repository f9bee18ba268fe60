def per_100g(amount: float, serving_size_in_grams: float) -> float:
    """
    Convert an amount measured against a serving into an amount per 100 g.

    The serving size must be positive; callers validate it first.
    """
    return amount / serving_size_in_grams * 100
