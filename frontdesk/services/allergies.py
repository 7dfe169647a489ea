COMMON_ALLERGIES = [
    'Penicillin',
    'Amoxicillin',
    'Sulfa Drugs',
    'Aspirin',
    'Ibuprofen',
    'Codeine',
    'Morphine',
    'Cephalosporins',
    'Tetracycline',
    'Erythromycin',
    'Insulin',
    'Local Anesthetics',
    'Iodine',
    'Contrast Dye',
    'Latex',
    'Peanuts',
    'Tree Nuts',
    'Shellfish',
    'Fish',
    'Eggs',
    'Milk',
    'Soy',
    'Wheat',
    'Gluten',
    'Sesame',
    'Pollen',
    'Dust Mites',
    'Mold',
    'Pet Dander',
    'Bee Stings',
    'Nickel',
    'Adhesive Tape',
]


def suggest(query: str, exclude=()) -> list:
    """Case-insensitive prefix match, skipping allergies already chosen."""
    query = (query or '').strip().lower()
    if not query:
        return []
    chosen = {e.lower() for e in exclude}
    return sorted(a for a in COMMON_ALLERGIES if a.lower().startswith(query) and a.lower() not in chosen)
