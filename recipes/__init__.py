"""Recipe profit domain: models, calculators, navigation and screens."""
