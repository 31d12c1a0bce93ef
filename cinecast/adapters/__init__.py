"""
Adaptateurs d'entree du catalogue (CLI).
"""
