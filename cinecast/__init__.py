"""
CineCast - Catalogue de films et d'acteurs.

Ce package fournit la couche d'acces aux donnees d'un catalogue de films
lies a leurs acteurs (distribution), avec filtrage, tri et pagination
generiques.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, erreurs)
- infrastructure/ : Persistance SQLModel (traducteur de requetes, synchroniseur de distribution)
- adapters/ : Interface CLI
"""

__version__ = "0.1.0"
