"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur
et la taxonomie d'erreurs.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (Movie, Actor)
- ports/ : Interfaces abstraites définissant les contrats des repositories
- value_objects/ : Objets valeur immutables (descripteurs de requête, commandes)
"""
